#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the base exception classes for the package.
"""
from typing import Optional


class MmpSchemaException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class MmpSchemaTypeError(MmpSchemaException, TypeError):
    pass


class MmpSchemaValueError(MmpSchemaException, ValueError):
    pass


class SchemaSyntaxError(MmpSchemaException, ValueError):
    """
    Raised when the XSD source cannot be loaded: the markup is not well-formed
    or a declaration has an invalid value.

    :param message: the error message.
    :param line: the line of the XSD source where the error was found, if known.
    """
    def __init__(self, message: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f'{self.message} (line {self.line})'


class SchemaModelDepthError(SchemaSyntaxError):
    """Raised when the nesting of XSD structures exceeds limits.MAX_MODEL_DEPTH."""


__all__ = ['MmpSchemaException', 'MmpSchemaTypeError', 'MmpSchemaValueError',
           'SchemaSyntaxError', 'SchemaModelDepthError']
