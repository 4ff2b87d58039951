#
# Copyright (c), 2016-2020, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package protection limits. Values can be changed after import to set different limits."""
import sys
from types import ModuleType
from typing import Any

from mmpschema.exceptions import MmpSchemaTypeError, MmpSchemaValueError


class LimitsModule(ModuleType):
    def __setattr__(self, attr: str, value: Any) -> None:
        if attr not in ('MAX_MODEL_DEPTH', 'MAX_XML_DEPTH'):
            pass
        elif not isinstance(value, int) or isinstance(value, bool):
            raise MmpSchemaTypeError('Value {!r} is not an int'.format(value))
        elif attr == 'MAX_MODEL_DEPTH':
            if value < 5:
                raise MmpSchemaValueError('{} limit must be at least 5'.format(attr))
        elif value < 1:
            raise MmpSchemaValueError('{} limit must be at least 1'.format(attr))

        super().__setattr__(attr, value)


sys.modules[__name__].__class__ = LimitsModule


MAX_MODEL_DEPTH = 15
"""
Maximum nesting depth of XSD inline structures. A `SchemaModelDepthError`
is raised by the loader if this limit is exceeded.
"""

MAX_XML_DEPTH = 1000
"""
Maximum depth of XML data. A fatal `DocumentSyntaxError` diagnostic is
reported if this limit is exceeded.
"""
