#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import limits, translation
from .exceptions import MmpSchemaException, MmpSchemaTypeError, MmpSchemaValueError, \
    SchemaSyntaxError, SchemaModelDepthError
from .locations import get_line_number, find_location
from .utils.logger import set_logging_level
from .documents import iter_errors, validate, is_valid, validate_many

from .validators import (
    Diagnostic, DocumentSyntaxError, StructuralMismatchError, RootMismatchError,
    MissingRequiredElement, MissingRequiredValue, UnknownElement, InvalidType,
    InvalidValue, OutOfRange, InvalidFormat, Restrictions, SimpleTypeRule,
    AttributeDefinition, ComplexStructure, TypeReference, InlineSimpleType,
    InlineStructure, ElementDefinition, RootElement, Schema, evaluate,
    load_schema, check_well_formedness, iter_structure_errors
)

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2024, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'limits', 'translation', 'MmpSchemaException', 'MmpSchemaTypeError', 'MmpSchemaValueError',
    'SchemaSyntaxError', 'SchemaModelDepthError', 'get_line_number', 'find_location',
    'set_logging_level', 'iter_errors', 'validate', 'is_valid', 'validate_many',
    'Diagnostic', 'DocumentSyntaxError', 'StructuralMismatchError', 'RootMismatchError',
    'MissingRequiredElement', 'MissingRequiredValue', 'UnknownElement', 'InvalidType',
    'InvalidValue', 'OutOfRange', 'InvalidFormat', 'Restrictions', 'SimpleTypeRule',
    'AttributeDefinition', 'ComplexStructure', 'TypeReference', 'InlineSimpleType',
    'InlineStructure', 'ElementDefinition', 'RootElement', 'Schema', 'evaluate',
    'load_schema', 'check_well_formedness', 'iter_structure_errors',
]
