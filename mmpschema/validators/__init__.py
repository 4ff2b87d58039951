#
# Copyright (c), 2016-2020, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Schema model, schema loader and validators subpackage.
"""
from .exceptions import Diagnostic, DocumentSyntaxError, StructuralMismatchError, \
    RootMismatchError, MissingRequiredElement, MissingRequiredValue, UnknownElement, \
    InvalidType, InvalidValue, OutOfRange, InvalidFormat
from .models import Restrictions, SimpleTypeRule, AttributeDefinition, \
    ComplexStructure, TypeReference, InlineSimpleType, InlineStructure, \
    ElementDefinition, RootElement, Schema
from .facets import evaluate, iter_value_errors
from .schemas import SchemaLoader, load_schema
from .wellformedness import check_well_formedness, iter_tag_errors
from .validation import ValidationContext, iter_structure_errors

__all__ = ['Diagnostic', 'DocumentSyntaxError', 'StructuralMismatchError',
           'RootMismatchError', 'MissingRequiredElement', 'MissingRequiredValue',
           'UnknownElement', 'InvalidType', 'InvalidValue', 'OutOfRange', 'InvalidFormat',
           'Restrictions', 'SimpleTypeRule', 'AttributeDefinition', 'ComplexStructure',
           'TypeReference', 'InlineSimpleType', 'InlineStructure', 'ElementDefinition',
           'RootElement', 'Schema', 'evaluate', 'iter_value_errors', 'SchemaLoader',
           'load_schema', 'check_well_formedness', 'iter_tag_errors',
           'ValidationContext', 'iter_structure_errors']
