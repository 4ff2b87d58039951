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
This module contains the XSD names recognized by the schema loader.
Names are local names: the loader matches XSD tags regardless of prefix.
"""

###
# XSD declarations and definitions
XSD_SCHEMA = 'schema'
XSD_ELEMENT = 'element'
XSD_ATTRIBUTE = 'attribute'
XSD_SIMPLE_TYPE = 'simpleType'
XSD_COMPLEX_TYPE = 'complexType'
XSD_RESTRICTION = 'restriction'

###
# Model groups searched for child element declarations
XSD_SEQUENCE = 'sequence'
XSD_CHOICE = 'choice'
XSD_ALL = 'all'
XSD_MODEL_GROUPS = frozenset((XSD_SEQUENCE, XSD_CHOICE, XSD_ALL))

###
# Supported facets
XSD_ENUMERATION = 'enumeration'
XSD_MIN_INCLUSIVE = 'minInclusive'
XSD_MAX_INCLUSIVE = 'maxInclusive'
XSD_PATTERN = 'pattern'

###
# Built-in scalar types
XSD_INTEGER_TYPES = frozenset((
    'integer', 'int', 'long', 'short', 'byte',
    'nonNegativeInteger', 'positiveInteger', 'nonPositiveInteger', 'negativeInteger',
    'unsignedLong', 'unsignedInt', 'unsignedShort', 'unsignedByte',
))
"Integer family: values must be optionally signed digit strings"

XSD_FLOAT_TYPES = frozenset(('float', 'double', 'decimal'))
"Floating family: values must be optionally signed decimal literals"

XSD_BUILTIN_TYPES = XSD_INTEGER_TYPES | XSD_FLOAT_TYPES | frozenset((
    'anyType', 'anySimpleType', 'string', 'normalizedString', 'token', 'boolean',
    'date', 'dateTime', 'time', 'duration', 'anyURI', 'QName', 'ID', 'IDREF',
    'NCName', 'Name', 'language', 'hexBinary', 'base64Binary',
))
