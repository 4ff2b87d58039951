#
# Copyright (c), 2021, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Type aliases for static typing analysis.
"""
from decimal import Decimal
from typing import Union
from xml.etree.ElementTree import Element

__all__ = ['ElementType', 'NumericValueType', 'FacetValueType']

##
# Type aliases for ElementTree
ElementType = Element

##
# Type aliases for facet values
NumericValueType = Union[int, float, Decimal]
FacetValueType = Union[int, float, str]
