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
This module contains the evaluation of simple type rules on leaf values
and the parsing helpers of facet values shared with the schema loader.
"""
import re
from collections.abc import Iterator
from decimal import Decimal
from functools import lru_cache
from typing import Optional, Pattern

from elementpath import translate_pattern

from mmpschema.aliases import FacetValueType, NumericValueType
from mmpschema.names import XSD_INTEGER_TYPES, XSD_FLOAT_TYPES
from mmpschema.utils.qnames import local_name
from .exceptions import Diagnostic, InvalidType, InvalidValue, OutOfRange, InvalidFormat
from .models import SimpleTypeRule

INTEGER_PATTERN = re.compile(r'-?[0-9]+')
FLOAT_PATTERN = re.compile(r'-?[0-9]*(\.[0-9]+)?')


def parse_facet_value(value: str, base_type: Optional[str]) -> FacetValueType:
    """
    Coerces a bound facet value using the base type of the restriction.
    Raises `ValueError` if the value is not valid for a numeric base type.
    """
    name = local_name(base_type) if base_type else None
    if name in XSD_INTEGER_TYPES:
        return int(value.strip())
    elif name in XSD_FLOAT_TYPES:
        return float(value.strip())
    return value


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compiles an XSD pattern facet to a Python regular expression. The `^` and `$`
    anchors and lazy quantifiers are accepted, values are always matched in full.
    Raises an `elementpath.RegexError` or a `re.error` for an invalid pattern.
    """
    python_pattern = translate_pattern(
        pattern=pattern,
        back_references=False,
        lazy_quantifiers=True,
        anchors=True,
    )
    return re.compile(python_pattern)


def coerce_value(value: str, rule: SimpleTypeRule) -> Optional[NumericValueType]:
    """
    Coerces a text value with the base type of the rule. Returns `None` if the
    value is not a valid literal for a numeric base type or if the base type
    is not numeric.
    """
    if rule.is_integer:
        if INTEGER_PATTERN.fullmatch(value) is None:
            return None
        try:
            return int(value)
        except ValueError:
            # Digit strings beyond the int conversion limit, compared exactly
            return Decimal(value)
    elif rule.is_float:
        if value in ('', '.', '-') or FLOAT_PATTERN.fullmatch(value) is None:
            return None
        return float(value)
    return None


def iter_value_errors(value: str,
                      rule: SimpleTypeRule,
                      path: Optional[str] = None,
                      location: Optional[str] = None) -> Iterator[Diagnostic]:
    """
    Checks a stripped not empty text value against a simple type rule.
    Checks are made in order: base type, enumeration, range and pattern.
    If the base type check fails the other checks are skipped.

    :param value: the text value to check.
    :param rule: the simple type rule.
    :param path: the path of the element that contains the value.
    :param location: an optional location hint to add to diagnostics.
    """
    restrictions = rule.restrictions
    if not restrictions and not rule.is_numeric:
        return

    number = coerce_value(value, rule)
    if number is None and rule.is_numeric:
        yield InvalidType(path, value, rule.primitive_name or '', location)
        return

    if restrictions.enumeration is not None and value not in restrictions.enumeration:
        yield InvalidValue(path, value, restrictions.enumeration, location)

    if number is not None:
        min_value = restrictions.min_inclusive
        if isinstance(min_value, (int, float, Decimal)) and number < min_value:
            yield OutOfRange(path, value, min_value, True, location)

        max_value = restrictions.max_inclusive
        if isinstance(max_value, (int, float, Decimal)) and number > max_value:
            yield OutOfRange(path, value, max_value, False, location)

    if restrictions.pattern is not None:
        if compile_pattern(restrictions.pattern).fullmatch(value) is None:
            yield InvalidFormat(path, value, restrictions.pattern, location)


def evaluate(value: str, rule: SimpleTypeRule,
             path: Optional[str] = None,
             location: Optional[str] = None) -> list[Diagnostic]:
    """Returns the list of diagnostics of a value checked against a simple type rule."""
    return list(iter_value_errors(value, rule, path, location))
