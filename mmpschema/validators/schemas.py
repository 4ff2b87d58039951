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
This module contains the loader that builds a schema model from XSD source text.

The supported subset is: global named simple types defined by restriction
(enumeration, minInclusive, maxInclusive and pattern facets), global named
complex types and inline complex types with child elements declared in
sequence, choice or all groups, attribute declarations and a root element.
XSD tags are matched by local name, so any prefix is accepted.
"""
import re
from collections.abc import Iterator
from typing import Optional, Union
from xml.etree import ElementTree

from elementpath import RegexError

from mmpschema import limits
from mmpschema.aliases import ElementType
from mmpschema.exceptions import MmpSchemaValueError, SchemaSyntaxError, \
    SchemaModelDepthError
from mmpschema.names import XSD_SCHEMA, XSD_ELEMENT, XSD_ATTRIBUTE, XSD_SIMPLE_TYPE, \
    XSD_COMPLEX_TYPE, XSD_RESTRICTION, XSD_MODEL_GROUPS, XSD_ENUMERATION, \
    XSD_MIN_INCLUSIVE, XSD_MAX_INCLUSIVE, XSD_PATTERN
from mmpschema.utils.logger import logger, logged
from mmpschema.utils.qnames import local_name
from .facets import parse_facet_value, compile_pattern
from .models import Restrictions, SimpleTypeRule, AttributeDefinition, \
    ComplexStructure, ElementContent, TypeReference, InlineSimpleType, \
    InlineStructure, ElementDefinition, RootElement, Schema


def iter_children(elem: ElementType, tag: str) -> Iterator[ElementType]:
    """Iterates the children of an XSD element with a specific local name."""
    for child in elem:
        if isinstance(child.tag, str) and local_name(child.tag) == tag:
            yield child


def find_child(elem: ElementType, tag: str) -> Optional[ElementType]:
    return next(iter_children(elem, tag), None)


def get_qname_attribute(elem: ElementType, name: str) -> Optional[str]:
    """
    Returns a QName attribute of an XSD element, `None` if the attribute is missing.
    Raises a `SchemaSyntaxError` if the value is not a valid prefixed or local name.
    """
    value = elem.get(name)
    if value is not None:
        try:
            local_name(value)
        except MmpSchemaValueError:
            msg = f"invalid QName {value!r} for attribute {name!r} of <{local_name(elem.tag)}>"
            raise SchemaSyntaxError(msg) from None
    return value


def parse_restriction(elem: ElementType, name: Optional[str] = None) -> SimpleTypeRule:
    """
    Builds a simple type rule from an xs:restriction element. Used for both
    named and inline simple types.
    """
    base_type = get_qname_attribute(elem, 'base')
    enumeration = [e.get('value', '') for e in iter_children(elem, XSD_ENUMERATION)]

    bounds = {}
    for tag in (XSD_MIN_INCLUSIVE, XSD_MAX_INCLUSIVE):
        facet = find_child(elem, tag)
        if facet is not None:
            value = facet.get('value', '')
            try:
                bounds[tag] = parse_facet_value(value, base_type)
            except ValueError:
                msg = f"invalid {tag} value {value!r} for base type {base_type!r}"
                raise SchemaSyntaxError(msg) from None

    pattern = None
    facet = find_child(elem, XSD_PATTERN)
    if facet is not None:
        pattern = facet.get('value', '')
        try:
            compile_pattern(pattern)
        except (RegexError, re.error) as err:
            raise SchemaSyntaxError(f"invalid pattern {pattern!r}: {err}") from None

    return SimpleTypeRule(
        base_type=base_type,
        restrictions=Restrictions(
            enumeration=tuple(enumeration) if enumeration else None,
            min_inclusive=bounds.get(XSD_MIN_INCLUSIVE),
            max_inclusive=bounds.get(XSD_MAX_INCLUSIVE),
            pattern=pattern,
        ),
        name=name,
    )


def parse_occurs(elem: ElementType) -> tuple[int, Optional[int]]:
    """Returns the occurrence bounds of an element declaration, `None` for unbounded."""
    min_occurs = elem.get('minOccurs', '1')
    max_occurs = elem.get('maxOccurs', '1')
    name = elem.get('name')
    try:
        min_value = int(min_occurs)
        if min_value < 0:
            raise ValueError()
    except ValueError:
        msg = f"element {name!r}: minOccurs must be a non-negative integer, not {min_occurs!r}"
        raise SchemaSyntaxError(msg) from None

    if max_occurs.strip() == 'unbounded':
        return min_value, None

    try:
        max_value = int(max_occurs)
        if max_value < 1:
            raise ValueError()
    except ValueError:
        msg = f"element {name!r}: maxOccurs must be a positive integer " \
              f"or 'unbounded', not {max_occurs!r}"
        raise SchemaSyntaxError(msg) from None
    else:
        return min_value, max_value


class SchemaLoader:
    """
    Builds a schema model from a parsed XSD tree. Each instance is used for
    loading one XSD source.
    """
    def __init__(self, root: ElementType) -> None:
        self.root = root
        self.simple_types: dict[str, SimpleTypeRule] = {}
        self.complex_types: dict[str, ComplexStructure] = {}

    def load(self) -> Schema:
        self.parse_simple_types()
        self.parse_complex_types()
        schema = Schema(
            simple_types=self.simple_types,
            complex_types=self.complex_types,
            root_element=self.parse_root_element(),
        )
        logger.debug("Loaded %r", schema)
        return schema

    def parse_simple_types(self) -> None:
        for elem in iter_children(self.root, XSD_SIMPLE_TYPE):
            name = elem.get('name')
            if not name:
                continue

            restriction = find_child(elem, XSD_RESTRICTION)
            if restriction is None:
                logger.debug("Skip simple type %r: no restriction", name)
                continue
            self.simple_types[name] = parse_restriction(restriction, name)

    def parse_complex_types(self) -> None:
        for elem in iter_children(self.root, XSD_COMPLEX_TYPE):
            name = elem.get('name')
            if name:
                self.complex_types[name] = self.parse_structure(elem, name)

    def parse_root_element(self) -> Optional[RootElement]:
        for elem in iter_children(self.root, XSD_ELEMENT):
            name = elem.get('name')
            if not name:
                continue

            complex_type = find_child(elem, XSD_COMPLEX_TYPE)
            if complex_type is not None:
                structure = self.parse_structure(complex_type)
            else:
                type_ref = get_qname_attribute(elem, 'type')
                structure = self.complex_types.get(type_ref or '') or \
                    self.complex_types.get(local_name(type_ref or '')) or \
                    ComplexStructure()
            return RootElement(name, structure)

        logger.warning("No root element declaration found in XSD source")
        return None

    def parse_structure(self, elem: ElementType,
                        name: Optional[str] = None,
                        depth: int = 1) -> ComplexStructure:
        """
        Parses an xs:complexType element. Child elements are searched only
        in the model groups that are direct children of the complex type.
        """
        if depth > limits.MAX_MODEL_DEPTH:
            msg = "maximum XSD structure depth exceeded (MAX_MODEL_DEPTH={})"
            raise SchemaModelDepthError(msg.format(limits.MAX_MODEL_DEPTH))

        attributes = {}
        for child in iter_children(elem, XSD_ATTRIBUTE):
            attr_name = child.get('name')
            if attr_name:
                attributes[attr_name] = AttributeDefinition(
                    name=attr_name,
                    type_ref=get_qname_attribute(child, 'type'),
                    required=child.get('use', 'optional') == 'required',
                )

        elements = {}
        for group in elem:
            if not isinstance(group.tag, str) or local_name(group.tag) not in XSD_MODEL_GROUPS:
                continue

            for child in iter_children(group, XSD_ELEMENT):
                elem_name = child.get('name')
                if not elem_name:
                    logger.debug("Skip element declaration without a name: %r", child.attrib)
                    continue

                min_occurs, max_occurs = parse_occurs(child)
                elements[elem_name] = ElementDefinition(
                    name=elem_name,
                    content=self.parse_content(child, depth),
                    min_occurs=min_occurs,
                    max_occurs=max_occurs,
                    default=child.get('default'),
                )

        return ComplexStructure(elements, attributes, name)

    def parse_content(self, elem: ElementType, depth: int) -> ElementContent:
        """Returns the content variant of an element declaration."""
        type_ref = get_qname_attribute(elem, 'type')
        simple_type = find_child(elem, XSD_SIMPLE_TYPE)
        complex_type = find_child(elem, XSD_COMPLEX_TYPE)

        if sum(x is not None for x in (type_ref, simple_type, complex_type)) > 1:
            msg = "element {!r} must have only one of 'type' attribute, " \
                  "inline simpleType or inline complexType"
            raise SchemaSyntaxError(msg.format(elem.get('name')))

        if simple_type is not None:
            restriction = find_child(simple_type, XSD_RESTRICTION)
            if restriction is not None:
                return InlineSimpleType(parse_restriction(restriction))
        elif complex_type is not None:
            return InlineStructure(self.parse_structure(complex_type, depth=depth + 1))

        return TypeReference(type_ref)


@logged
def load_schema(xsd_text: str, loglevel: Optional[Union[int, str]] = None) -> Schema:
    """
    Loads a schema model from XSD source text.

    :param xsd_text: the XSD source text.
    :param loglevel: for setting a different logging level for the loading.
    :return: a `Schema` instance.
    :raises: a `SchemaSyntaxError` if the XSD source is not well-formed \
    or if it contains invalid declarations.
    """
    try:
        root = ElementTree.fromstring(xsd_text)
    except ElementTree.ParseError as err:
        raise SchemaSyntaxError(f"error parsing XSD source: {err}", err.position[0]) from None

    if local_name(root.tag) != XSD_SCHEMA:
        raise SchemaSyntaxError(f"the root of an XSD source must be a <schema>, not {root.tag!r}")

    logger.debug("Load schema from XSD source of %d characters", len(xsd_text))
    return SchemaLoader(root).load()
