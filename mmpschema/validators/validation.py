#
# Copyright (c), 2016-2021, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the structural validation of a parsed XML tree
against a schema model.
"""
import dataclasses as dc
from collections.abc import Iterator
from typing import Optional

from mmpschema.aliases import ElementType
from mmpschema.exceptions import MmpSchemaTypeError, MmpSchemaValueError
from mmpschema.locations import find_location
from mmpschema.utils.etree import etree_child_path, etree_iter_paths, etree_text_content
from mmpschema.utils.logger import logger
from .exceptions import Diagnostic, RootMismatchError, MissingRequiredElement, \
    MissingRequiredValue, UnknownElement
from .facets import iter_value_errors
from .models import SimpleTypeRule, ComplexStructure, ElementDefinition, \
    TypeReference, InlineSimpleType, InlineStructure, Schema


@dc.dataclass(frozen=True)
class ValidationContext:
    """
    The arguments shared by the functions of a single validation run.

    :param schema: the schema model.
    :param source: the XML source text, used for locating diagnostics.
    """
    schema: Schema
    source: Optional[str] = None

    def locate(self, tag: str, value: Optional[str] = None) -> Optional[str]:
        return find_location(self.source, tag, value)


def iter_structure_errors(root: ElementType,
                          schema: Schema,
                          source: Optional[str] = None) -> Iterator[Diagnostic]:
    """
    Validates a parsed XML tree against a schema. A root mismatch is the only
    diagnostic yielded if the root tag is wrong, otherwise diagnostics are
    accumulated for the whole tree and unknown elements are reported last.

    :param root: the root element of the XML tree.
    :param schema: the schema model.
    :param source: the optional XML source text, for locating diagnostics.
    """
    if schema.root_element is None:
        raise MmpSchemaValueError("the schema has no root element declaration")

    context = ValidationContext(schema, source)
    expected = schema.root_element.name
    if root.tag != expected:
        yield RootMismatchError(expected, root.tag, context.locate(root.tag))
        return

    yield from iter_content_errors(root, schema.root_element.structure, root.tag, context)
    yield from iter_unknown_elements(root, context)


def iter_content_errors(elem: ElementType,
                        structure: ComplexStructure,
                        path: str,
                        context: ValidationContext) -> Iterator[Diagnostic]:
    """Validates the direct children of an element against a complex structure."""
    for name, definition in structure.elements.items():
        children = [child for child in elem if child.tag == name]
        if not children:
            if definition.required:
                yield MissingRequiredElement(path, name, context.locate(elem.tag), elem)
            continue

        for position, child in enumerate(children, start=1):
            child_path = etree_child_path(path, name, position, len(children))
            yield from iter_element_errors(child, definition, child_path, context)


def iter_element_errors(elem: ElementType,
                        definition: ElementDefinition,
                        path: str,
                        context: ValidationContext) -> Iterator[Diagnostic]:
    """Dispatches the validation of an element on the content variant of its definition."""
    content = definition.content
    if isinstance(content, InlineStructure):
        yield from iter_content_errors(elem, content.structure, path, context)
    elif isinstance(content, InlineSimpleType):
        yield from iter_leaf_errors(elem, definition, content.rule, path, context)
    elif isinstance(content, TypeReference):
        if content.name is None:
            return

        xsd_type = context.schema.resolve_type(content.name)
        if isinstance(xsd_type, ComplexStructure):
            yield from iter_content_errors(elem, xsd_type, path, context)
        elif isinstance(xsd_type, SimpleTypeRule):
            yield from iter_leaf_errors(elem, definition, xsd_type, path, context)
        else:
            logger.debug("Unresolved type %r for %s: value not checked", content.name, path)
            yield from iter_leaf_errors(elem, definition, None, path, context)
    else:
        raise MmpSchemaTypeError(f"unknown content {content!r} for element {definition.name!r}")


def iter_leaf_errors(elem: ElementType,
                     definition: ElementDefinition,
                     rule: Optional[SimpleTypeRule],
                     path: str,
                     context: ValidationContext) -> Iterator[Diagnostic]:
    """
    Validates the text value of a leaf element. An empty value is reported
    only for required elements. With no rule only the emptiness is checked.
    """
    value = etree_text_content(elem)
    if not value:
        if definition.required:
            yield MissingRequiredValue(path, elem.tag, context.locate(elem.tag), elem)
    elif rule is not None:
        yield from iter_value_errors(value, rule, path, context.locate(elem.tag, value))


def iter_unknown_elements(root: ElementType,
                          context: ValidationContext) -> Iterator[UnknownElement]:
    """Yields a diagnostic for every element whose tag is not declared in the schema."""
    known_names = context.schema.element_names
    for elem, path in etree_iter_paths(root):
        if elem.tag not in known_names:
            yield UnknownElement(path, elem.tag, context.locate(elem.tag), elem)
