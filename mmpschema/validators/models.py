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
This module contains the classes of the schema model built by the loader.
All the instances are immutable and can be shared between concurrent validations.
"""
import dataclasses as dc
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional, Union

from mmpschema.aliases import FacetValueType
from mmpschema.names import XSD_INTEGER_TYPES, XSD_FLOAT_TYPES, XSD_BUILTIN_TYPES
from mmpschema.utils.qnames import local_name


@dc.dataclass(frozen=True)
class Restrictions:
    """The facets of a simple type restriction."""
    enumeration: Optional[tuple[str, ...]] = None
    min_inclusive: Optional[FacetValueType] = None
    max_inclusive: Optional[FacetValueType] = None
    pattern: Optional[str] = None

    def __bool__(self) -> bool:
        return any(v is not None for v in dc.astuple(self))


@dc.dataclass(frozen=True)
class SimpleTypeRule:
    """
    The validation rule of a leaf value: a built-in base type plus restrictions.

    :param base_type: the base type reference (e.g. 'xs:integer'), can be `None`.
    :param restrictions: the collected facets.
    :param name: the declared name, `None` for inline types.
    """
    base_type: Optional[str]
    restrictions: Restrictions = Restrictions()
    name: Optional[str] = None

    @property
    def primitive_name(self) -> Optional[str]:
        """The local name of the base type, e.g. 'integer' for 'xs:integer'."""
        return local_name(self.base_type) if self.base_type else None

    @property
    def is_integer(self) -> bool:
        return self.primitive_name in XSD_INTEGER_TYPES

    @property
    def is_float(self) -> bool:
        return self.primitive_name in XSD_FLOAT_TYPES

    @property
    def is_numeric(self) -> bool:
        return self.is_integer or self.is_float


@dc.dataclass(frozen=True)
class AttributeDefinition:
    name: str
    type_ref: Optional[str] = None
    required: bool = False


@dc.dataclass(frozen=True, eq=False)
class ComplexStructure:
    """
    The content of a container element, for both named complex types
    and inline (anonymous) complex types.

    :param elements: child element definitions in declaration order.
    :param attributes: attribute definitions.
    :param name: the complex type name, `None` for inline structures.
    """
    elements: Mapping[str, 'ElementDefinition'] = dc.field(default_factory=dict)
    attributes: Mapping[str, AttributeDefinition] = dc.field(default_factory=dict)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'elements', MappingProxyType(dict(self.elements)))
        object.__setattr__(self, 'attributes', MappingProxyType(dict(self.attributes)))

    def __repr__(self) -> str:
        if self.name is None:
            return '%s(elements=%r)' % (self.__class__.__name__, list(self.elements))
        return '%s(name=%r, elements=%r)' % (
            self.__class__.__name__, self.name, list(self.elements)
        )

    def iter_element_names(self) -> Iterator[str]:
        """Iterates the names of the elements of the structure and of nested inline structures."""
        for name, definition in self.elements.items():
            yield name
            if isinstance(definition.content, InlineStructure):
                yield from definition.content.structure.iter_element_names()


###
# The content variants of an element definition

@dc.dataclass(frozen=True)
class TypeReference:
    """A reference by name to a simple, complex or built-in type. `None` means untyped."""
    name: Optional[str]


@dc.dataclass(frozen=True)
class InlineSimpleType:
    rule: SimpleTypeRule


@dc.dataclass(frozen=True)
class InlineStructure:
    structure: ComplexStructure


ElementContent = Union[TypeReference, InlineSimpleType, InlineStructure]


@dc.dataclass(frozen=True)
class ElementDefinition:
    """
    A child element declaration. The `max_occurs` is `None` for unbounded elements.
    """
    name: str
    content: ElementContent = TypeReference(None)
    min_occurs: int = 1
    max_occurs: Optional[int] = 1
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.min_occurs != 0

    @property
    def type_ref(self) -> Optional[str]:
        return self.content.name if isinstance(self.content, TypeReference) else None

    @property
    def inline_type(self) -> Optional[SimpleTypeRule]:
        return self.content.rule if isinstance(self.content, InlineSimpleType) else None

    @property
    def inline_structure(self) -> Optional[ComplexStructure]:
        if isinstance(self.content, InlineStructure):
            return self.content.structure
        return None


@dc.dataclass(frozen=True)
class RootElement:
    name: str
    structure: ComplexStructure


@dc.dataclass(frozen=True, eq=False)
class Schema:
    """
    The schema model. Built once by the loader and never mutated after.

    :param simple_types: named simple types.
    :param complex_types: named complex types.
    :param root_element: the root element declaration, `None` if the XSD \
    source has no global element declaration.
    """
    simple_types: Mapping[str, SimpleTypeRule] = dc.field(default_factory=dict)
    complex_types: Mapping[str, ComplexStructure] = dc.field(default_factory=dict)
    root_element: Optional[RootElement] = None
    element_names: frozenset[str] = dc.field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'simple_types', MappingProxyType(dict(self.simple_types)))
        object.__setattr__(self, 'complex_types', MappingProxyType(dict(self.complex_types)))

        names = set()
        if self.root_element is not None:
            names.add(self.root_element.name)
            names.update(self.root_element.structure.iter_element_names())
        for structure in self.complex_types.values():
            names.update(structure.iter_element_names())
        object.__setattr__(self, 'element_names', frozenset(names))

    def __repr__(self) -> str:
        return '%s(root=%r, simple_types=%d, complex_types=%d)' % (
            self.__class__.__name__,
            self.root_element.name if self.root_element is not None else None,
            len(self.simple_types),
            len(self.complex_types),
        )

    def resolve_type(self, ref: Optional[str]) \
            -> Union[SimpleTypeRule, ComplexStructure, None]:
        """
        Resolves a type reference. Registered types are looked up by the
        reference and then by its local name. Built-in types are resolved to
        a rule without restrictions. Returns `None` for unresolved references.
        """
        if not ref:
            return None

        for name in (ref, local_name(ref)):
            if name in self.simple_types:
                return self.simple_types[name]
            elif name in self.complex_types:
                return self.complex_types[name]

        if local_name(ref) in XSD_BUILTIN_TYPES:
            return SimpleTypeRule(base_type=ref)
        return None
