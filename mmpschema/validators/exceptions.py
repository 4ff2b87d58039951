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
Diagnostic classes. Diagnostics are exception instances that are collected
by the validators and returned to the caller, not raised.
"""
from collections.abc import Iterable
from typing import Any, Optional, cast

from elementpath.etree import etree_tostring

from mmpschema.exceptions import MmpSchemaException, MmpSchemaValueError
from mmpschema.aliases import ElementType, FacetValueType
from mmpschema.translation import gettext as _
from mmpschema.utils.etree import is_etree_element


class Diagnostic(MmpSchemaException):
    """
    Base class for validation diagnostics.

    :param message: the human-readable message, embedding the path or the value.
    :param path: the ancestor-chain path of the element (e.g. 'POLYGONS > POLYGON[2]').
    :param value: the offending literal value, if any.
    :param location: an approximate location hint (e.g. 'line 12').
    :param elem: the offending element, if available.
    """
    kind = 'Diagnostic'
    fatal = False

    def __init__(self, message: str,
                 path: Optional[str] = None,
                 value: Optional[str] = None,
                 location: Optional[str] = None,
                 elem: Optional[ElementType] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.value = value
        self.location = location
        self.elem = elem

    def __setattr__(self, name: str, value: Any) -> None:
        if name == 'elem' and value is not None and not is_etree_element(value):
            raise MmpSchemaValueError(
                "'elem' attribute requires an Element, not %r." % type(value)
            )
        super().__setattr__(name, value)

    def __str__(self) -> str:
        chunks: list[str] = ['%s:\n' % self.message.rstrip('.:')]
        if self.value is not None:
            chunks.append("Value: %s\n" % self.value)
        if self.elem is not None:
            chunks.append("Instance:\n\n%s\n" % self.get_elem_as_string('  ', 20))
        if self.location is not None:
            chunks.append("Location: %s\n" % self.location)

        return '\n'.join(chunks) if len(chunks) > 1 else chunks[0][:-2]

    def __repr__(self) -> str:
        return '%s(%r, location=%r)' % (self.__class__.__name__, self.message, self.location)

    def _key(self) -> tuple[str, str, Optional[str], Optional[str], Optional[str]]:
        return self.kind, self.message, self.path, self.value, self.location

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def msg(self) -> str:
        return self.__str__()

    def get_elem_as_string(self, indent: str = '', max_lines: Optional[int] = None) -> str:
        """Returns a string representation of elem attribute."""
        try:
            return cast(str, etree_tostring(self.elem, indent=indent, max_lines=max_lines))
        except (ValueError, TypeError):
            return indent + repr(self.elem)

    def as_dict(self) -> dict[str, Optional[str]]:
        """The diagnostic as a mapping, the form exchanged with front ends."""
        return {'kind': self.kind, 'message': self.message, 'location': self.location}


###
# Fatal diagnostics: validation stops after one of these.

class DocumentSyntaxError(Diagnostic):
    """The document is not well-formed for the XML parser."""
    kind = 'DocumentSyntaxError'
    fatal = True


class StructuralMismatchError(Diagnostic):
    """A tag-balance violation found by the well-formedness checker."""
    kind = 'StructuralMismatchError'
    fatal = True


class RootMismatchError(StructuralMismatchError):
    """The document root tag differs from the schema root element name."""

    def __init__(self, expected: str, found: str, location: Optional[str] = None) -> None:
        super().__init__(
            message=_("the root element must be <{expected}>, found <{found}>").format(
                expected=expected, found=found
            ),
            path=found,
            location=location,
        )
        self.expected = expected


###
# Accumulated diagnostics

class MissingRequiredElement(Diagnostic):
    kind = 'MissingRequiredElement'

    def __init__(self, path: str, name: str,
                 location: Optional[str] = None,
                 elem: Optional[ElementType] = None) -> None:
        super().__init__(
            message=_("{path}: missing required element <{name}>").format(path=path, name=name),
            path=path,
            location=location,
            elem=elem,
        )
        self.name = name


class MissingRequiredValue(Diagnostic):
    kind = 'MissingRequiredValue'

    def __init__(self, path: str, name: str,
                 location: Optional[str] = None,
                 elem: Optional[ElementType] = None) -> None:
        super().__init__(
            message=_("{path}: the element <{name}> is required and cannot be empty").format(
                path=path, name=name
            ),
            path=path,
            location=location,
            elem=elem,
        )
        self.name = name


class UnknownElement(Diagnostic):
    kind = 'UnknownElement'

    def __init__(self, path: str, tag: str,
                 location: Optional[str] = None,
                 elem: Optional[ElementType] = None) -> None:
        super().__init__(
            message=_("{path}: unknown element <{tag}>").format(path=path, tag=tag),
            path=path,
            location=location,
            elem=elem,
        )
        self.tag = tag


class InvalidType(Diagnostic):
    kind = 'InvalidType'

    def __init__(self, path: Optional[str], value: str, base_type: str,
                 location: Optional[str] = None) -> None:
        super().__init__(
            message=_("{path}: {value!r} is not a valid {base_type}").format(
                path=path or _("value"), value=value, base_type=base_type
            ),
            path=path,
            value=value,
            location=location,
        )
        self.base_type = base_type


class InvalidValue(Diagnostic):
    kind = 'InvalidValue'

    def __init__(self, path: Optional[str], value: str, enumeration: Iterable[str],
                 location: Optional[str] = None) -> None:
        self.enumeration = tuple(enumeration)
        super().__init__(
            message=_("{path}: {value!r} must be one of: {values}").format(
                path=path or _("value"), value=value, values=", ".join(self.enumeration)
            ),
            path=path,
            value=value,
            location=location,
        )


class OutOfRange(Diagnostic):
    kind = 'OutOfRange'

    def __init__(self, path: Optional[str], value: str,
                 bound: FacetValueType, is_min: bool,
                 location: Optional[str] = None) -> None:
        if is_min:
            message = _("{path}: {value!r} must be greater than or equal to {bound}")
        else:
            message = _("{path}: {value!r} must be less than or equal to {bound}")
        super().__init__(
            message=message.format(path=path or _("value"), value=value, bound=bound),
            path=path,
            value=value,
            location=location,
        )
        self.bound = bound
        self.is_min = is_min


class InvalidFormat(Diagnostic):
    kind = 'InvalidFormat'

    def __init__(self, path: Optional[str], value: str, pattern: str,
                 location: Optional[str] = None) -> None:
        super().__init__(
            message=_("{path}: {value!r} doesn't match pattern {pattern!r}").format(
                path=path or _("value"), value=value, pattern=pattern
            ),
            path=path,
            value=value,
            location=location,
        )
        self.pattern = pattern


__all__ = ['Diagnostic', 'DocumentSyntaxError', 'StructuralMismatchError',
           'RootMismatchError', 'MissingRequiredElement', 'MissingRequiredValue',
           'UnknownElement', 'InvalidType', 'InvalidValue', 'OutOfRange', 'InvalidFormat']
