#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterator

from mmpschema.aliases import ElementType

PATH_SEPARATOR = ' > '


def is_etree_element(obj: object) -> bool:
    """A validator for ElementTree elements."""
    return hasattr(obj, 'append') and hasattr(obj, 'tag') and hasattr(obj, 'attrib')


def etree_text_content(elem: ElementType) -> str:
    """Returns the stripped concatenation of all the text nodes of an element."""
    return ''.join(elem.itertext()).strip()


def etree_child_path(parent_path: str, name: str, position: int, siblings: int) -> str:
    """
    Extends a diagnostic path with a child step. The 1-based position is
    added only when more than one sibling shares the same name.
    """
    if siblings > 1:
        return f'{parent_path}{PATH_SEPARATOR}{name}[{position}]'
    return f'{parent_path}{PATH_SEPARATOR}{name}'


def etree_iter_paths(root: ElementType) -> Iterator[tuple[ElementType, str]]:
    """
    Iterates the elements of a tree in document order, each one coupled with
    its ancestor-chain path (e.g. 'POLYGONS > POLYGON[2] > POINTS').
    """
    stack = [(root, root.tag)]
    while stack:
        elem, path = stack.pop()
        yield elem, path

        siblings: dict[str, int] = {}
        for child in elem:
            siblings[child.tag] = siblings.get(child.tag, 0) + 1

        positions: dict[str, int] = {}
        children = []
        for child in elem:
            positions[child.tag] = positions.get(child.tag, 0) + 1
            children.append((child, etree_child_path(
                path, child.tag, positions[child.tag], siblings[child.tag]
            )))
        stack.extend(reversed(children))


def etree_depth(root: ElementType) -> int:
    """Returns the depth of an element tree, 1 for a childless root."""
    depth = 0
    stack = [(root, 1)]
    while stack:
        elem, level = stack.pop()
        if level > depth:
            depth = level
        stack.extend((child, level + 1) for child in elem)
    return depth
