#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Helpers for locating elements and values in the XML source text.

The lookup is a plain text search and is only an approximation: repeated
identical values or tags resolve to their first occurrence, that can
precede the one that produced the diagnostic.
"""
import re
from typing import Optional


def get_line_number(text: str, offset: int) -> int:
    """Returns the 1-based line number of an offset of the text."""
    return text.count('\n', 0, offset) + 1


def format_line(line: int) -> str:
    return f'line {line}'


def find_location(text: Optional[str], tag: str, value: Optional[str] = None) -> Optional[str]:
    """
    Best effort lookup of the line where a value or a tag appears in a source.
    Returns a string like 'line 12' or `None` if nothing is found.

    :param text: the XML source text, can be `None` if not available.
    :param tag: the tag name, searched as an opening tag if *value* is \
    not provided or it's not found.
    :param value: an optional text value, searched between tags (e.g. '>value<').
    """
    if not text:
        return None

    index = -1
    if value:
        index = text.find(f'>{value}<')

    if index == -1:
        match = re.search(r'<%s(?=[\s/>])' % re.escape(tag), text)
        if match is None:
            return None
        index = match.start()

    return format_line(get_line_number(text, index))
