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
A tag-balance checker that works on the raw XML text. A tolerant parser may
repair mismatched or unclosed tags, so the tag structure is checked with an
independent scan before parsing the document.
"""
import re
from collections.abc import Iterator
from typing import NamedTuple

from mmpschema.locations import get_line_number, format_line
from mmpschema.translation import gettext as _
from mmpschema.utils.logger import logger
from .exceptions import StructuralMismatchError

COMMENT_PATTERN = re.compile(r'<!--.*?-->', re.DOTALL)
CDATA_PATTERN = re.compile(r'<!\[CDATA\[.*?\]\]>', re.DOTALL)
TAG_PATTERN = re.compile(r'</?([a-zA-Z_][\w.:-]*)[^>]*>')


class OpenTag(NamedTuple):
    name: str
    offset: int


def blank_out(match: 're.Match[str]') -> str:
    """Replaces a span with spaces, preserving newlines and offsets."""
    return re.sub(r'[^\n]', ' ', match.group())


def strip_markup_sections(text: str) -> str:
    """Blanks comments and CDATA sections, their content can't affect tag matching."""
    text = COMMENT_PATTERN.sub(blank_out, text)
    return CDATA_PATTERN.sub(blank_out, text)


def iter_tag_errors(text: str) -> Iterator[StructuralMismatchError]:
    """
    Scans the text for opening and closing tags, yielding a diagnostic for
    every closing tag without an opener, every mismatched pair of tags and
    every tag left unclosed at the end of the text.
    """
    stack: list[OpenTag] = []
    for match in TAG_PATTERN.finditer(strip_markup_sections(text)):
        token, name = match.group(0), match.group(1)
        if token.endswith('/>'):
            continue  # self-closing

        offset = match.start()
        if not token.startswith('</'):
            stack.append(OpenTag(name, offset))
        elif not stack:
            yield StructuralMismatchError(
                message=_("closing tag without matching opener: </{name}>").format(name=name),
                path=name,
                location=format_line(get_line_number(text, offset)),
            )
        else:
            opened = stack.pop()
            if opened.name != name:
                yield StructuralMismatchError(
                    message=_("mismatched tags: expected </{expected}> found </{found}>").format(
                        expected=opened.name, found=name
                    ),
                    path=name,
                    location=format_line(get_line_number(text, offset)),
                )

    for opened in stack:
        yield StructuralMismatchError(
            message=_("unclosed tag: <{name}>").format(name=opened.name),
            path=opened.name,
            location=format_line(get_line_number(text, opened.offset)),
        )


def check_well_formedness(text: str) -> list[StructuralMismatchError]:
    """
    Checks the tag balance of an XML text. Returns an empty list if the
    tags are balanced enough to proceed with parsing and validation.
    """
    errors = list(iter_tag_errors(text))
    if errors:
        logger.debug("Tag-balance check found %d errors", len(errors))
    return errors
