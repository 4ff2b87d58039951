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
API functions for validating XML documents against a loaded schema.
"""
from collections.abc import Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union
from xml.etree import ElementTree

from mmpschema import limits
from mmpschema.exceptions import MmpSchemaTypeError
from mmpschema.locations import format_line
from mmpschema.translation import gettext as _
from mmpschema.utils.etree import etree_depth
from mmpschema.utils.logger import logger, logged
from mmpschema.validators import Diagnostic, DocumentSyntaxError, Schema, \
    check_well_formedness, iter_structure_errors


def iter_errors(document_text: str, schema: Schema) -> Iterator[Diagnostic]:
    """
    Creates an iterator for the diagnostics generated by the validation of an
    XML document. The tag-balance check, the parsing and the depth check are
    fail-fast: if one of them fails only its diagnostics are yielded.

    :param document_text: the XML document source text.
    :param schema: the schema model.
    """
    if not isinstance(document_text, str):
        raise MmpSchemaTypeError(f"document text must be a str, not {type(document_text)!r}")

    tag_errors = check_well_formedness(document_text)
    if tag_errors:
        yield from tag_errors
        return

    try:
        root = ElementTree.fromstring(document_text)
    except ElementTree.ParseError as err:
        yield DocumentSyntaxError(
            message=_("the XML document is not well-formed: {error}").format(error=err),
            location=format_line(err.position[0]),
        )
        return

    depth = etree_depth(root)
    if depth > limits.MAX_XML_DEPTH:
        yield DocumentSyntaxError(
            message=_("XML data depth exceeded (MAX_XML_DEPTH={limit})").format(
                limit=limits.MAX_XML_DEPTH
            ),
            path=root.tag,
        )
        return

    yield from iter_structure_errors(root, schema, document_text)


@logged
def validate(document_text: str, schema: Schema,
             loglevel: Optional[Union[str, int]] = None) -> list[Diagnostic]:
    """
    Validates an XML document against a schema and returns the ordered list
    of diagnostics. An empty list means the document is valid.

    :param document_text: the XML document source text.
    :param schema: the schema model, as returned by `load_schema()`.
    :param loglevel: for setting a different logging level for the validation.
    """
    errors = list(iter_errors(document_text, schema))
    logger.debug("Validation of document completed with %d diagnostics", len(errors))
    return errors


def is_valid(document_text: str, schema: Schema) -> bool:
    """
    Like :meth:`validate` except that returns ``True`` if the XML document
    is valid, ``False`` if it's invalid.
    """
    return next(iter_errors(document_text, schema), None) is None


def validate_many(documents: Mapping[str, str], schema: Schema,
                  max_workers: Optional[int] = None) -> dict[str, list[Diagnostic]]:
    """
    Validates a batch of XML documents with a thread pool. The schema is shared
    read-only by the workers, each validation produces its own diagnostics.

    :param documents: a mapping from document names to source texts.
    :param schema: the schema model.
    :param max_workers: the maximum number of worker threads.
    :return: a dictionary from document names to their diagnostics, in \
    the order of the *documents* argument.
    """
    names = list(documents)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = executor.map(lambda name: validate(documents[name], schema), names)
        return dict(zip(names, results))
