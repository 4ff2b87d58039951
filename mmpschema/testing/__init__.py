#
# Copyright (c), 2016-2020, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""
Subpackage with unittest extensions for mmpschema.
"""
import os
import re
import unittest
from textwrap import dedent

from mmpschema.validators import load_schema
from mmpschema.documents import validate

SCHEMA_TAG_PATTERN = re.compile(r'<([\w.-]+:)?schema[\s>]')

SCHEMA_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
    {0}
</xs:schema>"""


class MmpSchemaTestCase(unittest.TestCase):
    """
    Base class for testing schema loading and validation.
    """
    TEST_CASES_DIR = None

    @classmethod
    def casepath(cls, relative_path):
        """
        Returns the absolute path from a relative path specified from the referenced TEST_CASES_DIR.
        """
        return os.path.join(cls.TEST_CASES_DIR or '', relative_path)

    @classmethod
    def read_case(cls, relative_path):
        with open(cls.casepath(relative_path), encoding='utf-8') as fp:
            return fp.read()

    def get_schema_source(self, source):
        """
        Returns an XSD source text. A portion of schema is wrapped into a
        template, a relative path is read from the test cases directory.
        """
        source = dedent(source.strip())
        if not source.startswith('<'):
            return self.read_case(source)
        elif source.startswith('<?xml ') or SCHEMA_TAG_PATTERN.match(source):
            return source
        else:
            return SCHEMA_TEMPLATE.format(source)

    def check_schema(self, source, expected=None, **kwargs):
        """
        Create a schema for a test case.

        :param source: A relative path or a portion of schema for a template.
        :param expected: If it's an Exception class test the schema for raise an error. \
        Otherwise load the schema and test a condition if expected is a callable. \
        Then returns the schema instance.
        """
        if isinstance(expected, type) and issubclass(expected, Exception):
            with self.assertRaises(expected):
                load_schema(self.get_schema_source(source), **kwargs)
        else:
            schema = load_schema(self.get_schema_source(source), **kwargs)
            if callable(expected):
                self.assertTrue(expected(schema))
            return schema

    def check_errors(self, document, schema, expected):
        """
        Validates a document and checks the kinds of the diagnostics against
        the expected list, in order. Returns the diagnostics.

        :param document: the XML source text or a relative path of a test case.
        :param schema: the schema model.
        :param expected: the ordered list of expected diagnostic kinds.
        """
        document = dedent(document.strip())
        if not document.startswith('<'):
            document = self.read_case(document)

        errors = validate(document, schema)
        for e in errors:
            self.assertTrue(e.message, "Missing message for: %r" % e)

        kinds = [e.kind for e in errors]
        if kinds != list(expected):
            error_string = '\n++++++++++\n\n'.join([str(e) for e in errors[:5]])
            self.fail("diagnostics {!r} expected, found {!r}:\n\n{}".format(
                list(expected), kinds, error_string
            ))
        return errors
