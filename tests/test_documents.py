#!/usr/bin/env python
#
# Copyright (c), 2016-2020, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests concerning the validation API functions"""
import unittest
import logging
import os

from mmpschema import limits, iter_errors, validate, is_valid, validate_many, \
    load_schema, MmpSchemaTypeError, DocumentSyntaxError, StructuralMismatchError
from mmpschema.testing import MmpSchemaTestCase

TEST_CASES_DIR = os.path.join(os.path.dirname(__file__), 'test_cases')


class TestValidationApi(MmpSchemaTestCase):

    TEST_CASES_DIR = TEST_CASES_DIR

    @classmethod
    def setUpClass(cls):
        cls.schema = load_schema(cls.read_case('examples/polygons/polygons.xsd'))
        cls.valid_doc = cls.read_case('examples/polygons/polygons.xml')
        cls.invalid_doc = cls.read_case('examples/polygons/polygons-invalid.xml')
        cls.unclosed_doc = cls.read_case('examples/polygons/polygons-unclosed.xml')

    def test_validate(self):
        self.assertListEqual(validate(self.valid_doc, self.schema), [])

        errors = validate(self.invalid_doc, self.schema)
        self.assertEqual(len(errors), 11)
        self.assertEqual(errors[-1].kind, 'UnknownElement')

    def test_is_valid(self):
        self.assertTrue(is_valid(self.valid_doc, self.schema))
        self.assertFalse(is_valid(self.invalid_doc, self.schema))
        self.assertFalse(is_valid(self.unclosed_doc, self.schema))
        self.assertFalse(is_valid('<LINES/>', self.schema))

    def test_iter_errors(self):
        errors = iter_errors(self.invalid_doc, self.schema)
        self.assertEqual(next(errors).path, 'POLYGONS > VERSION')
        self.assertEqual(next(errors).path, 'POLYGONS > POLYGON[1] > LINECOLOR')
        self.assertEqual(len(list(errors)), 9)

        with self.assertRaises(MmpSchemaTypeError):
            next(iter_errors(self.valid_doc.encode(), self.schema))

    def test_validation_is_repeatable(self):
        errors = validate(self.invalid_doc, self.schema)
        self.assertListEqual(validate(self.invalid_doc, self.schema), errors)
        self.assertListEqual([e.as_dict() for e in validate(self.invalid_doc, self.schema)],
                             [e.as_dict() for e in errors])

    def test_tag_balance_check_is_fail_fast(self):
        # Unknown element CIRCLE and the missing LINECOLOR are not reported
        errors = validate(self.unclosed_doc, self.schema)
        self.assertEqual(len(errors), 3)
        self.assertTrue(all(isinstance(e, StructuralMismatchError) for e in errors))

        errors = validate('<POLYGONS>\n<VERSION>2</VERSION>\n</POLYGON>', self.schema)
        self.assertEqual([e.message for e in errors], [
            'mismatched tags: expected </POLYGONS> found </POLYGON>',
        ])
        self.assertEqual(errors[0].location, 'line 3')

    def test_parse_errors(self):
        errors = validate('<POLYGONS>\n<VERSION a="1" a="2">2</VERSION>\n</POLYGONS>',
                          self.schema)
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], DocumentSyntaxError)
        self.assertTrue(errors[0].fatal)
        self.assertEqual(errors[0].location, 'line 2')
        self.assertTrue(errors[0].message.startswith('the XML document is not well-formed'))

        errors = validate('', self.schema)
        self.assertEqual([e.kind for e in errors], ['DocumentSyntaxError'])

        errors = validate('just text', self.schema)
        self.assertEqual([e.kind for e in errors], ['DocumentSyntaxError'])

    def test_root_mismatch_is_fail_fast(self):
        errors = validate('<LINES><VERSION>x</VERSION><CIRCLE/></LINES>', self.schema)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].message, 'the root element must be <POLYGONS>, found <LINES>')

    def test_depth_limit(self):
        document = '<POLYGONS><VERSION>1</VERSION>{}{}</POLYGONS>'.format(
            '<GROUPS>' * 20, '</GROUPS>' * 20
        )
        self.assertEqual([e.kind for e in validate(document, self.schema)],
                         ['MissingRequiredElement'])

        max_xml_depth = limits.MAX_XML_DEPTH
        try:
            limits.MAX_XML_DEPTH = 10
            errors = validate(document, self.schema)
            self.assertEqual(len(errors), 1)
            self.assertIsInstance(errors[0], DocumentSyntaxError)
            self.assertIn('MAX_XML_DEPTH=10', errors[0].message)
        finally:
            limits.MAX_XML_DEPTH = max_xml_depth

    def test_loglevel_argument(self):
        logger = logging.getLogger('mmpschema')
        level = logger.level
        with self.assertLogs('mmpschema', level=logging.DEBUG) as ctx:
            validate(self.invalid_doc, self.schema, loglevel=logging.DEBUG)
        self.assertTrue(any('completed with 11 diagnostics' in line for line in ctx.output))
        self.assertEqual(logger.level, level)

    def test_validate_many(self):
        documents = {
            'unclosed.xml': self.unclosed_doc,
            'valid.xml': self.valid_doc,
            'invalid.xml': self.invalid_doc,
            'empty.xml': '',
        }
        results = validate_many(documents, self.schema, max_workers=2)
        self.assertListEqual(list(results), list(documents))
        self.assertListEqual(results['valid.xml'], [])
        self.assertListEqual(results['invalid.xml'], validate(self.invalid_doc, self.schema))
        self.assertEqual(len(results['unclosed.xml']), 3)
        self.assertEqual([e.kind for e in results['empty.xml']], ['DocumentSyntaxError'])

        self.assertDictEqual(validate_many({}, self.schema), {})


if __name__ == '__main__':
    import platform
    header_template = "Test mmpschema's validation API with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
