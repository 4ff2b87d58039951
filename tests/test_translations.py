#!/usr/bin/env python
#
# Copyright (c), 2016-2022, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import unittest
import gettext
import os

from mmpschema import translation, load_schema, validate
from mmpschema.testing import MmpSchemaTestCase
from mmpschema.validators import OutOfRange

TEST_CASES_DIR = os.path.join(os.path.dirname(__file__), 'test_cases')


class TestTranslations(MmpSchemaTestCase):

    TEST_CASES_DIR = TEST_CASES_DIR

    @classmethod
    def setUpClass(cls):
        cls.translation_classes = (gettext.NullTranslations,  # in case of fallback
                                   gettext.GNUTranslations)
        cls.schema = load_schema(cls.read_case('examples/polygons/polygons.xsd'))

    def tearDown(self):
        translation.deactivate()

    def test_activation(self):
        self.assertIsNone(translation._translation)
        try:
            translation.activate()
            self.assertIsInstance(translation._translation, self.translation_classes)
        finally:
            translation._translation = None

        self.assertIsNone(translation._translation)
        try:
            translation.activate()
            self.assertIsInstance(translation._translation, self.translation_classes)
            translation.deactivate()
            self.assertIsNone(translation._translation)
        finally:
            translation._translation = None

    def test_install_and_uninstall(self):
        import builtins

        self.assertIsNone(translation._translation)
        self.assertFalse(translation._installed)
        builtin_function = builtins.__dict__.get('_')
        try:
            translation.activate(install=True)
            self.assertIsInstance(translation._translation, self.translation_classes)
            self.assertTrue(translation._installed)
            self.assertEqual(builtins.__dict__['_'], translation._translation.gettext)

            translation.deactivate()
            self.assertIsNone(translation._translation)
            self.assertFalse(translation._installed)
        finally:
            translation._translation = None
            translation._installed = False
            if builtin_function is not None:
                builtins.__dict__['_'] = builtin_function
            else:
                builtins.__dict__.pop('_', None)

    def test_untranslated_messages(self):
        self.assertEqual(translation.gettext("unclosed tag: <{name}>"), "unclosed tag: <{name}>")

        translation.activate(languages=['xx'])
        self.assertIsInstance(translation._translation, gettext.NullTranslations)
        self.assertEqual(translation.gettext("unclosed tag: <{name}>"), "unclosed tag: <{name}>")

    def test_es_translation(self):
        translation.activate(languages=['es'])
        self.assertIsInstance(translation._translation, gettext.GNUTranslations)
        self.assertEqual(translation.gettext("unclosed tag: <{name}>"),
                         "etiqueta sin cerrar: <{name}>")
        self.assertEqual(translation.gettext("value"), "valor")

        error = OutOfRange(None, '300', 255, is_min=False)
        self.assertEqual(error.message, "valor: '300' debe ser menor o igual que 255")

        translation.deactivate()
        error = OutOfRange(None, '300', 255, is_min=False)
        self.assertEqual(error.message, "value: '300' must be less than or equal to 255")

    def test_es_validation_translation(self):
        translation.activate(languages=['es', 'en'])
        errors = validate(self.read_case('examples/polygons/polygons-invalid.xml'), self.schema)

        self.assertEqual(len(errors), 11)
        self.assertEqual(errors[0].message,
                         "POLYGONS > VERSION: 'two' no es un valor integer válido")
        self.assertEqual(errors[2].message,
                         "POLYGONS > POLYGON[1] > LINEWIDTH: '256' debe ser menor o igual que 255")
        self.assertEqual(errors[8].message,
                         "POLYGONS > POLYGON[2]: falta el elemento obligatorio <LINECOLOR>")
        self.assertEqual(errors[10].message,
                         "POLYGONS > POLYGON[2] > CIRCLE: elemento desconocido <CIRCLE>")

        errors = validate(self.read_case('examples/polygons/polygons-unclosed.xml'), self.schema)
        self.assertEqual(errors[0].message, "etiquetas no coincidentes: "
                                            "se esperaba </CIRCLE> y se encontró </POLYGON>")
        self.assertEqual(errors[2].message, "etiqueta sin cerrar: <POLYGONS>")


if __name__ == '__main__':
    import platform
    header_template = "Test mmpschema translations with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
