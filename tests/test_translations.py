#!/usr/bin/env python
#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests on the translation of error messages"""
import unittest
import gettext
import pathlib
from unittest.mock import patch

from xsdlite import translation, SchemaValidator


class TestTranslations(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.translation_classes = (gettext.NullTranslations,  # in case of fallback
                                   gettext.GNUTranslations)

    def test_activation(self):
        self.assertIsNone(translation._translation)
        try:
            translation.activate()
            self.assertIsInstance(translation._translation, self.translation_classes)
        finally:
            translation._translation = None

    def test_deactivation(self):
        self.assertIsNone(translation._translation)
        try:
            translation.activate()
            self.assertIsInstance(translation._translation, self.translation_classes)
            translation.deactivate()
            self.assertIsNone(translation._translation)
        finally:
            translation._translation = None

    def test_missing_catalog(self):
        localedir = pathlib.Path(__file__).parent.joinpath('test_cases/locale')
        self.assertIsNone(translation._translation)
        try:
            with self.assertRaises(OSError):
                translation.activate(localedir, languages=['it'], fallback=False)
            self.assertIsNone(translation._translation)

            translation.activate(localedir, languages=['it'])
            self.assertIsInstance(translation._translation, gettext.NullTranslations)
            self.assertEqual(translation.gettext("unexpected element '{}'"),
                             "unexpected element '{}'")
        finally:
            translation._translation = None

    def test_italian_catalog(self):
        self.assertIsNone(translation._translation)
        try:
            translation.activate(languages=['it'], fallback=False)
            self.assertIsInstance(translation._translation, gettext.GNUTranslations)
            self.assertEqual(translation.gettext("unexpected element '{}'"),
                             "elemento '{}' inatteso")
            self.assertEqual(translation.gettext("missing required attribute '{}'"),
                             "manca l'attributo obbligatorio '{}'")
            self.assertEqual(translation.gettext("not a catalog message"),
                             "not a catalog message")

            validator = SchemaValidator(
                '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
                '<xs:element name="a"><xs:complexType><xs:sequence>'
                '<xs:element name="b" type="xs:date"/>'
                '</xs:sequence></xs:complexType></xs:element></xs:schema>'
            )
            self.assertEqual(validator.validate('<a><b>2024-13-01</b><c/></a>').errors, (
                "contenuto non valido nell'elemento 'b': valore date non valido: 2024-13-01",
                "elemento 'c' inatteso",
            ))
        finally:
            translation.deactivate()

        self.assertEqual(translation.gettext("unexpected element '{}'"),
                         "unexpected element '{}'")

    def test_install(self):
        import builtins

        self.assertIsNone(translation._translation)
        self.assertFalse(translation._installed)

        try:
            translation.activate(install=True)
            self.assertIsInstance(translation._translation, self.translation_classes)
            self.assertTrue(translation._installed)
            self.assertEqual(builtins.__dict__['_'], translation._translation.gettext)

            translation.deactivate()
            self.assertIsNone(translation._translation)
            self.assertFalse(translation._installed)
            self.assertNotIn('_', builtins.__dict__)
        finally:
            translation._translation = None
            translation._installed = False
            builtins.__dict__.pop('_', None)

    def test_translated_messages(self):
        class ItalianTranslations(gettext.NullTranslations):
            messages = {
                "unexpected element '{}'": "elemento '{}' inatteso",
                "invalid int value: {}": "valore int non valido: {}",
                "invalid content in element '{}': {}": "contenuto non valido "
                                                        "nell'elemento '{}': {}",
            }

            def gettext(self, message):
                return self.messages.get(message, message)

        validator = SchemaValidator(
            '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
            '<xs:element name="a"><xs:complexType><xs:sequence>'
            '<xs:element name="b" type="xs:int"/>'
            '</xs:sequence></xs:complexType></xs:element></xs:schema>'
        )
        xml_data = '<a><b>x</b><c/></a>'

        with patch.object(translation, '_translation', ItalianTranslations()):
            result = validator.validate(xml_data)

        self.assertEqual(result.errors, (
            "contenuto non valido nell'elemento 'b': valore int non valido: x",
            "elemento 'c' inatteso",
        ))
        self.assertEqual(validator.validate(xml_data).errors, (
            "invalid content in element 'b': invalid int value: x",
            "unexpected element 'c'",
        ))


if __name__ == '__main__':
    import platform

    header_template = "Test xsdlite translations with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
