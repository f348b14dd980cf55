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
"""Tests concerning the document level API"""
import unittest
import pathlib

import xsdlite
from xsdlite import XsdLiteTypeError, SchemaValidator, ValidationResult, \
    ContentError, SchemaParseError, XMLParseError, RootElementError, build_schema
from xsdlite.documents import get_validator

CASES_DIR = pathlib.Path(__file__).absolute().parent.joinpath('test_cases')


class CustomValidator(SchemaValidator):
    pass


class TestDocuments(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.xsd_data = CASES_DIR.joinpath('books/book.xsd').read_text()
        cls.valid_data = CASES_DIR.joinpath('books/book.xml').read_text()
        cls.invalid_data = CASES_DIR.joinpath('books/book-1_error.xml').read_text()

    def test_get_validator(self):
        validator = get_validator(self.xsd_data)
        self.assertIsInstance(validator, SchemaValidator)
        self.assertIs(get_validator(validator), validator)
        self.assertIs(get_validator(validator, cls=CustomValidator), validator)

        schema = build_schema(self.xsd_data)
        validator = get_validator(schema, cls=CustomValidator)
        self.assertIsInstance(validator, CustomValidator)
        self.assertIs(validator.schema, schema)

        with self.assertRaises(XsdLiteTypeError):
            get_validator(self.xsd_data, cls=ValidationResult)  # type: ignore[arg-type]

    def test_validate_function(self):
        result = xsdlite.validate(self.valid_data, self.xsd_data)
        self.assertIsInstance(result, ValidationResult)
        self.assertTrue(result.valid)
        self.assertEqual(result.subject, 'book')

        result = xsdlite.validate(self.invalid_data, self.xsd_data, subject='book-1_error.xml')
        self.assertFalse(result.valid)
        self.assertEqual(result.subject, 'book-1_error.xml')
        self.assertEqual(result.errors, (
            "element 'author' occurs 0 times, minimum required is 1",
        ))

    def test_is_valid_function(self):
        validator = SchemaValidator(self.xsd_data)
        self.assertTrue(xsdlite.is_valid(self.valid_data, validator))
        self.assertFalse(xsdlite.is_valid(self.invalid_data, validator))
        self.assertFalse(xsdlite.is_valid(self.invalid_data, self.xsd_data))

    def test_iter_errors_function(self):
        errors = list(xsdlite.iter_errors(self.valid_data, self.xsd_data))
        self.assertEqual(errors, [])

        errors = list(xsdlite.iter_errors(
            CASES_DIR.joinpath('books/book-3_errors.xml').read_bytes(), self.xsd_data
        ))
        self.assertEqual(len(errors), 3)
        self.assertTrue(all(isinstance(e, ContentError) for e in errors))

    def test_setup_errors(self):
        with self.assertRaises(SchemaParseError) as ctx:
            xsdlite.validate(self.valid_data, CASES_DIR.joinpath('books/not-a-schema.xsd')
                             .read_text())
        self.assertIn("expected element", str(ctx.exception))

        with self.assertRaises(XMLParseError):
            xsdlite.validate(CASES_DIR.joinpath('books/book-malformed.xml').read_text(),
                             self.xsd_data)

        with self.assertRaises(RootElementError):
            xsdlite.is_valid('<magazine/>', self.xsd_data)


if __name__ == '__main__':
    import platform

    header_template = "Test xsdlite document level API with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
