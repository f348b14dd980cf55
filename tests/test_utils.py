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
"""Tests on internal helper functions"""
import unittest
import logging

from xsdlite import XsdLiteTypeError, XsdLiteValueError, limits, _limits
from xsdlite.names import XSD_NAMESPACE, XSD_ELEMENT, XSD_SCHEMA
from xsdlite.utils.qnames import get_namespace, local_name
from xsdlite.utils.logger import set_logging_level, logged


class TestQNameHelpers(unittest.TestCase):

    def test_get_namespace(self):
        self.assertEqual(get_namespace(''), '')
        self.assertEqual(get_namespace('local'), '')
        self.assertEqual(get_namespace(XSD_ELEMENT), XSD_NAMESPACE)
        self.assertEqual(get_namespace('{wrong'), '')
        self.assertEqual(get_namespace('{}name'), '')
        self.assertEqual(get_namespace('{ ns }name'), ' ns ')

        with self.assertRaises(XsdLiteTypeError):
            get_namespace(None)  # type: ignore[arg-type]

    def test_local_name(self):
        self.assertEqual(local_name(XSD_SCHEMA), 'schema')
        self.assertEqual(local_name('schema'), 'schema')
        self.assertEqual(local_name('xs:schema'), 'schema')
        self.assertEqual(local_name(''), '')

        with self.assertRaises(XsdLiteValueError):
            local_name('a:b:c')
        with self.assertRaises(XsdLiteTypeError):
            local_name(1)  # type: ignore[arg-type]


class TestLimits(unittest.TestCase):

    def test_default_limits(self):
        self.assertEqual(limits.MAX_MODEL_DEPTH, 15)
        self.assertEqual(limits.MAX_XML_DEPTH, 250)
        self.assertEqual(_limits.MAX_MODEL_DEPTH, limits.MAX_MODEL_DEPTH)
        self.assertEqual(_limits.MAX_XML_DEPTH, limits.MAX_XML_DEPTH)

    def test_change_limits(self):
        max_model_depth = limits.MAX_MODEL_DEPTH
        max_xml_depth = limits.MAX_XML_DEPTH
        try:
            limits.MAX_MODEL_DEPTH = 20
            self.assertEqual(_limits.MAX_MODEL_DEPTH, 20)
            limits.MAX_XML_DEPTH = 1
            self.assertEqual(_limits.MAX_XML_DEPTH, 1)

            with self.assertRaises(XsdLiteValueError):
                limits.MAX_MODEL_DEPTH = 4
            with self.assertRaises(XsdLiteValueError):
                limits.MAX_XML_DEPTH = 0
            with self.assertRaises(XsdLiteTypeError):
                limits.MAX_XML_DEPTH = '10'
            with self.assertRaises(XsdLiteTypeError):
                limits.MAX_MODEL_DEPTH = True

            self.assertEqual(limits.MAX_MODEL_DEPTH, 20)
            self.assertEqual(limits.MAX_XML_DEPTH, 1)
        finally:
            limits.MAX_MODEL_DEPTH = max_model_depth
            limits.MAX_XML_DEPTH = max_xml_depth


class TestLogger(unittest.TestCase):

    def test_set_logging_level(self):
        logger = logging.getLogger('xsdlite')
        current_level = logger.level
        try:
            set_logging_level(logging.DEBUG)
            self.assertEqual(logger.level, logging.DEBUG)

            set_logging_level('ERROR')
            self.assertEqual(logger.level, logging.ERROR)

            set_logging_level(' warning ')
            self.assertEqual(logger.level, logging.WARNING)

            self.assertRaises(ValueError, set_logging_level, 'WRONG')
            self.assertEqual(logger.level, logging.WARNING)
        finally:
            logger.setLevel(current_level)

    def test_logged_decorator(self):
        logger = logging.getLogger('xsdlite')

        def func(*args, **kwargs):
            logger.warning('Warning log line')
            logger.info('Info log line')
            logger.debug('Debug log line')

        with self.assertLogs('xsdlite', level='DEBUG') as ctx:
            logged(func)(loglevel='ERROR')
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertEqual(len(ctx.output), 0)

            logged(func)(loglevel='WARNING')
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertEqual(len(ctx.output), 1)
            self.assertIn("Warning log line", ctx.output[-1])

            logged(func)(loglevel=logging.INFO)
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertEqual(len(ctx.output), 3)
            self.assertIn("Info log line", ctx.output[-1])

            logged(func)()
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertEqual(len(ctx.output), 6)
            self.assertIn("Debug log line", ctx.output[-1])


if __name__ == '__main__':
    import platform
    header_template = "Test xsdlite helpers with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
