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
import unittest

from xsdlite.validators import XsdRestriction, FacetError
from xsdlite.validators.facets import check_length_facets, check_bound_facets, \
    check_enumeration_facet


class TestXsdFacets(unittest.TestCase):

    def check_error(self, func, value, restriction, message):
        with self.assertRaises(FacetError) as ctx:
            func(value, restriction)
        self.assertEqual(str(ctx.exception), message)

    def test_restriction_model(self):
        restriction = XsdRestriction('xs:string')
        self.assertEqual(restriction.base, 'xs:string')
        self.assertEqual(restriction.patterns, ())
        self.assertEqual(restriction.enumeration, ())
        self.assertFalse(restriction.has_length_facets)
        self.assertFalse(restriction.has_bound_facets)

        restriction = XsdRestriction('xs:int', min_length='1', max_exclusive='10')
        self.assertTrue(restriction.has_length_facets)
        self.assertTrue(restriction.has_bound_facets)

        with self.assertRaises(AttributeError):
            restriction.base = 'xs:string'  # noqa

    def test_length_facet(self):
        restriction = XsdRestriction('xs:string', length='5')
        self.assertIsNone(check_length_facets('abcde', restriction))
        self.check_error(check_length_facets, 'abc', restriction,
                         "length must be exactly 5, got 3")

    def test_min_length_facet(self):
        restriction = XsdRestriction('xs:string', min_length='2')
        self.assertIsNone(check_length_facets('ab', restriction))
        self.check_error(check_length_facets, 'a', restriction,
                         "length must be at least 2, got 1")

    def test_max_length_facet(self):
        restriction = XsdRestriction('xs:string', max_length='3')
        self.assertIsNone(check_length_facets('', restriction))
        self.check_error(check_length_facets, 'abcd', restriction,
                         "length must be at most 3, got 4")

    def test_length_counts_code_points(self):
        restriction = XsdRestriction('xs:string', length='5')
        self.assertIsNone(check_length_facets('ñandú', restriction))
        restriction = XsdRestriction('xs:string', max_length='2')
        self.assertIsNone(check_length_facets('€€', restriction))

    def test_malformed_length_facets_are_skipped(self):
        restriction = XsdRestriction('xs:string', length='five', max_length='')
        self.assertIsNone(check_length_facets('abc', restriction))

    def test_inclusive_bound_facets(self):
        restriction = XsdRestriction('xs:decimal', min_inclusive='1', max_inclusive='100')
        self.assertIsNone(check_bound_facets('1', restriction))
        self.assertIsNone(check_bound_facets('100.0', restriction))
        self.check_error(check_bound_facets, '0', restriction, "value must be >= 1, got 0")
        self.check_error(check_bound_facets, '150.5', restriction,
                         "value must be <= 100, got 150.5")

    def test_exclusive_bound_facets(self):
        restriction = XsdRestriction('xs:double', min_exclusive='0', max_exclusive='10')
        self.assertIsNone(check_bound_facets('0.001', restriction))
        self.check_error(check_bound_facets, '0', restriction, "value must be > 0, got 0")
        self.check_error(check_bound_facets, '10', restriction, "value must be < 10, got 10")
        self.check_error(check_bound_facets, '1e3', restriction,
                         "value must be < 10, got 1000")

    def test_malformed_bound_facets_are_skipped(self):
        restriction = XsdRestriction('xs:decimal', min_inclusive='one', max_inclusive='10')
        self.assertIsNone(check_bound_facets('-5', restriction))
        self.check_error(check_bound_facets, '11', restriction, "value must be <= 10, got 11")

    def test_enumeration_facet(self):
        restriction = XsdRestriction('xs:string', enumeration=('high', 'medium', 'low'))
        self.assertIsNone(check_enumeration_facet('high', restriction))
        self.check_error(check_enumeration_facet, 'urgent', restriction,
                         "value must be one of the enumerated values")
        self.check_error(check_enumeration_facet, 'High', restriction,
                         "value must be one of the enumerated values")
        self.check_error(check_enumeration_facet, ' high', restriction,
                         "value must be one of the enumerated values")

    def test_no_enumeration(self):
        restriction = XsdRestriction('xs:string')
        self.assertIsNone(check_enumeration_facet('anything', restriction))


if __name__ == '__main__':
    unittest.main()
