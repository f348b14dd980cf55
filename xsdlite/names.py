#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains namespace definitions and the XSD tags used by the schema builder.
"""

###
# Namespace URIs
XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
"URI of the XML Schema Definition namespace (xs|xsd)"

XSI_NAMESPACE = 'http://www.w3.org/2001/XMLSchema-instance'
"URI of the XML Schema Instance namespace (xsi)"


def xsd_qname(name: str) -> str:
    return f'{{{XSD_NAMESPACE}}}{name}'


###
# Structural tags
XSD_SCHEMA = xsd_qname('schema')
XSD_ELEMENT = xsd_qname('element')
XSD_ATTRIBUTE = xsd_qname('attribute')
XSD_COMPLEX_TYPE = xsd_qname('complexType')
XSD_SIMPLE_TYPE = xsd_qname('simpleType')
XSD_SEQUENCE = xsd_qname('sequence')
XSD_CHOICE = xsd_qname('choice')
XSD_RESTRICTION = xsd_qname('restriction')
XSD_UNION = xsd_qname('union')
XSD_LIST = xsd_qname('list')

###
# Facets
XSD_PATTERN = xsd_qname('pattern')
XSD_ENUMERATION = xsd_qname('enumeration')
XSD_LENGTH = xsd_qname('length')
XSD_MIN_LENGTH = xsd_qname('minLength')
XSD_MAX_LENGTH = xsd_qname('maxLength')
XSD_MIN_INCLUSIVE = xsd_qname('minInclusive')
XSD_MAX_INCLUSIVE = xsd_qname('maxInclusive')
XSD_MIN_EXCLUSIVE = xsd_qname('minExclusive')
XSD_MAX_EXCLUSIVE = xsd_qname('maxExclusive')
XSD_WHITE_SPACE = xsd_qname('whiteSpace')
XSD_TOTAL_DIGITS = xsd_qname('totalDigits')
XSD_FRACTION_DIGITS = xsd_qname('fractionDigits')

###
# Attribute values
QUALIFIED = 'qualified'

UNBOUNDED = 'unbounded'
