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
This module contains the builder of the schema model from an XSD source.
"""
from typing import Optional, Union
from xml.etree.ElementTree import Element

from xsdlite.exceptions import XMLResourceError
from xsdlite.names import XSD_NAMESPACE, XSD_SCHEMA, XSD_ELEMENT, XSD_ATTRIBUTE, \
    XSD_COMPLEX_TYPE, XSD_SIMPLE_TYPE, XSD_SEQUENCE, XSD_CHOICE, XSD_RESTRICTION, \
    XSD_UNION, XSD_LIST, XSD_PATTERN, XSD_ENUMERATION, XSD_LENGTH, XSD_MIN_LENGTH, \
    XSD_MAX_LENGTH, XSD_MIN_INCLUSIVE, XSD_MAX_INCLUSIVE, XSD_MIN_EXCLUSIVE, \
    XSD_MAX_EXCLUSIVE, XSD_WHITE_SPACE, XSD_TOTAL_DIGITS, XSD_FRACTION_DIGITS
from xsdlite.resources import XMLSourceType, load_xml
from xsdlite.translation import gettext as _
from xsdlite.utils.logger import logger
from xsdlite.utils.qnames import get_namespace, local_name
from .exceptions import SchemaParseError
from .attributes import XsdTypeRef, XsdAttribute
from .complex_types import XsdComplexType
from .elements import XsdElementRef, XsdElement, ElementContentType
from .facets import XsdRestriction
from .groups import XsdSequence, XsdChoice
from .simple_types import XsdSimpleType, XsdUnion, XsdList
from .xsd_globals import Schema

# Map from facet tags to the keyword arguments of XsdRestriction
SINGLE_FACETS = {
    XSD_LENGTH: 'length',
    XSD_MIN_LENGTH: 'min_length',
    XSD_MAX_LENGTH: 'max_length',
    XSD_MIN_INCLUSIVE: 'min_inclusive',
    XSD_MAX_INCLUSIVE: 'max_inclusive',
    XSD_MIN_EXCLUSIVE: 'min_exclusive',
    XSD_MAX_EXCLUSIVE: 'max_exclusive',
    XSD_WHITE_SPACE: 'white_space',
    XSD_TOTAL_DIGITS: 'total_digits',
    XSD_FRACTION_DIGITS: 'fraction_digits',
}


def is_xsd_element(elem: Element) -> bool:
    return isinstance(elem.tag, str) and get_namespace(elem.tag) == XSD_NAMESPACE


def get_child(elem: Element, tag: str) -> Optional[Element]:
    """Returns the first child with the given tag, `None` if it's missing."""
    for child in elem:
        if child.tag == tag:
            return child
    return None


class SchemaBuilder:
    """
    Builds the schema model from the root element of an XSD document.
    Only the subset of XSD components of the model is considered, other
    XSD components and foreign elements are ignored. No reference is
    resolved at build time.

    :param namespaces: the namespace map of the XSD document.
    """
    def __init__(self, namespaces: Optional[dict[str, str]] = None) -> None:
        self.namespaces = namespaces if namespaces is not None else {}

    def build(self, root: Element) -> Schema:
        if root.tag != XSD_SCHEMA:
            raise SchemaParseError(
                _("expected element <{}> but have <{}>").format(XSD_SCHEMA, root.tag)
            )

        elements = []
        complex_types: dict[str, XsdComplexType] = {}
        simple_types: dict[str, XsdSimpleType] = {}

        for child in filter(is_xsd_element, root):
            if child.tag == XSD_ELEMENT:
                elements.append(self.parse_element(child))
            elif child.tag == XSD_COMPLEX_TYPE:
                complex_type = self.parse_complex_type(child)
                if complex_type.name is not None:
                    complex_types.setdefault(complex_type.name, complex_type)
            elif child.tag == XSD_SIMPLE_TYPE:
                simple_type = self.parse_simple_type(child)
                if simple_type.name is not None:
                    simple_types.setdefault(simple_type.name, simple_type)
            else:
                self._ignored(child)

        schema = Schema(
            target_namespace=root.get('targetNamespace', ''),
            element_form_default=root.get('elementFormDefault', ''),
            elements=tuple(elements),
            complex_types=complex_types,
            simple_types=simple_types,
            namespaces=self.namespaces,
        )
        logger.debug("Built %r with %d complex types and %d simple types",
                     schema, len(complex_types), len(simple_types))
        return schema

    @staticmethod
    def _ignored(elem: Element) -> None:
        logger.debug("Ignored unsupported XSD component %r", local_name(elem.tag))

    def parse_element(self, elem: Element) -> XsdElement:
        content: ElementContentType
        complex_type = get_child(elem, XSD_COMPLEX_TYPE)
        simple_type = get_child(elem, XSD_SIMPLE_TYPE)

        if 'ref' in elem.attrib:
            content = XsdElementRef(elem.attrib['ref'])
        elif complex_type is not None:
            content = self.parse_complex_type(complex_type)
        elif simple_type is not None:
            content = self.parse_simple_type(simple_type)
        elif 'type' in elem.attrib:
            content = XsdTypeRef(elem.attrib['type'])
        else:
            content = None

        return XsdElement(
            name=elem.get('name', ''),
            content=content,
            namespace=elem.get('namespace'),
            min_occurs=elem.get('minOccurs'),
            max_occurs=elem.get('maxOccurs'),
        )

    def parse_complex_type(self, elem: Element) -> XsdComplexType:
        attributes = []
        model: Union[XsdSequence, XsdChoice, None] = None

        for child in filter(is_xsd_element, elem):
            if child.tag == XSD_ATTRIBUTE:
                attributes.append(self.parse_attribute(child))
            elif child.tag not in (XSD_SEQUENCE, XSD_CHOICE):
                self._ignored(child)
            elif model is not None:
                logger.warning(
                    "complex type %r declares both a sequence and a choice, "
                    "the %s is ignored", elem.get('name'), local_name(child.tag)
                )
            elif child.tag == XSD_SEQUENCE:
                model = self.parse_sequence(child)
            else:
                model = self.parse_choice(child)

        return XsdComplexType(
            name=elem.get('name'),
            attributes=tuple(attributes),
            model=model,
        )

    def parse_sequence(self, elem: Element) -> XsdSequence:
        elements = []
        for child in filter(is_xsd_element, elem):
            if child.tag == XSD_ELEMENT:
                elements.append(self.parse_element(child))
            else:
                self._ignored(child)
        return XsdSequence(tuple(elements))

    def parse_choice(self, elem: Element) -> XsdChoice:
        elements = []
        choice = None
        for child in filter(is_xsd_element, elem):
            if child.tag == XSD_ELEMENT:
                elements.append(self.parse_element(child))
            elif child.tag == XSD_CHOICE and choice is None:
                choice = self.parse_choice(child)
            else:
                self._ignored(child)

        return XsdChoice(
            elements=tuple(elements),
            choice=choice,
            min_occurs=elem.get('minOccurs'),
            max_occurs=elem.get('maxOccurs'),
        )

    def parse_attribute(self, elem: Element) -> XsdAttribute:
        simple_type = get_child(elem, XSD_SIMPLE_TYPE)
        attribute_type: Union[XsdTypeRef, XsdSimpleType, None]

        if 'type' in elem.attrib:
            attribute_type = XsdTypeRef(elem.attrib['type'])
        elif simple_type is not None:
            attribute_type = self.parse_simple_type(simple_type)
        else:
            attribute_type = None

        return XsdAttribute(
            name=elem.get('name', ''),
            type=attribute_type,
            use=elem.get('use', 'optional'),
            default=elem.get('default'),
            fixed=elem.get('fixed'),
        )

    def parse_simple_type(self, elem: Element) -> XsdSimpleType:
        restriction = get_child(elem, XSD_RESTRICTION)
        union = get_child(elem, XSD_UNION)
        list_elem = get_child(elem, XSD_LIST)

        return XsdSimpleType(
            name=elem.get('name'),
            restriction=None if restriction is None else self.parse_restriction(restriction),
            union=None if union is None else self.parse_union(union),
            list=None if list_elem is None else XsdList(list_elem.get('itemType')),
        )

    def parse_union(self, elem: Element) -> XsdUnion:
        return XsdUnion(
            member_types=tuple(elem.get('memberTypes', '').split()),
            simple_types=tuple(self.parse_simple_type(child)
                               for child in elem if child.tag == XSD_SIMPLE_TYPE),
        )

    def parse_restriction(self, elem: Element) -> XsdRestriction:
        patterns = []
        enumeration = []
        facets: dict[str, str] = {}

        for child in filter(is_xsd_element, elem):
            value = child.get('value', '')
            if child.tag == XSD_PATTERN:
                patterns.append(value)
            elif child.tag == XSD_ENUMERATION:
                enumeration.append(value)
            elif child.tag in SINGLE_FACETS:
                facets.setdefault(SINGLE_FACETS[child.tag], value)
            else:
                self._ignored(child)

        return XsdRestriction(
            base=elem.get('base', ''),
            patterns=tuple(patterns),
            enumeration=tuple(enumeration),
            **facets
        )


def build_schema(source: XMLSourceType) -> Schema:
    """
    Builds a schema model from an XSD source.

    :param source: the XSD document as a string, a bytes object or a file-like object.
    :raises: `SchemaParseError` if the source is not well-formed XML or if \
    it's not an XSD schema.
    """
    try:
        root, namespaces = load_xml(source)
    except XMLResourceError as err:
        raise SchemaParseError(str(err)) from None

    return SchemaBuilder(namespaces).build(root)
