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
This module contains the loading of XML sources and the generic XML tree
that is validated against a schema.
"""
import dataclasses as dc
import io
from collections.abc import Iterator
from typing import IO, Optional, Union
from xml.dom import pulldom
from xml.etree import ElementTree
from xml.sax import SAXParseException
from xml.sax import expatreader  # type: ignore[attr-defined]

from xsdlite import _limits
from xsdlite.exceptions import XsdLiteTypeError, XMLResourceError, \
    XMLResourceForbidden, XMLResourceExceeded
from xsdlite.translation import gettext as _
from xsdlite.utils.logger import logger
from xsdlite.utils.qnames import get_namespace, local_name

XMLSourceType = Union[str, bytes, IO[str], IO[bytes]]


class SafeExpatParser(expatreader.ExpatParser):  # type: ignore[misc]

    def forbid_entity_declaration(self, name, is_parameter_entity,  # type: ignore
                                  value, base, sysid, pubid, notation_name):
        raise XMLResourceForbidden(f"Entities are forbidden (entity_name={name!r})")

    def forbid_unparsed_entity_declaration(self, name, base,  # type: ignore
                                           sysid, pubid, notation_name):
        raise XMLResourceForbidden(f"Unparsed entities are forbidden (entity_name={name!r})")

    def forbid_external_entity_reference(self, context, base, sysid, pubid):  # type: ignore
        raise XMLResourceForbidden(
            f"External references are forbidden (system_id={sysid!r}, public_id={pubid!r})"
        )  # pragma: no cover

    def reset(self) -> None:
        super().reset()
        self._parser.EntityDeclHandler = self.forbid_entity_declaration
        self._parser.UnparsedEntityDeclHandler = self.forbid_unparsed_entity_declaration
        self._parser.ExternalEntityRefHandler = self.forbid_external_entity_reference


def load_source(source: XMLSourceType) -> Union[str, bytes]:
    """
    Returns the content of an XML source, that can be a string, a bytes
    object or a file-like object opened in text or binary mode.
    """
    if isinstance(source, (str, bytes)):
        return source
    elif isinstance(source, bytearray):
        return bytes(source)
    elif hasattr(source, 'read'):
        content = source.read()
        if isinstance(content, (str, bytes)):
            return content

    raise XsdLiteTypeError(
        _("invalid XML source type {!r}").format(type(source))
    )


def defuse_xml(fp: Union[io.StringIO, io.BytesIO]) -> None:
    """
    Scans the prolog of an XML source up to the root element, raising
    an `XMLResourceForbidden` if the source declares entities.
    """
    parser = SafeExpatParser()
    try:
        for event, node in pulldom.parse(fp, parser):
            if event == pulldom.START_ELEMENT:
                break
    except SAXParseException:
        pass  # the purpose is to defuse not to check xml source syntax
    finally:
        fp.seek(0)


def load_xml(source: XMLSourceType) -> tuple[ElementTree.Element, dict[str, str]]:
    """
    Parses an XML source into an ElementTree structure. Entity declarations
    are forbidden and the depth of the data is limited by `limits.MAX_XML_DEPTH`.
    Comments and processing instructions are kept in the tree, so the text
    runs they separate remain distinct.

    :param source: a string, a bytes object or a file-like object.
    :returns: the root element and a namespace map. When a prefix is \
    declared more than once the first declaration is kept.
    :raises: `XMLResourceError` if the source is not well-formed XML.
    """
    content = load_source(source)
    fp: Union[io.StringIO, io.BytesIO]
    if isinstance(content, str):
        fp = io.StringIO(content)
    else:
        fp = io.BytesIO(content)

    defuse_xml(fp)

    root: Optional[ElementTree.Element] = None
    namespaces: dict[str, str] = {}
    depth = 0
    max_depth = _limits.MAX_XML_DEPTH

    parser = ElementTree.XMLParser(
        target=ElementTree.TreeBuilder(insert_comments=True, insert_pis=True)
    )
    try:
        for event, node in ElementTree.iterparse(fp, ('start-ns', 'start', 'end'), parser):
            if event == 'start':
                if root is None:
                    root = node
                depth += 1
                if depth > max_depth:
                    raise XMLResourceExceeded(
                        _("XML data depth exceeded (MAX_XML_DEPTH={!r})").format(max_depth)
                    )
            elif event == 'end':
                depth -= 1
            else:
                namespaces.setdefault(*node)
    except ElementTree.ParseError as err:
        raise XMLResourceError(str(err)) from None

    if root is None:
        raise XMLResourceError(_("no element found"))  # pragma: no cover
    return root, namespaces


@dc.dataclass(frozen=True)
class XmlNode:
    """
    A generic XML element with resolved namespaces.

    :param name: the local name of the element.
    :param namespace: the namespace URI of the element, an empty string for no namespace.
    :param attributes: the attributes of the element, namespace declarations \
    excluded. The names of attributes with a namespace are in the extended \
    form '{uri}local'.
    :param content: the text of the element, concatenation of the character data runs \
    stripped of leading and trailing whitespace.
    :param children: the child elements, in document order.
    """
    name: str
    namespace: str = ''
    attributes: dict[str, str] = dc.field(default_factory=dict)
    content: str = ''
    children: tuple['XmlNode', ...] = ()

    def __repr__(self) -> str:
        if self.namespace:
            return '%s(name=%r, namespace=%r)' % (
                self.__class__.__name__, self.name, self.namespace
            )
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    @property
    def qname(self) -> str:
        return f'{{{self.namespace}}}{self.name}' if self.namespace else self.name

    def iter(self) -> Iterator['XmlNode']:
        """Creates an iterator for the node and its descendants, in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    @classmethod
    def from_element(cls, elem: ElementTree.Element) -> 'XmlNode':
        parts = [elem.text.strip()] if elem.text else []
        children: list[XmlNode] = []
        for child in elem:
            if not callable(child.tag):
                children.append(cls.from_element(child))
            if child.tail:
                parts.append(child.tail.strip())

        return cls(
            name=local_name(elem.tag),
            namespace=get_namespace(elem.tag),
            attributes=dict(elem.attrib),
            content=''.join(parts),
            children=tuple(children),
        )


def parse_xml(source: XMLSourceType) -> XmlNode:
    """
    Parses an XML source into a tree of generic nodes.

    :param source: a string, a bytes object or a file-like object.
    :raises: `XMLResourceError` if the source is not well-formed XML, \
    or a subclass if it violates a protection limit.
    """
    root, _namespaces = load_xml(source)
    node = XmlNode.from_element(root)
    logger.debug("Parsed XML data with root %r", node)
    return node
