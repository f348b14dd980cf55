#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterator
from typing import Optional, Type, Union

from xsdlite.exceptions import XsdLiteTypeError
from xsdlite.resources import XMLSourceType, XmlNode, parse_xml
from xsdlite.translation import gettext as _
from xsdlite.validators import ContentError, Schema, SchemaValidator, ValidationResult

SchemaSourceType = Union[XMLSourceType, Schema, SchemaValidator]

__all__ = ['XmlNode', 'parse_xml', 'get_validator', 'validate', 'is_valid', 'iter_errors']


def get_validator(schema: SchemaSourceType,
                  cls: Optional[Type[SchemaValidator]] = None) -> SchemaValidator:
    """
    Returns a validator instance for the schema argument, that can be
    a validator, a schema model or an XSD source.
    """
    if cls is None:
        cls = SchemaValidator
    elif not issubclass(cls, SchemaValidator):
        raise XsdLiteTypeError(_("invalid validator class {!r}").format(cls))

    if isinstance(schema, SchemaValidator):
        return schema
    return cls(schema)


def validate(xml_document: XMLSourceType,
             schema: SchemaSourceType,
             cls: Optional[Type[SchemaValidator]] = None,
             subject: Optional[str] = None) -> ValidationResult:
    """
    Validates an XML document against a schema.

    :param xml_document: the XML document, a string, a bytes object or a file-like object.
    :param schema: can be a validator instance, a schema model or an XSD source.
    :param cls: validator class to use if a new validator has to be built.
    :param subject: an optional label for the validation result.
    :raises: a setup error if the schema or the document can't be parsed or if \
    the root element is not declared in the schema.
    """
    return get_validator(schema, cls).validate(xml_document, subject)


def is_valid(xml_document: XMLSourceType,
             schema: SchemaSourceType,
             cls: Optional[Type[SchemaValidator]] = None) -> bool:
    """
    Like :meth:`validate` except that returns ``True`` if the XML document
    is valid, ``False`` if it's invalid.
    """
    return get_validator(schema, cls).is_valid(xml_document)


def iter_errors(xml_document: XMLSourceType,
                schema: SchemaSourceType,
                cls: Optional[Type[SchemaValidator]] = None) -> Iterator[ContentError]:
    """
    Creates an iterator for the content errors of an XML document.
    Takes the same arguments of the function :meth:`is_valid`.
    """
    return get_validator(schema, cls).iter_errors(xml_document)
