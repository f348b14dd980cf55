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
This module contains the exception classes of the validator: setup errors,
that are raised and stop a validation call, and content errors, that are
collected during the traversal of an XML document.
"""
from typing import Optional

from xsdlite.exceptions import XsdLiteException, XsdLiteValueError
from xsdlite.translation import gettext as _


###
# Setup errors

class SchemaParseError(XsdLiteValueError):
    """Raised when the schema source is not well-formed or it's not an XSD schema."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(_("failed to parse XSD: {}").format(reason))


class XMLParseError(XsdLiteValueError):
    """Raised when an XML document is not well-formed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(_("failed to parse XML: {}").format(reason))


class RootElementError(XsdLiteValueError, LookupError):
    """Raised when the root of an XML document is not declared by the schema."""

    def __init__(self, name: str, namespace: str = '') -> None:
        self.name = name
        self.namespace = namespace
        super().__init__(
            _("root element '{{{}}}{}' not defined in schema").format(namespace, name)
        )


class PatternError(XsdLiteValueError):
    """Raised when an XSD pattern facet can't be translated to a Python regex."""

    def __init__(self, pattern: str, reason: Optional[str] = None) -> None:
        self.pattern = pattern
        self.reason = reason
        message = _("invalid pattern: {}").format(pattern)
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


###
# Content errors

class ContentError(XsdLiteException):
    """
    Base class of the errors collected validating XML data. These errors are
    not raised out of a validation call, the string representation of an
    instance is the message reported in the validation result.

    :param message: the error message.
    """
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class UnresolvedRefError(ContentError):
    """An element reference that doesn't match any global element."""

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(_("referenced element not found: {}").format(ref))


class NameMismatchError(ContentError):
    def __init__(self, expected: str, namespace: str, name: str, node_namespace: str) -> None:
        self.expected = expected
        self.name = name
        super().__init__(
            _("element name or namespace mismatch: expected '{{{}}}{}', "
              "got '{{{}}}{}'").format(namespace, expected, node_namespace, name)
        )


class UnexpectedAttributeError(ContentError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(_("unexpected attribute '{}'").format(name))


class MissingRequiredAttributeError(ContentError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(_("missing required attribute '{}'").format(name))


class UnexpectedElementError(ContentError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(_("unexpected element '{}'").format(name))


class InvalidChoiceMemberError(ContentError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(_("element '{}' is not a valid choice").format(name))


class OccurrenceError(ContentError):
    """Base class for occurrence bounds violations of elements and choice groups."""
    name: Optional[str]
    occurs: int
    limit: int


class TooFewOccurrencesError(OccurrenceError):
    def __init__(self, name: Optional[str], occurs: int, min_occurs: int) -> None:
        self.name = name
        self.occurs = occurs
        self.limit = min_occurs
        if name is None:
            msg = _("choice group occurs {} times, minimum required is {}")
            super().__init__(msg.format(occurs, min_occurs))
        else:
            msg = _("element '{}' occurs {} times, minimum required is {}")
            super().__init__(msg.format(name, occurs, min_occurs))


class TooManyOccurrencesError(OccurrenceError):
    def __init__(self, name: Optional[str], occurs: int, max_occurs: int) -> None:
        self.name = name
        self.occurs = occurs
        self.limit = max_occurs
        if name is None:
            msg = _("choice group occurs {} times, maximum allowed is {}")
            super().__init__(msg.format(occurs, max_occurs))
        else:
            msg = _("element '{}' occurs {} times, maximum allowed is {}")
            super().__init__(msg.format(name, occurs, max_occurs))


###
# Value errors, reported by the type and restriction checker

class ValueCheckError(ContentError):
    """Base class for errors found checking a single value against a type."""


class InvalidValueError(ValueCheckError):
    """The value is not valid for a builtin type."""


class UnsupportedTypeError(ValueCheckError):
    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(_("unsupported type: {}").format(type_name))


class InvalidSimpleTypeError(ValueCheckError):
    """A user-defined simple type that has no restriction."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(_("simple type {} has no restriction").format(type_name))


class FacetError(ValueCheckError):
    """The value violates a facet of a restriction."""


class ModelDepthError(ValueCheckError):
    """A chain of restrictions or of element references exceeds the model depth limit."""

    def __init__(self, name: str, max_depth: int) -> None:
        self.name = name
        self.max_depth = max_depth
        super().__init__(
            _("{} exceeds the maximum model depth {}").format(name, max_depth)
        )


class InvalidContentError(ContentError):
    """Wraps a value error found checking the text content of an element."""

    def __init__(self, name: str, reason: ValueCheckError) -> None:
        self.name = name
        self.reason = reason
        super().__init__(_("invalid content in element '{}': {}").format(name, reason))


class InvalidAttributeError(ContentError):
    """Wraps a value error found checking the value of an attribute."""

    def __init__(self, name: str, reason: ValueCheckError) -> None:
        self.name = name
        self.reason = reason
        super().__init__(_("attribute '{}': {}").format(name, reason))
