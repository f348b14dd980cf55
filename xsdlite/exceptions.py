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
This module contains the base exception classes of the package.
"""


class XsdLiteException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class XsdLiteTypeError(XsdLiteException, TypeError):
    pass


class XsdLiteValueError(XsdLiteException, ValueError):
    pass


class XMLResourceError(XsdLiteException, OSError):
    """Raised when an error is found accessing or parsing an XML source."""


class XMLResourceForbidden(XMLResourceError):
    """Raised when the XML source contains forbidden declarations (e.g. entities)."""


class XMLResourceExceeded(XMLResourceError):
    """Raised when the XML source exceeds a protection limit."""
