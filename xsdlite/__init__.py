#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import limits
from . import translation
from .exceptions import XsdLiteException, XsdLiteTypeError, XsdLiteValueError, \
    XMLResourceError, XMLResourceForbidden, XMLResourceExceeded
from .utils.logger import set_logging_level
from .resources import XmlNode, parse_xml
from .documents import validate, is_valid, iter_errors

from .validators import (
    SchemaParseError, XMLParseError, RootElementError, PatternError, ContentError,
    UnresolvedRefError, NameMismatchError, UnexpectedAttributeError,
    MissingRequiredAttributeError, UnexpectedElementError, InvalidChoiceMemberError,
    OccurrenceError, TooFewOccurrencesError, TooManyOccurrencesError, ValueCheckError,
    InvalidValueError, UnsupportedTypeError, InvalidSimpleTypeError, FacetError,
    ModelDepthError, InvalidContentError, InvalidAttributeError, Schema,
    build_schema, PatternCache, ValueChecker, ValidationResult, SchemaValidator
)

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2026, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'limits', 'translation', 'XsdLiteException', 'XsdLiteTypeError',
    'XsdLiteValueError', 'XMLResourceError', 'XMLResourceForbidden',
    'XMLResourceExceeded', 'set_logging_level', 'XmlNode', 'parse_xml', 'validate',
    'is_valid', 'iter_errors', 'SchemaParseError', 'XMLParseError', 'RootElementError',
    'PatternError', 'ContentError', 'UnresolvedRefError', 'NameMismatchError',
    'UnexpectedAttributeError', 'MissingRequiredAttributeError',
    'UnexpectedElementError', 'InvalidChoiceMemberError', 'OccurrenceError',
    'TooFewOccurrencesError', 'TooManyOccurrencesError', 'ValueCheckError',
    'InvalidValueError', 'UnsupportedTypeError', 'InvalidSimpleTypeError',
    'FacetError', 'ModelDepthError', 'InvalidContentError', 'InvalidAttributeError',
    'Schema', 'build_schema', 'PatternCache', 'ValueChecker', 'ValidationResult',
    'SchemaValidator',
]
