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
XML Schema validators subpackage.
"""
from .exceptions import SchemaParseError, XMLParseError, RootElementError, \
    PatternError, ContentError, UnresolvedRefError, NameMismatchError, \
    UnexpectedAttributeError, MissingRequiredAttributeError, UnexpectedElementError, \
    InvalidChoiceMemberError, OccurrenceError, TooFewOccurrencesError, \
    TooManyOccurrencesError, ValueCheckError, InvalidValueError, UnsupportedTypeError, \
    InvalidSimpleTypeError, FacetError, ModelDepthError, InvalidContentError, \
    InvalidAttributeError

from .facets import XsdRestriction
from .simple_types import XsdSimpleType, XsdUnion, XsdList
from .attributes import XsdTypeRef, XsdAttribute
from .groups import XsdSequence, XsdChoice
from .complex_types import XsdComplexType
from .elements import XsdElementRef, XsdElement
from .xsd_globals import Schema
from .builders import SchemaBuilder, build_schema
from .patterns import PatternCache
from .values import ValueChecker
from .validation import ValidationContext, ValidationResult
from .schemas import SchemaValidator

__all__ = ['SchemaParseError', 'XMLParseError', 'RootElementError', 'PatternError',
           'ContentError', 'UnresolvedRefError', 'NameMismatchError',
           'UnexpectedAttributeError', 'MissingRequiredAttributeError',
           'UnexpectedElementError', 'InvalidChoiceMemberError', 'OccurrenceError',
           'TooFewOccurrencesError', 'TooManyOccurrencesError', 'ValueCheckError',
           'InvalidValueError', 'UnsupportedTypeError', 'InvalidSimpleTypeError',
           'FacetError', 'ModelDepthError', 'InvalidContentError', 'InvalidAttributeError',
           'XsdRestriction', 'XsdSimpleType', 'XsdUnion', 'XsdList', 'XsdTypeRef',
           'XsdAttribute', 'XsdSequence', 'XsdChoice', 'XsdComplexType',
           'XsdElementRef', 'XsdElement', 'Schema', 'SchemaBuilder', 'build_schema',
           'PatternCache', 'ValueChecker', 'ValidationContext', 'ValidationResult',
           'SchemaValidator']
