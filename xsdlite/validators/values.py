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
This module contains the checker of simple values against XSD builtin types
and user-defined simple type restrictions.
"""
from typing import Optional

from xsdlite import _limits
from xsdlite.translation import gettext as _
from .builtins import NUMERIC_BOUND_TYPES, BUILTIN_TYPES_MAP, get_builtin_validator
from .exceptions import PatternError, UnsupportedTypeError, InvalidSimpleTypeError, \
    FacetError, ModelDepthError
from .facets import XsdRestriction, check_length_facets, check_bound_facets, \
    check_enumeration_facet
from .patterns import PatternCache
from .xsd_globals import Schema


class ValueChecker:
    """
    Checks lexical values against the types of a schema. Builtin types are
    validated by the functions of the builtin types table, the other names
    are resolved as global simple types and checked through their chain
    of restrictions.

    :param schema: the schema model, used for resolving user-defined simple types.
    :param patterns: the cache of compiled patterns, a new one is created if not provided.
    """
    def __init__(self, schema: Schema, patterns: Optional[PatternCache] = None) -> None:
        self.schema = schema
        self.patterns = patterns if patterns is not None else PatternCache()

    def __repr__(self) -> str:
        return '%s(schema=%r)' % (self.__class__.__name__, self.schema)

    def get_builtin_name(self, type_name: str) -> Optional[str]:
        """
        Returns the local name of the builtin type referred by *type_name*,
        `None` if the name doesn't refer to a builtin type.
        """
        prefix, sep, name = type_name.rpartition(':')
        if name not in BUILTIN_TYPES_MAP:
            return None
        elif not self.schema.is_xsd_prefix(prefix if sep else None):
            return None
        return name

    def check_value(self, value: str, type_name: str,
                    restriction: Optional[XsdRestriction] = None) -> str:
        """
        Checks a value against a type and an optional restriction of that type.
        Facets are checked in order and the first violation is raised.

        :param value: the lexical value, with no whitespace normalization.
        :param type_name: a builtin type name, prefixed or not, or the name of \
        a global simple type of the schema.
        :param restriction: an optional restriction whose facets are checked \
        after the type check.
        :returns: the name of the builtin type resolved through the restrictions.
        :raises: a `ValueCheckError` subclass describing the first violation.
        """
        return self._check_value(value, type_name, restriction, depth=0)

    def _check_value(self, value: str, type_name: str,
                     restriction: Optional[XsdRestriction], depth: int) -> str:
        base_name = self.check_type(value, type_name, depth)
        if restriction is not None:
            self.check_facets(value, restriction, base_name)
        return base_name

    def check_type(self, value: str, type_name: str, depth: int = 0) -> str:
        builtin_name = self.get_builtin_name(type_name)
        if builtin_name is not None:
            validator = get_builtin_validator(builtin_name)
            if validator is not None:
                validator(value)
            return builtin_name

        simple_type = self.schema.get_simple_type(type_name)
        if simple_type is None:
            raise UnsupportedTypeError(type_name)
        elif simple_type.restriction is None:
            raise InvalidSimpleTypeError(type_name)
        elif depth >= _limits.MAX_MODEL_DEPTH:
            raise ModelDepthError(type_name, _limits.MAX_MODEL_DEPTH)

        restriction = simple_type.restriction
        return self._check_value(value, restriction.base, restriction, depth + 1)

    def check_facets(self, value: str, restriction: XsdRestriction,
                     base_name: Optional[str] = None) -> None:
        """
        Checks the facets of a restriction. Numeric bounds are checked only
        if *base_name* is a numeric builtin type.
        """
        check_length_facets(value, restriction)
        if base_name in NUMERIC_BOUND_TYPES:
            check_bound_facets(value, restriction)

        for pattern in restriction.patterns:
            try:
                regex = self.patterns.compile(pattern)
            except PatternError:
                raise FacetError(_("invalid pattern: {}").format(pattern)) from None

            if regex.fullmatch(value) is None:
                raise FacetError(_("value does not match pattern: {}").format(pattern))

        check_enumeration_facet(value, restriction)
