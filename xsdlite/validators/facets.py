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
This module contains the restriction model and the checks of the constraining
facets that don't require a compiled pattern.
"""
import dataclasses as dc
from typing import Optional

from xsdlite.translation import gettext as _
from .exceptions import FacetError
from .helpers import format_number, parse_float


@dc.dataclass(frozen=True)
class XsdRestriction:
    """
    A simple type restriction: a base type name and a set of constraining facets.
    A facet that is `None` (or an empty tuple for patterns and enumerations) is
    not declared and it's never checked.

    The *white_space*, *total_digits* and *fraction_digits* facets are kept in
    the model but they are not checked by the validator.
    """
    base: str
    patterns: tuple[str, ...] = ()
    enumeration: tuple[str, ...] = ()
    length: Optional[str] = None
    min_length: Optional[str] = None
    max_length: Optional[str] = None
    min_inclusive: Optional[str] = None
    max_inclusive: Optional[str] = None
    min_exclusive: Optional[str] = None
    max_exclusive: Optional[str] = None
    white_space: Optional[str] = None
    total_digits: Optional[str] = None
    fraction_digits: Optional[str] = None

    @property
    def has_length_facets(self) -> bool:
        return self.length is not None or self.min_length is not None \
            or self.max_length is not None

    @property
    def has_bound_facets(self) -> bool:
        return any(x is not None for x in (self.min_inclusive, self.max_inclusive,
                                           self.min_exclusive, self.max_exclusive))


def _get_length(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None  # a malformed facet is skipped


def _get_bound(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return parse_float(value)
    except ValueError:
        return None  # a malformed facet is skipped


def check_length_facets(value: str, restriction: XsdRestriction) -> None:
    """Checks length, minLength and maxLength facets, counting code points."""
    if not restriction.has_length_facets:
        return

    actual_length = len(value)

    length = _get_length(restriction.length)
    if length is not None and actual_length != length:
        raise FacetError(
            _("length must be exactly {}, got {}").format(length, actual_length)
        )

    min_length = _get_length(restriction.min_length)
    if min_length is not None and actual_length < min_length:
        raise FacetError(
            _("length must be at least {}, got {}").format(min_length, actual_length)
        )

    max_length = _get_length(restriction.max_length)
    if max_length is not None and actual_length > max_length:
        raise FacetError(
            _("length must be at most {}, got {}").format(max_length, actual_length)
        )


def check_bound_facets(value: str, restriction: XsdRestriction) -> None:
    """
    Checks minInclusive, maxInclusive, minExclusive and maxExclusive facets.
    The value must be already validated against a numeric base type.
    """
    if not restriction.has_bound_facets:
        return

    try:
        number = parse_float(value)
    except ValueError:
        return

    bound = _get_bound(restriction.min_inclusive)
    if bound is not None and number < bound:
        raise FacetError(_("value must be >= {}, got {}").format(
            format_number(bound), format_number(number)
        ))

    bound = _get_bound(restriction.max_inclusive)
    if bound is not None and number > bound:
        raise FacetError(_("value must be <= {}, got {}").format(
            format_number(bound), format_number(number)
        ))

    bound = _get_bound(restriction.min_exclusive)
    if bound is not None and number <= bound:
        raise FacetError(_("value must be > {}, got {}").format(
            format_number(bound), format_number(number)
        ))

    bound = _get_bound(restriction.max_exclusive)
    if bound is not None and number >= bound:
        raise FacetError(_("value must be < {}, got {}").format(
            format_number(bound), format_number(number)
        ))


def check_enumeration_facet(value: str, restriction: XsdRestriction) -> None:
    """Checks the value against the enumeration, without any whitespace normalization."""
    if restriction.enumeration and value not in restriction.enumeration:
        raise FacetError(_("value must be one of the enumerated values"))
