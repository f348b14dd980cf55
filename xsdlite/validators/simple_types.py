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
This module contains the classes of the XSD simple type model.
"""
import dataclasses as dc
from typing import Optional

from .facets import XsdRestriction


@dc.dataclass(frozen=True)
class XsdUnion:
    """An XSD union of simple types. It's modeled but not checked."""
    member_types: tuple[str, ...] = ()
    simple_types: tuple['XsdSimpleType', ...] = ()


@dc.dataclass(frozen=True)
class XsdList:
    """An XSD list of simple types. It's modeled but not checked."""
    item_type: Optional[str] = None


@dc.dataclass(frozen=True)
class XsdSimpleType:
    """
    An XSD simple type, global if it has a name. Only the restriction
    is used for checking values.
    """
    name: Optional[str] = None
    restriction: Optional[XsdRestriction] = None
    union: Optional[XsdUnion] = None
    list: Optional[XsdList] = None

    def __repr__(self) -> str:
        if self.name is None:
            return '%s(restriction=%r)' % (self.__class__.__name__, self.restriction)
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    @property
    def base_type(self) -> Optional[str]:
        return None if self.restriction is None else self.restriction.base
