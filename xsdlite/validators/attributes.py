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
This module contains the classes of the XSD attribute declarations and the
references to named types, shared with element declarations.
"""
import dataclasses as dc
from typing import Optional, Union

from .simple_types import XsdSimpleType


@dc.dataclass(frozen=True)
class XsdTypeRef:
    """A reference to a named type, as found in a 'type' attribute."""
    name: str

    @property
    def prefix(self) -> Optional[str]:
        prefix, sep, _ = self.name.rpartition(':')
        return prefix if sep else None

    @property
    def local_name(self) -> str:
        return self.name.rpartition(':')[2]


AttributeType = Union[XsdTypeRef, XsdSimpleType, None]


@dc.dataclass(frozen=True)
class XsdAttribute:
    """
    An XSD attribute declaration. Default and fixed values are modeled
    but not applied to validated data.
    """
    name: str
    type: AttributeType = None
    use: str = 'optional'
    default: Optional[str] = None
    fixed: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.use == 'required'
