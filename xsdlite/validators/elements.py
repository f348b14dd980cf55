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
This module contains the classes of the XSD element declarations.
"""
import dataclasses as dc
from typing import Optional, Union

from .attributes import XsdTypeRef
from .helpers import get_occurs, get_max_occurs
from .simple_types import XsdSimpleType
from .complex_types import XsdComplexType


@dc.dataclass(frozen=True)
class XsdElementRef:
    """A reference to a global element, as found in a 'ref' attribute."""
    ref: str

    @property
    def local_name(self) -> str:
        # The namespace prefix is not resolved, only the local name is matched
        return self.ref.rpartition(':')[2]


# The kind of content of an element declaration. A reference takes
# precedence, then inline complex types, inline simple types and
# references to named types.
ElementContentType = Union[XsdElementRef, XsdComplexType, XsdSimpleType, XsdTypeRef, None]


@dc.dataclass(frozen=True)
class XsdElement:
    """
    An XSD element declaration. Occurrence attributes are kept as they are
    written in the schema and belong to the declaration context, so for a
    reference they are the bounds of the referencing particle.
    """
    name: str = ''
    content: ElementContentType = None
    namespace: Optional[str] = None
    min_occurs: Optional[str] = None
    max_occurs: Optional[str] = None

    def __repr__(self) -> str:
        if isinstance(self.content, XsdElementRef):
            return '%s(ref=%r)' % (self.__class__.__name__, self.content.ref)
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    @property
    def ref(self) -> Optional[XsdElementRef]:
        return self.content if isinstance(self.content, XsdElementRef) else None

    @property
    def effective_name(self) -> str:
        """The name matched by XML data, the local name of the target for a reference."""
        if isinstance(self.content, XsdElementRef):
            return self.content.local_name
        return self.name

    @property
    def type_name(self) -> Optional[str]:
        return self.content.name if isinstance(self.content, XsdTypeRef) else None

    @property
    def occurs(self) -> tuple[int, Optional[int]]:
        """Occurrence bounds of the element, `None` means unbounded."""
        return get_occurs(self.min_occurs), get_max_occurs(self.max_occurs)
