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
This module contains the classes of XSD model groups.
"""
import dataclasses as dc
from typing import TYPE_CHECKING, Optional

from .helpers import get_occurs, get_max_occurs

if TYPE_CHECKING:
    from .elements import XsdElement  # noqa: F401


@dc.dataclass(frozen=True)
class XsdSequence:
    """
    An XSD sequence. It has no occurrence bounds of its own,
    each member element is counted independently.
    """
    elements: tuple['XsdElement', ...] = ()

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.elements)


@dc.dataclass(frozen=True)
class XsdChoice:
    """An XSD choice, with its own occurrence bounds and an optional nested choice."""
    elements: tuple['XsdElement', ...] = ()
    choice: Optional['XsdChoice'] = None
    min_occurs: Optional[str] = None
    max_occurs: Optional[str] = None

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.elements)

    @property
    def occurs(self) -> tuple[int, Optional[int]]:
        """Occurrence bounds of the choice group, `None` means unbounded."""
        return get_occurs(self.min_occurs), get_max_occurs(self.max_occurs)
