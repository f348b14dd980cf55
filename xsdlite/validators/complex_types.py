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
This module contains the class of the XSD complex type model.
"""
import dataclasses as dc
from typing import Optional, Union

from .attributes import XsdAttribute
from .groups import XsdSequence, XsdChoice

ContentModelType = Union[XsdSequence, XsdChoice, None]


@dc.dataclass(frozen=True)
class XsdComplexType:
    """
    An XSD complex type, global if it has a name. The content model is
    a sequence, a choice or nothing.
    """
    name: Optional[str] = None
    attributes: tuple[XsdAttribute, ...] = ()
    model: ContentModelType = None

    def __repr__(self) -> str:
        if self.name is None:
            return '%s(model=%r)' % (self.__class__.__name__, self.model)
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    def get_attribute(self, name: str) -> Optional[XsdAttribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    @property
    def required_attributes(self) -> list[XsdAttribute]:
        names = set()
        attributes = []
        for attribute in self.attributes:
            if attribute.required and attribute.name not in names:
                names.add(attribute.name)
                attributes.append(attribute)
        return attributes
