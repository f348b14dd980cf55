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
This module contains the root of the schema model, that holds the global
declarations of an XSD schema and provides the lookups used by validators.
"""
import dataclasses as dc
from typing import Optional

from xsdlite.names import XSD_NAMESPACE, QUALIFIED
from .complex_types import XsdComplexType
from .elements import XsdElement
from .simple_types import XsdSimpleType


@dc.dataclass(frozen=True)
class Schema:
    """
    An XSD schema model. Global types are indexed by their name, the first
    definition wins. Global elements are kept in document order, and a lookup
    by name returns the first matching declaration.

    :param target_namespace: the target namespace, the empty string means no namespace.
    :param element_form_default: the elementFormDefault of the schema, the namespace \
    of elements is checked only if it's 'qualified'.
    :param elements: the global element declarations.
    :param complex_types: a map from names to global complex types.
    :param simple_types: a map from names to global simple types.
    :param namespaces: the namespace map declared on the schema root.
    """
    target_namespace: str = ''
    element_form_default: str = ''
    elements: tuple[XsdElement, ...] = ()
    complex_types: dict[str, XsdComplexType] = dc.field(default_factory=dict)
    simple_types: dict[str, XsdSimpleType] = dc.field(default_factory=dict)
    namespaces: dict[str, str] = dc.field(default_factory=dict)

    def __repr__(self) -> str:
        return '%s(target_namespace=%r, elements=%r)' % (
            self.__class__.__name__, self.target_namespace, [e.name for e in self.elements]
        )

    @property
    def qualified(self) -> bool:
        return self.element_form_default == QUALIFIED

    def get_element(self, name: str) -> Optional[XsdElement]:
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def find_root_element(self, name: str, namespace: str = '') -> Optional[XsdElement]:
        """
        Finds the global element for the root of an XML document. A declaration
        matches if its effective namespace is the namespace of the root. When the
        schema is not qualified a root in the target namespace matches too.
        """
        for element in self.elements:
            if element.name != name:
                continue
            elif (element.namespace or self.target_namespace) == namespace:
                return element
            elif not self.qualified and namespace == self.target_namespace:
                return element
        return None

    def get_complex_type(self, name: str) -> Optional[XsdComplexType]:
        return self.complex_types.get(name.rpartition(':')[2])

    def get_simple_type(self, name: str) -> Optional[XsdSimpleType]:
        return self.simple_types.get(name.rpartition(':')[2])

    def is_xsd_prefix(self, prefix: Optional[str]) -> bool:
        """
        Returns `True` if the prefix maps to the XSD namespace. A missing
        prefix and a prefix not declared in the schema are both accepted.
        """
        if prefix is None:
            return True
        return self.namespaces.get(prefix, XSD_NAMESPACE) == XSD_NAMESPACE
