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
This module contains the validator of XML documents against a schema model.
"""
from collections import Counter
from collections.abc import Iterator, Sequence
from typing import Optional, Union

from xsdlite import _limits
from xsdlite.exceptions import XMLResourceError
from xsdlite.names import XSI_NAMESPACE
from xsdlite.resources import XMLSourceType, XmlNode, parse_xml
from xsdlite.utils.logger import logger, logged
from xsdlite.utils.qnames import get_namespace
from .exceptions import XMLParseError, RootElementError, ContentError, \
    UnresolvedRefError, NameMismatchError, UnexpectedAttributeError, \
    MissingRequiredAttributeError, UnexpectedElementError, InvalidChoiceMemberError, \
    TooFewOccurrencesError, TooManyOccurrencesError, ValueCheckError, ModelDepthError, \
    InvalidContentError, InvalidAttributeError
from .attributes import XsdTypeRef, XsdAttribute
from .builders import build_schema
from .complex_types import XsdComplexType
from .elements import XsdElementRef, XsdElement
from .facets import XsdRestriction
from .groups import XsdSequence, XsdChoice
from .patterns import PatternCache
from .simple_types import XsdSimpleType
from .validation import ValidationContext, ValidationResult
from .values import ValueChecker
from .xsd_globals import Schema


class SchemaValidator:
    """
    Validator of XML documents against an XSD schema. The schema model is built
    once at initialization and it's never changed after, so an instance can be
    used for validating many documents, also from concurrent threads.

    :param source: the XSD source, a string, a bytes object or a file-like \
    object. Can also be an already built schema model.
    :param loglevel: for setting a different logging level for schema initialization.
    :raises: `SchemaParseError` if the source is not a well-formed XSD schema.

    :ivar schema: the schema model.
    :ivar patterns: the cache of compiled pattern facets, shared by validations.
    :ivar checker: the checker of simple values.
    """
    schema: Schema
    patterns: PatternCache
    checker: ValueChecker

    @logged
    def __init__(self, source: Union[XMLSourceType, Schema],
                 loglevel: Optional[Union[str, int]] = None) -> None:
        if isinstance(source, Schema):
            self.schema = source
        else:
            self.schema = build_schema(source)

        self.patterns = PatternCache()
        self.checker = ValueChecker(self.schema, self.patterns)

    def __repr__(self) -> str:
        return '%s(schema=%r)' % (self.__class__.__name__, self.schema)

    @property
    def target_namespace(self) -> str:
        return self.schema.target_namespace

    @logged
    def validate(self, source: XMLSourceType,
                 subject: Optional[str] = None,
                 loglevel: Optional[Union[str, int]] = None) -> ValidationResult:
        """
        Validates an XML document. Content errors are collected and returned
        with the result, errors that prevent the validation are raised.

        :param source: the XML document, a string, a bytes object or a file-like object.
        :param subject: an optional label for the result, for default \
        it's the name of the root element.
        :param loglevel: for setting a different logging level for the validation.
        :raises: `XMLParseError` if the document is not well-formed, \
        `RootElementError` if the root is not declared by the schema.
        """
        try:
            node = parse_xml(source)
        except XMLResourceError as err:
            raise XMLParseError(str(err)) from None
        return self.validate_tree(node, subject)

    def validate_tree(self, node: XmlNode, subject: Optional[str] = None) -> ValidationResult:
        """Validates an already parsed XML tree."""
        element = self.schema.find_root_element(node.name, node.namespace)
        if element is None:
            raise RootElementError(node.name, node.namespace)

        context = ValidationContext(node)
        self.validate_element(node, element, context)

        result = ValidationResult.from_errors(
            subject=node.name if subject is None else subject,
            errors=context.errors,
        )
        logger.debug("Validated %r: valid=%r, %d errors",
                     result.subject, result.valid, len(result.errors))
        return result

    def is_valid(self, source: XMLSourceType,
                 loglevel: Optional[Union[str, int]] = None) -> bool:
        return self.validate(source, loglevel=loglevel).valid

    def iter_errors(self, source: XMLSourceType) -> Iterator[ContentError]:
        """Creates an iterator for the content errors of an XML document."""
        yield from self.validate(source).reasons

    def check_value(self, value: str, type_name: str,
                    restriction: Optional[XsdRestriction] = None) -> str:
        """
        Checks a simple value against a type of the schema. Returns the name
        of the resolved builtin type or raises a `ValueCheckError`.
        """
        return self.checker.check_value(value, type_name, restriction)

    ###
    # Structural validation
    def get_namespace(self, element: XsdElement) -> str:
        """Returns the namespace expected for the instances of an element declaration."""
        return element.namespace or self.schema.target_namespace or ''

    def resolve_element(self, element: XsdElement) -> XsdElement:
        """
        Returns the global element referenced by an element declaration,
        following chains of references. Returns the argument if it's not
        a reference.

        :raises: `UnresolvedRefError` if a reference doesn't match any global \
        element, `ModelDepthError` if the chain is too long.
        """
        depth = 0
        while isinstance(element.content, XsdElementRef):
            ref = element.content
            if depth >= _limits.MAX_MODEL_DEPTH:
                raise ModelDepthError(ref.ref, _limits.MAX_MODEL_DEPTH)

            target = self.schema.get_element(ref.local_name)
            if target is None:
                raise UnresolvedRefError(ref.ref)
            element = target
            depth += 1
        return element

    def match_element(self, node: XmlNode, element: XsdElement) -> bool:
        if node.name != element.name:
            return False
        elif not self.schema.qualified:
            return True
        return node.namespace == self.get_namespace(element)

    def get_complex_type(self, element: XsdElement) -> Optional[XsdComplexType]:
        if isinstance(element.content, XsdComplexType):
            return element.content
        elif isinstance(element.content, XsdTypeRef):
            return self.schema.get_complex_type(element.content.name)
        return None

    def validate_element(self, node: XmlNode, element: XsdElement,
                         context: ValidationContext) -> None:
        try:
            element = self.resolve_element(element)
        except ContentError as err:
            context.add_error(err)
            return

        if not self.match_element(node, element):
            context.add_error(NameMismatchError(
                element.name, self.get_namespace(element), node.name, node.namespace
            ))
            return

        complex_type = self.get_complex_type(element)
        if complex_type is not None:
            self.validate_attributes(node, complex_type.attributes, context)

        if node.content:
            try:
                self.check_content(node.content, element)
            except ValueCheckError as err:
                context.add_error(InvalidContentError(node.name, err))

        if complex_type is None or complex_type.model is None:
            return

        context.level += 1
        if isinstance(complex_type.model, XsdSequence):
            self.validate_sequence(node.children, complex_type.model, context)
        else:
            self.validate_choice(node.children, complex_type.model, context)
        context.level -= 1

    def check_content(self, value: str, element: XsdElement) -> None:
        """Checks the text content of an element against its simple type, if any."""
        content = element.content
        if isinstance(content, XsdSimpleType):
            if content.restriction is not None:
                self.checker.check_value(value, content.restriction.base, content.restriction)
        elif isinstance(content, XsdTypeRef):
            self.checker.check_value(value, content.name)

    def check_attribute(self, value: str, attribute: XsdAttribute) -> None:
        if isinstance(attribute.type, XsdTypeRef):
            self.checker.check_value(value, attribute.type.name)
        elif isinstance(attribute.type, XsdSimpleType) and \
                attribute.type.restriction is not None:
            restriction = attribute.type.restriction
            self.checker.check_value(value, restriction.base, restriction)

    def validate_attributes(self, node: XmlNode,
                            attributes: Sequence[XsdAttribute],
                            context: ValidationContext) -> None:
        found = set()
        for name, value in node.attributes.items():
            if get_namespace(name) == XSI_NAMESPACE:
                continue

            for attribute in attributes:
                if attribute.name == name:
                    break
            else:
                context.add_error(UnexpectedAttributeError(name))
                continue

            found.add(name)
            try:
                self.check_attribute(value, attribute)
            except ValueCheckError as err:
                context.add_error(InvalidAttributeError(name, err))

        missing = []
        for attribute in attributes:
            if attribute.required and attribute.name not in found \
                    and attribute.name not in missing:
                missing.append(attribute.name)
        context.extend(MissingRequiredAttributeError(name) for name in missing)

    @staticmethod
    def check_occurs(name: Optional[str], occurs: int, min_occurs: int,
                     max_occurs: Optional[int], context: ValidationContext) -> None:
        if occurs < min_occurs:
            context.add_error(TooFewOccurrencesError(name, occurs, min_occurs))
        if max_occurs is not None and occurs > max_occurs:
            context.add_error(TooManyOccurrencesError(name, occurs, max_occurs))

    def validate_sequence(self, children: Sequence[XmlNode], sequence: XsdSequence,
                          context: ValidationContext) -> None:
        # The order of children is not checked, only the occurrences.
        expected = {e.effective_name: e for e in sequence}
        counter: Counter[str] = Counter()

        for child in children:
            element = expected.get(child.name)
            if element is None:
                context.add_error(UnexpectedElementError(child.name))
            else:
                counter[child.name] += 1
                self.validate_element(child, element, context)

        for element in sequence:
            name = element.effective_name
            self.check_occurs(name, counter[name], *element.occurs, context)

    def validate_choice(self, children: Sequence[XmlNode], choice: XsdChoice,
                        context: ValidationContext) -> None:
        min_occurs, max_occurs = choice.occurs
        if choice.choice is not None:
            self.validate_choice(children, choice.choice, context)

        occurs = 0
        if choice.elements:
            for child in children:
                for alternative in choice:
                    try:
                        element = self.resolve_element(alternative)
                    except ContentError as err:
                        context.add_error(err)
                        continue

                    if self.match_element(child, element):
                        occurs += 1
                        self.validate_element(child, element, context)
                        break
                else:
                    context.add_error(InvalidChoiceMemberError(child.name))

        self.check_occurs(None, occurs, min_occurs, max_occurs, context)
