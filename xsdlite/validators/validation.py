#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import dataclasses as dc
from collections.abc import Iterable
from typing import Any, Optional

from xsdlite.resources import XmlNode
from xsdlite.utils.logger import logger
from .exceptions import ContentError


class ValidationContext:
    """
    A context class for a single validation call. It collects the content
    errors found during the traversal of the XML tree, in the order they
    are found. A context is never shared between validation calls.
    """
    errors: list[ContentError]
    source: XmlNode
    level: int

    __slots__ = ('errors', 'source', 'level')

    def __init__(self, source: XmlNode) -> None:
        self.source = source
        self.errors = []
        self.level = 0

    def __repr__(self) -> str:
        return '%s(source=%r, errors=%d)' % (
            self.__class__.__name__, self.source, len(self.errors)
        )

    def add_error(self, error: ContentError) -> None:
        logger.debug("Collected error at level %d: %s", self.level, error)
        self.errors.append(error)

    def extend(self, errors: Iterable[ContentError]) -> None:
        for error in errors:
            self.add_error(error)


@dc.dataclass(frozen=True)
class ValidationResult:
    """
    The outcome of the validation of an XML document.

    :param valid: `True` if no content error has been found.
    :param subject: a label for the validated document, the name of the \
    root element if not provided by the caller.
    :param errors: the messages of the content errors, in traversal order.
    :param reasons: the content error instances, in the same order.
    """
    valid: bool
    subject: str
    errors: tuple[str, ...] = ()
    reasons: tuple[ContentError, ...] = dc.field(default=(), compare=False, repr=False)

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def from_errors(cls, subject: str,
                    errors: Iterable[ContentError]) -> 'ValidationResult':
        reasons = tuple(errors)
        return cls(
            valid=not reasons,
            subject=subject,
            errors=tuple(str(e) for e in reasons),
            reasons=reasons,
        )

    def as_dict(self, filename: Optional[str] = None) -> dict[str, Any]:
        """
        Returns a dictionary with the keys 'valid', 'filename' and 'errors',
        the errors are omitted if the document is valid.
        """
        data: dict[str, Any] = {
            'valid': self.valid,
            'filename': self.subject if filename is None else filename,
        }
        if self.errors:
            data['errors'] = list(self.errors)
        return data
