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
This module contains the cache of the regular expressions compiled from
XSD pattern facets.
"""
import re
from threading import Lock
from typing import Pattern

from elementpath import translate_pattern, RegexError

from xsdlite.utils.logger import logger
from .exceptions import PatternError

NAME_SHORTCUT = r'\i\c*'
NAME_PATTERN = '[a-zA-Z][a-zA-Z0-9_]*'

# Shortcut escapes that are replaced with ASCII character ranges
SHORTCUT_RANGES = {
    'c': 'a-zA-Z0-9_',
    'd': '0-9',
    'w': 'a-zA-Z0-9_',
}


def translate_shortcuts(pattern: str) -> str:
    """
    Replaces the XSD multi-character escapes \\c, \\d and \\w with ASCII ranges
    and the name production \\i\\c* with an identifier pattern. Inside a
    character class only the range is inserted. Other escapes are left to the
    XSD regex translator.
    """
    result = []
    class_depth = 0
    k = 0
    length = len(pattern)

    while k < length:
        char = pattern[k]
        if char == '\\' and k + 1 < length:
            if not class_depth and pattern.startswith(NAME_SHORTCUT, k):
                result.append(NAME_PATTERN)
                k += len(NAME_SHORTCUT)
                continue

            escape = pattern[k + 1]
            if escape in SHORTCUT_RANGES:
                if class_depth:
                    result.append(SHORTCUT_RANGES[escape])
                else:
                    result.append(f'[{SHORTCUT_RANGES[escape]}]')
            else:
                result.append(pattern[k:k + 2])
            k += 2
            continue

        if char == '[':
            class_depth += 1
        elif char == ']' and class_depth:
            class_depth -= 1
        result.append(char)
        k += 1

    return ''.join(result)


class PatternCache:
    """
    A memoizing compiler for XSD pattern facets. Compiled patterns are keyed by
    the facet string as written in the schema and are never evicted. Lookups
    of cached patterns don't acquire the lock, a missing pattern is compiled
    once under the lock.
    """
    __slots__ = ('_patterns', '_lock')

    def __init__(self) -> None:
        self._patterns: dict[str, Pattern[str]] = {}
        self._lock = Lock()

    def __repr__(self) -> str:
        return '%s(size=%d)' % (self.__class__.__name__, len(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns

    def compile(self, pattern: str) -> Pattern[str]:
        """
        Returns the compiled regex of an XSD pattern facet. The regex is anchored
        at both ends, so it has to match the whole value.

        :param pattern: the value of the XSD pattern facet.
        :raises: `PatternError` if the pattern can't be translated or compiled.
        """
        try:
            return self._patterns[pattern]
        except KeyError:
            with self._lock:
                if pattern not in self._patterns:
                    self._patterns[pattern] = self._compile(pattern)
                return self._patterns[pattern]

    @staticmethod
    def _compile(pattern: str) -> Pattern[str]:
        try:
            python_pattern = translate_pattern(
                pattern=translate_shortcuts(pattern),
                back_references=False,
                lazy_quantifiers=False,
                anchors=False
            )
            regex = re.compile(python_pattern)
        except (RegexError, re.error) as err:
            logger.debug("Pattern %r compilation failed: %s", pattern, err)
            raise PatternError(pattern, str(err)) from None
        else:
            logger.debug("Pattern %r compiled to %r", pattern, python_pattern)
            return regex

    def clear(self) -> None:
        with self._lock:
            self._patterns.clear()
