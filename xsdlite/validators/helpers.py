#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import math
import re
from typing import Optional

from elementpath import datatypes

from xsdlite.names import UNBOUNDED
from xsdlite.translation import gettext as _
from .exceptions import InvalidValueError

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
TIME_PATTERN = re.compile(r'([0-9]{1,2}):([0-9]{2}):([0-9]{2})(\.[0-9]+)?')
DATETIME_PATTERN = re.compile(
    r'([0-9]{4}-[0-9]{2}-[0-9]{2})T([0-9]{1,2}):([0-9]{2}):([0-9]{2})(\.[0-9]+)?'
)
DURATION_PATTERN = re.compile(
    r'-?P(([0-9]+Y)?([0-9]+M)?([0-9]+D)?)?(T([0-9]+H)?([0-9]+M)?([0-9]+(\.[0-9]+)?S)?)?'
)
GYEAR_PATTERN = re.compile(r'-?[0-9]{4}')
GYEAR_MONTH_PATTERN = re.compile(r'-?[0-9]{4}-[0-9]{2}')
HEX_BINARY_PATTERN = re.compile(r'[0-9a-fA-F]*')
BASE64_BINARY_PATTERN = re.compile(r'[A-Za-z0-9+/]*={0,2}')
ANY_URI_SCHEME_PATTERN = re.compile(r'[a-zA-Z][a-zA-Z0-9+.\-]*:')

FLOAT32_MAX = 3.4028234663852886e+38
INFINITY_LITERALS = frozenset(('inf', 'infinity'))


def get_occurs(value: Optional[str], default: int = 1) -> int:
    """
    Returns the integer value of an occurrence attribute, the default if
    the attribute is missing or if its value is not an integer literal.
    """
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_max_occurs(value: Optional[str], default: int = 1) -> Optional[int]:
    """Like `get_occurs()` but returns `None` for an unbounded maximum."""
    if value is not None and value.strip() == UNBOUNDED:
        return None
    return get_occurs(value, default)


def format_number(value: float) -> str:
    """Formats a number in its shortest form, e.g. 1.0 is rendered as '1'."""
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def parse_integer(value: str, bits: int = 64) -> int:
    """Parses a signed integer of the given width, raises `ValueError` on failure."""
    if INTEGER_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid literal for a signed integer: {value!r}")
    number = int(value)
    if not -2 ** (bits - 1) <= number < 2 ** (bits - 1):
        raise ValueError(f"{value!r} is out of range for a {bits} bits integer")
    return number


def parse_float(value: str, single: bool = False) -> float:
    """Parses a floating point number, raises `ValueError` on failure."""
    if '_' in value or value != value.strip():
        raise ValueError(f"invalid literal for a floating point number: {value!r}")
    number = float(value)
    if math.isinf(number):
        if value.lstrip('+-').lower() not in INFINITY_LITERALS:
            raise ValueError(f"{value!r} is out of range for a floating point number")
    elif single and abs(number) > FLOAT32_MAX:
        raise ValueError(f"{value!r} is out of range for a single precision float")
    return number


#
# XSD built-in types validator functions

def integer_validator(value: str) -> None:
    try:
        parse_integer(value)
    except ValueError:
        raise InvalidValueError(_("invalid integer value: {}").format(value)) from None


def int_validator(value: str) -> None:
    try:
        parse_integer(value, bits=32)
    except ValueError:
        raise InvalidValueError(_("invalid int value: {}").format(value)) from None


def long_validator(value: str) -> None:
    try:
        parse_integer(value)
    except ValueError:
        raise InvalidValueError(_("invalid long value: {}").format(value)) from None


def positive_integer_validator(value: str) -> None:
    try:
        number = parse_integer(value)
    except ValueError:
        raise InvalidValueError(
            _("invalid positive integer value: {}").format(value)
        ) from None

    if number <= 0:
        raise InvalidValueError(_("value must be positive, got {}").format(number))


def decimal_validator(value: str) -> None:
    try:
        parse_float(value)
    except ValueError:
        raise InvalidValueError(_("invalid decimal value: {}").format(value)) from None


def float_validator(value: str) -> None:
    try:
        parse_float(value, single=True)
    except ValueError:
        raise InvalidValueError(_("invalid float value: {}").format(value)) from None


def double_validator(value: str) -> None:
    try:
        parse_float(value)
    except ValueError:
        raise InvalidValueError(_("invalid double value: {}").format(value)) from None


def boolean_validator(value: str) -> None:
    if value not in ('true', 'false', '1', '0'):
        raise InvalidValueError(_("invalid boolean value: {}").format(value))


# Calendar checks use the XSD 1.1 datatypes, where year 0000 is valid
def date_validator(value: str) -> None:
    if DATE_PATTERN.fullmatch(value) is not None:
        try:
            datatypes.Date.fromstring(value)
        except (ValueError, TypeError, OverflowError):
            pass
        else:
            return
    raise InvalidValueError(_("invalid date value: {}").format(value))


def _is_valid_time(hour: str, minute: str, second: str) -> bool:
    return int(hour) < 24 and int(minute) < 60 and int(second) < 60


def time_validator(value: str) -> None:
    match = TIME_PATTERN.fullmatch(value)
    if match is not None and _is_valid_time(*match.groups()[:3]):
        hour, minute, second, fraction = match.groups()
        try:
            datatypes.Time.fromstring(f'{int(hour):02d}:{minute}:{second}{fraction or ""}')
        except (ValueError, TypeError, OverflowError):
            pass
        else:
            return
    raise InvalidValueError(_("invalid time value: {}").format(value))


def datetime_validator(value: str) -> None:
    match = DATETIME_PATTERN.fullmatch(value)
    if match is not None and _is_valid_time(*match.groups()[1:4]):
        date, hour, minute, second, fraction = match.groups()
        try:
            datatypes.DateTime.fromstring(
                f'{date}T{int(hour):02d}:{minute}:{second}{fraction or ""}'
            )
        except (ValueError, TypeError, OverflowError):
            pass
        else:
            return
    raise InvalidValueError(_("invalid dateTime value: {}").format(value))


def duration_validator(value: str) -> None:
    if DURATION_PATTERN.fullmatch(value) is None:
        raise InvalidValueError(_("invalid duration value: {}").format(value))


def gyear_validator(value: str) -> None:
    if GYEAR_PATTERN.fullmatch(value) is None:
        raise InvalidValueError(_("invalid gYear value: {}").format(value))


def gyear_month_validator(value: str) -> None:
    if GYEAR_MONTH_PATTERN.fullmatch(value) is None:
        raise InvalidValueError(_("invalid gYearMonth value: {}").format(value))


def hex_binary_validator(value: str) -> None:
    if HEX_BINARY_PATTERN.fullmatch(value) is None:
        raise InvalidValueError(_("invalid hexBinary value: {}").format(value))


def base64_binary_validator(value: str) -> None:
    if BASE64_BINARY_PATTERN.fullmatch(value) is None:
        raise InvalidValueError(_("invalid base64Binary value: {}").format(value))


def any_uri_validator(value: str) -> None:
    if ANY_URI_SCHEME_PATTERN.match(value) is None:
        raise InvalidValueError(_("invalid anyURI value: {}").format(value))
