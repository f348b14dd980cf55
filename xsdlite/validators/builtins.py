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
This module contains the table of the XSD builtin datatypes checked by
the validator. Each entry maps the local name of an XSD builtin type to
the function that validates a lexical value.
"""
from collections.abc import Callable
from typing import Any, Optional

from .helpers import integer_validator, int_validator, long_validator, \
    positive_integer_validator, decimal_validator, float_validator, \
    double_validator, boolean_validator, date_validator, time_validator, \
    datetime_validator, duration_validator, gyear_validator, \
    gyear_month_validator, hex_binary_validator, base64_binary_validator, \
    any_uri_validator

# Builtin types for which the numeric bound facets are checked
NUMERIC_BOUND_TYPES = frozenset(('decimal', 'integer', 'float', 'double'))


XSD_BUILTIN_TYPES: tuple[dict[str, Any], ...] = (
    # --- String Types ---
    {
        'name': 'string',
        'validator': None,
    },  # character string, always valid

    # --- Numerical Types ---
    {
        'name': 'integer',
        'validator': integer_validator,
    },
    {
        'name': 'int',
        'validator': int_validator,
    },  # 32 bits
    {
        'name': 'long',
        'validator': long_validator,
    },  # 64 bits
    {
        'name': 'positiveInteger',
        'validator': positive_integer_validator,
    },
    {
        'name': 'decimal',
        'validator': decimal_validator,
    },
    {
        'name': 'float',
        'validator': float_validator,
    },  # single precision
    {
        'name': 'double',
        'validator': double_validator,
    },
    {
        'name': 'boolean',
        'validator': boolean_validator,
    },  # true/false or 1/0

    # --- Dates and Times ---
    {
        'name': 'date',
        'validator': date_validator,
    },  # CCYY-MM-DD
    {
        'name': 'time',
        'validator': time_validator,
    },  # hh:mm:ss
    {
        'name': 'dateTime',
        'validator': datetime_validator,
    },  # CCYY-MM-DDThh:mm:ss
    {
        'name': 'duration',
        'validator': duration_validator,
    },  # PnYnMnDTnHnMnS
    {
        'name': 'gYear',
        'validator': gyear_validator,
    },  # CCYY
    {
        'name': 'gYearMonth',
        'validator': gyear_month_validator,
    },  # CCYY-MM

    # --- Binary and URI types ---
    {
        'name': 'hexBinary',
        'validator': hex_binary_validator,
    },
    {
        'name': 'base64Binary',
        'validator': base64_binary_validator,
    },
    {
        'name': 'anyURI',
        'validator': any_uri_validator,
    },
)

BUILTIN_TYPES_MAP: dict[str, dict[str, Any]] = {
    item['name']: item for item in XSD_BUILTIN_TYPES
}


def get_builtin_validator(name: str) -> Optional[Callable[[str], None]]:
    """
    Returns the validator function of a builtin type, `None` for builtin
    types that accept any value.

    :param name: the local name of the XSD builtin type.
    :raises: `KeyError` if the name is not a builtin type.
    """
    return BUILTIN_TYPES_MAP[name]['validator']  # type: ignore[no-any-return]
