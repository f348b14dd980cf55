#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package protection limits. Values can be changed after import to set different limits."""
import sys
from types import ModuleType
from typing import Any

from xsdlite import _limits
from xsdlite.translation import gettext as _
from xsdlite.exceptions import XsdLiteTypeError, XsdLiteValueError


class LimitsModule(ModuleType):
    def __setattr__(self, attr: str, value: Any) -> None:
        if attr not in ('MAX_MODEL_DEPTH', 'MAX_XML_DEPTH'):
            pass
        elif not isinstance(value, int) or isinstance(value, bool):
            raise XsdLiteTypeError(_('Value {!r} is not an int').format(value))
        elif attr == 'MAX_MODEL_DEPTH':
            if value < 5:
                raise XsdLiteValueError(_('{} limit must be at least 5').format(attr))
            setattr(_limits, attr, value)
        else:
            if value < 1:
                raise XsdLiteValueError(_('{} limit must be at least 1').format(attr))
            setattr(_limits, attr, value)

        super().__setattr__(attr, value)


sys.modules[__name__].__class__ = LimitsModule


MAX_MODEL_DEPTH = 15
"""
Maximum depth of simple type restriction chains and of element reference chains.
A `ModelDepthError` content error is reported if this limit is exceeded.
"""

MAX_XML_DEPTH = 250
"""
Maximum depth of XML data. An `XMLResourceExceeded` is raised if this limit is exceeded.
"""
