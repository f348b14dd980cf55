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
Protected package limits, values are managed by xsdlite.limits.LimitsModule.
Validators read these values at call time, so a change made through the managed
module is effective for the following validations.
"""
MAX_MODEL_DEPTH = 15
MAX_XML_DEPTH = 250
