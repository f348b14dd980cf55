#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import json
import logging

from xsdlite import SchemaValidator
from xsdlite.exceptions import XsdLiteException


PROGRAM_NAME = os.path.basename(sys.argv[0])

OUTPUT_FORMATS = ('text', 'json')


def output_format(value):
    if value not in OUTPUT_FORMATS:
        raise argparse.ArgumentTypeError("%r is not a valid output format" % value)
    return value


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def format_result(result, fmt='text'):
    if fmt == 'json':
        return json.dumps(result.as_dict(), indent=2, ensure_ascii=False)
    elif result.valid:
        return f"✓ XML file '{result.subject}' is valid"

    lines = [f"✗ XML file '{result.subject}' is invalid:"]
    lines.extend(f"  - {error}" for error in result.errors)
    return '\n'.join(lines)


def validate():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="validate a set of XML files.")
    parser.usage = "%(prog)s --schema PATH [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--schema', type=str, metavar='PATH', required=True,
                        help="path to an XSD schema.")
    parser.add_argument('--format', type=output_format, default='text',
                        metavar='(text, json)', dest='fmt',
                        help="output format of validation results (default is text).")
    parser.add_argument('files', metavar='[XML_FILE ...]', nargs='+',
                        help="XML files to be validated.")

    args = parser.parse_args()

    loglevel = get_loglevel(args.verbosity)
    try:
        with open(args.schema, 'rb') as fp:
            validator = SchemaValidator(fp, loglevel=loglevel)
    except (XsdLiteException, OSError) as err:
        sys.stderr.write(f"{err}\n")
        sys.exit(1)

    tot_errors = 0
    for filepath in args.files:
        try:
            with open(filepath, 'rb') as fp:
                result = validator.validate(fp, subject=filepath, loglevel=loglevel)
        except (XsdLiteException, OSError) as err:
            tot_errors += 1
            sys.stderr.write(f"{err}\n")
            continue
        else:
            tot_errors += len(result.errors)
            sys.stdout.write(format_result(result, args.fmt) + '\n')

    sys.exit(tot_errors)
