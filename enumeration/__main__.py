# -*- coding: utf-8 -*-
"""Enumeration: List the members of enumeration classes

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import argparse
import importlib
import logging
import sys

from . import logconfig
from .base import Enumeration
from .utils import pl


logger = logging.getLogger("enumeration.__main__")


def loadEnumeration(target):
    """Import the enumeration class named by `target`, in 'package.module:Class' form.

    The class part may be a dotted path to a nested class.

    """
    moduleName, _, className = target.partition(':')
    if not moduleName or not className:
        raise ValueError("expected MODULE:CLASS, got {!r}".format(target))

    enumeration = importlib.import_module(moduleName)
    for part in className.split('.'):
        enumeration = getattr(enumeration, part)

    if not (isinstance(enumeration, type) and issubclass(enumeration, Enumeration)):
        raise TypeError("{!r} is not an Enumeration subclass".format(enumeration))

    return enumeration


def describe(enumeration):
    lines = ['{} ({})'.format(enumeration.getType(), pl(len(enumeration), "member"))]
    lines.extend('  {} = {!r}'.format(name, value) for name, value in enumeration.toArray().items())
    return '\n'.join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
            prog='python -m enumeration',
            description="List the members of one or more enumerations, in declaration order.")
    parser.add_argument('targets', metavar='MODULE:CLASS', nargs='+',
            help="an Enumeration subclass to describe, e.g. 'mypackage.colors:Color'")
    parser.add_argument('-v', '--verbose', action='store_true',
            help="log debug messages (default level: $ENUMERATION_LOGLEVEL or WARNING)")

    args = parser.parse_args(argv)

    logconfig.configure('DEBUG' if args.verbose else None)

    status = 0
    for target in args.targets:
        try:
            enumeration = loadEnumeration(target)
        except (ImportError, AttributeError, ValueError, TypeError) as ex:
            logger.error("Couldn't load enumeration %s: %s", target, ex)
            status = 1
            continue

        logger.debug("Loaded %r from %s.", enumeration, target)
        print(describe(enumeration))

    return status


if __name__ == "__main__":
    sys.exit(main())
