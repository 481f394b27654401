# -*- coding: utf-8 -*-
"""Enumeration: Utility functions

Copyright (c) 2012-2013 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import inspect
import logging
from os.path import abspath, dirname


packageDir = dirname(abspath(__file__))


def loggerFor(cls):
    if not isinstance(cls, type):
        cls = type(cls)

    return logging.getLogger('{}.{}'.format(cls.__module__, cls.__name__))


def callerLocation():
    """Find the file name and line number of the innermost stack frame outside of this package.

    Returns `(None, None)` if the interpreter doesn't expose stack frames.

    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if dirname(abspath(filename)) != packageDir:
                return filename, frame.f_lineno
            frame = frame.f_back

        return None, None

    finally:
        # Break the reference cycle through this frame.
        del frame


def pl(number, singularUnit, pluralUnit=None, noSpace=False):
    """Attach the appropriate singular or plural units to the given number.

    If `pluralUnit` is omitted, it defaults to `singularUnit + "s"`.
    If `noSpace` is True, no space is placed between the number and the unit.

    """
    if pluralUnit is None:
        pluralUnit = singularUnit + "s"

    return '{}{}{}'.format(
            number,
            '' if noSpace else ' ',
            singularUnit if number == 1 else pluralUnit
            )
