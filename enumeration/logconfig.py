# -*- coding: utf-8 -*-
"""Enumeration: Logging configuration

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging.config
import os


defaultLevel = 'WARNING'

coloredFormat = "%(bold)s%(blackFG)s[%(resetTerm)s%(levelColor)s%(levelname)-8s%(resetTerm)s%(bold)s%(blackFG)s]" \
        "%(resetTerm)s %(cyanFG)s%(name)s%(bold)s%(blackFG)s:%(resetTerm)s  %(faint)s%(italic)s%(message)s%(resetTerm)s"


def configure(level=None):
    """Send log messages to stderr through `ColoredConsoleHandler`.

    If `level` is None, the level named by the ENUMERATION_LOGLEVEL environment variable is used, falling back to
    WARNING.

    """
    if level is None:
        level = os.environ.get('ENUMERATION_LOGLEVEL', defaultLevel).upper()

    logging.config.dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'colored': {
                    'format': coloredFormat,
                    },
                },
            'handlers': {
                'console': {
                    'class': 'enumeration.colorlog.ColoredConsoleHandler',
                    'formatter': 'colored',
                    'level': 'NOTSET',
                    'stream': 'ext://sys.stderr',
                    },
                },
            'root': {
                'handlers': [
                    'console',
                    ],
                'level': level,
                },
            })
