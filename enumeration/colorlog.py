# -*- coding: utf-8 -*-
"""Colored logger class

Copyright (c) 2011 David H. Bronke and Christopher S. Case
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging
import platform

# On Windows, try loading colorama.
useColor = True
if platform.system() == 'Windows':
    try:
        import colorama

        colorama.init()
    except ImportError:
        logging.error("Couldn't import colorama! Disabling color output.")
        useColor = False


# (minimum level, escape sequence), highest level first.
levelColors = [
        (logging.CRITICAL, '\x1b[1;4;35m'),  # bold underlined magenta
        (logging.ERROR, '\x1b[1;31m'),  # red
        (logging.WARNING, '\x1b[1;33m'),  # yellow
        (logging.INFO, '\x1b[1;32m'),  # green
        (logging.DEBUG, '\x1b[37m'),  # white
        ]

termAttributes = dict(
        bold='\x1b[1m',
        faint='\x1b[2m',
        italic='\x1b[3m',
        blackFG='\x1b[30m',
        cyanFG='\x1b[36m',
        resetTerm='\x1b[0m',
        )


def colorForLevel(levelno):
    for minimum, color in levelColors:
        if levelno >= minimum:
            return color

    return '\x1b[0m'  # NOTSET and anything else


class ColoredConsoleHandler(logging.StreamHandler):
    """A StreamHandler which adds terminal escape sequences to each record, for use in format strings.

    Colors are only emitted if `useColor` is set and the stream is a terminal; otherwise the same attributes are set
    to empty strings, so the same format string works either way.

    """
    def colorEnabled(self):
        isatty = getattr(self.stream, 'isatty', None)
        return useColor and isatty is not None and isatty()

    def emit(self, record):
        if self.colorEnabled():
            record.levelColor = colorForLevel(record.levelno)
            record.__dict__.update(termAttributes)

        else:
            record.levelColor = ''
            record.__dict__.update(dict.fromkeys(termAttributes, ''))

        return logging.StreamHandler.emit(self, record)
