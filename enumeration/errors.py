# -*- coding: utf-8 -*-
"""Enumeration: exception types

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""


class EnumerationError(Exception):
    pass


class UndefinedMemberError(EnumerationError, LookupError, AttributeError):
    """Raised when a name or value has no corresponding member in an enumeration's member table.

    This is also an `AttributeError`, so `hasattr()` and three-argument `getattr()` work on enumeration classes.

    """
    def __init__(self, enumeration, member, filename=None, lineno=None):
        self.enumeration = enumeration
        self.member = member
        self.filename = filename
        self.lineno = lineno

        message = "Undefined enumeration member {!r} of {}".format(member, enumeration.__name__)
        if filename is not None:
            message += " in {} on line {}".format(filename, lineno)

        super(UndefinedMemberError, self).__init__(message)


class IllegalConstructionError(EnumerationError, TypeError):
    pass
