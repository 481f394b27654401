# -*- coding: utf-8 -*-
"""Enumeration: Class constants as enumerations, with reverse lookup and singleton member instances

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
from .base import Enumeration, EnumerationMeta
from .errors import EnumerationError, IllegalConstructionError, UndefinedMemberError
