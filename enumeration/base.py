# -*- coding: utf-8 -*-
"""Enumeration: Enumeration base class

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
from collections import OrderedDict
from functools import partial
import logging
import threading

from .errors import EnumerationError, IllegalConstructionError, UndefinedMemberError
from .utils import callerLocation, loggerFor, pl


logger = logging.getLogger("enumeration.base")

# Types of class attributes which are treated as enumeration members.
memberTypes = (bool, int, float, str, bytes, type(None))

# Cache of member instances, keyed by enumeration class and then by member name.
_instances = dict()
_instancesLock = threading.RLock()


def isMemberValue(attr, value):
    return not attr.startswith('_') and isinstance(value, memberTypes)


def identical(first, second):
    """Compare two member values strictly; values of different types are never identical, so `0` doesn't match `False`
    and `"1"` doesn't match `1`. NaN is identical to NaN.

    """
    if type(first) is not type(second):
        return False

    # NaN is the only value not equal to itself.
    return first == second or (first != first and second != second)


def related(first, second):
    return issubclass(first, second) or issubclass(second, first)


def _memberInstance(enumeration, member):
    name = enumeration._coerceName(member)

    with _instancesLock:
        cache = _instances.setdefault(enumeration, dict())

        if name not in cache:
            # Raises UndefinedMemberError if this enumeration has no such member.
            value = enumeration.getValue(member)

            instance = object.__new__(enumeration)
            object.__setattr__(instance, '_name', name)
            object.__setattr__(instance, '_value', value)
            cache[name] = instance

            loggerFor(enumeration).debug("Created member instance %r.", instance)

        return cache[name]


class EnumerationMeta(type):
    """Metaclass for `Enumeration`.

    Collects the constants declared in the class body into the class's member table, and traps call-style member
    access (`Animal.Dog()`) and direct instantiation.

    """
    def __new__(mcs, name, bases, dict_):
        enumerationBases = [base for base in bases if isinstance(base, EnumerationMeta)]

        if enumerationBases:
            for attr in ('__new__', '__init__'):
                if attr in dict_:
                    raise IllegalConstructionError("Enumeration {} may not override {}!".format(name, attr))

        reserved = set()
        for klass in mcs.__mro__:
            reserved.update(vars(klass))
        for base in bases:
            for klass in base.__mro__:
                reserved.update(vars(klass))

        # Move each declared constant out of the class namespace and into the member table, keeping declaration order.
        members = OrderedDict()
        for attr, value in list(dict_.items()):
            if isMemberValue(attr, value):
                if attr in reserved:
                    raise EnumerationError("Member {!r} of enumeration {} clashes with an inherited attribute!".format(
                            attr, name))

                members[attr] = dict_.pop(attr)

        # Inherited members follow the ones declared here, unless they've been redeclared.
        for base in enumerationBases:
            for attr, value in base._memberTable.items():
                members.setdefault(attr, value)

        dict_['_memberTable'] = members

        logger.debug("Building enumeration %s with %s: %s", name, pl(len(members), "member"), ', '.join(members))

        return super(EnumerationMeta, mcs).__new__(mcs, name, bases, dict_)

    def __call__(cls, *args, **kwargs):
        raise IllegalConstructionError("{} is an enumeration and cannot be instantiated; use {}.member() instead."
                .format(cls.__name__, cls.__name__))

    def __getattr__(cls, attr):
        # Only called when normal lookup fails; private and special names never name members.
        if attr.startswith('_'):
            raise AttributeError("type object {!r} has no attribute {!r}".format(cls.__name__, attr))

        if attr not in cls._memberTable:
            raise UndefinedMemberError(cls, attr, *callerLocation())

        return partial(cls.member, attr)

    def __setattr__(cls, attr, value):
        if attr in cls._memberTable or isMemberValue(attr, value):
            raise AttributeError("Cannot add or replace member {!r} of enumeration {}.".format(attr, cls.__name__))

        super(EnumerationMeta, cls).__setattr__(attr, value)

    def __len__(cls):
        return len(cls._memberTable)

    def __bool__(cls):
        return True

    def __contains__(cls, member):
        return cls.isDefined(member)

    def __iter__(cls):
        return (cls.member(name) for name in cls._memberTable)


class Enumeration(metaclass=EnumerationMeta):
    """Base class for enumerations.

    Members are declared as class attributes with scalar values (`int`, `bool`, `float`, `str`, `bytes` or `None`);
    their order of declaration is kept.

    Example:

        >>> class Animal(Enumeration):
        ...     Horse = 0
        ...     Dog = 1
        ...
        >>> Animal.getName(0)
        'Horse'
        >>> Animal.getValue('Dog')
        1
        >>> Animal.allMembers()
        ['Horse', 'Dog']
        >>> Animal.Dog() is Animal.Dog()
        True
        >>> str(Animal.Dog())
        'Dog'

    """
    __slots__ = ('_name', '_value')

    def __new__(cls, *args, **kwargs):
        raise IllegalConstructionError("{} is an enumeration and cannot be instantiated.".format(cls.__name__))

    @classmethod
    def _coerceName(cls, member):
        """Convert a member name or member instance to a name in this enumeration's namespace.

        Returns None for member instances of unrelated enumerations.

        """
        if isinstance(member, Enumeration):
            if not related(cls, type(member)):
                return None
            return member.name

        return str(member)

    @classmethod
    def toArray(cls):
        """Get an ordered mapping of this enumeration's member names to their values.

        The mapping is a copy; changing it doesn't change the enumeration.

        """
        return OrderedDict(cls._memberTable)

    @classmethod
    def getName(cls, value):
        """Get the name of the member that holds the given value.

        This method is type-sensitive: `value` must be of the same type as the member's declared value. If a member
        instance is given, its value is used; instances of unrelated enumerations are rejected.

        """
        if isinstance(value, Enumeration):
            if not related(cls, type(value)):
                raise UndefinedMemberError(cls, value, *callerLocation())
            value = value.value

        for name, memberValue in cls._memberTable.items():
            if identical(memberValue, value):
                return name

        raise UndefinedMemberError(cls, value, *callerLocation())

    @classmethod
    def getValue(cls, member):
        """Get the value of the member with the given name (or the given member instance).

        """
        if not cls.isDefined(member):
            raise UndefinedMemberError(cls, member, *callerLocation())

        return cls._memberTable[cls._coerceName(member)]

    @classmethod
    def isDefined(cls, member):
        name = cls._coerceName(member)
        return name is not None and name in cls._memberTable

    @classmethod
    def allMembers(cls):
        """Get the names of all members of this enumeration, in the order they were declared.

        """
        return list(cls._memberTable)

    @classmethod
    def getType(cls):
        """Get the name of this enumeration class, without its module or enclosing classes.

        """
        return cls.__qualname__.rpartition('.')[2]

    @classmethod
    def member(cls, name):
        """Get the singleton instance representing the named member.

        `Animal.member('Dog')` is equivalent to `Animal.Dog()`.

        """
        return _memberInstance(cls, name)

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    def __setattr__(self, attr, value):
        raise AttributeError("Members of enumeration {} are read-only.".format(type(self).__name__))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self):
        return self._name

    def __repr__(self):
        return '<{}.{}: {!r}>'.format(type(self).getType(), self._name, self._value)
