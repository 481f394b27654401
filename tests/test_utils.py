import os

from enumeration.utils import callerLocation, loggerFor, pl


class Thing(object):
    pass


def test_pl():
    assert pl(1, "member") == "1 member"
    assert pl(0, "member") == "0 members"
    assert pl(2, "entry", "entries") == "2 entries"
    assert pl(3, "x", noSpace=True) == "3xs"


def test_logger_for():
    assert loggerFor(Thing).name == '{}.Thing'.format(__name__)
    assert loggerFor(Thing()) is loggerFor(Thing)


def test_caller_location_is_outside_the_package():
    filename, lineno = callerLocation()

    assert os.path.basename(filename) == os.path.basename(__file__)
    assert lineno > 0
