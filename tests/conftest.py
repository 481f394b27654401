import pytest

from enumeration import Enumeration


class Sample(Enumeration):
    TestMember = 0
    OtherMember = 1
    FalseMember = False
    TrueMember = True


class Another(Enumeration):
    DifferentMember = 'some value'


@pytest.fixture
def sample():
    return Sample


@pytest.fixture
def another():
    return Another
