import pytest

from gumble.reject import RejectError, RejectType


def test_message_without_reason():
    assert str(RejectError(RejectType.SERVER_FULL)) == "server full"


def test_message_with_reason():
    error = RejectError(RejectType.USERNAME_IN_USE, "try another")
    assert str(error) == "username in use: try another"


def test_unknown_type():
    assert str(RejectError(42)) == "unknown type 42"


def test_attributes_and_message():
    error = RejectError(RejectType.SERVER_PASSWORD, "nope")
    assert error.type is RejectType.SERVER_PASSWORD
    assert error.reason == "nope"
    assert str(error) == "incorrect server password: nope"


def test_is_raisable():
    error = RejectError(RejectType.SERVER_FULL, "come back later")
    with pytest.raises(RejectError) as excinfo:
        raise error
    assert excinfo.value is error
    assert isinstance(excinfo.value, Exception)
    assert excinfo.value.type is RejectType.SERVER_FULL
    assert excinfo.value.reason == "come back later"
    assert str(excinfo.value) == "server full: come back later"


def test_default_is_none():
    assert str(RejectError()) == "none"