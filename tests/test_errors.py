import pytest

from elvis.errors import DeserializeHtmlError, ElvisError, FunctionError, RouterError


@pytest.mark.parametrize("error_type", [FunctionError, DeserializeHtmlError, RouterError])
def test_specific_errors_are_caught_as_elvis_error(error_type):
    error = error_type("something broke")
    assert isinstance(error, ElvisError)
    assert str(error) == "something broke"
    assert error.message == "something broke"


def test_custom_error_keeps_message():
    error = ElvisError("custom failure")
    assert str(error) == "custom failure"
    assert error.args == ("custom failure",)


def test_function_error_is_not_a_router_error():
    error = FunctionError("callback")
    assert isinstance(error, ElvisError)
    assert not isinstance(error, RouterError)
    assert error.message == "callback"


def test_default_message_is_empty():
    assert str(DeserializeHtmlError()) == ""