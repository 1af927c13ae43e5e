import pytest

from cubkit.errors import CubError, ErrorCode


def test_ok_is_zero():
    assert ErrorCode(0) is ErrorCode.OK


def test_codes_are_consecutive():
    assert [ErrorCode(i) for i in range(len(ErrorCode))] == list(ErrorCode)


def test_count_is_last_and_equals_number_of_errors():
    members = list(ErrorCode)
    assert ErrorCode(len(members) - 1) is ErrorCode.COUNT
    for member in members[1:-1]:
        assert CubError(member).code is member


def test_error_keeps_code():
    err = CubError(ErrorCode.DUP_PLAYER_POS)
    assert err.code is ErrorCode.DUP_PLAYER_POS


def test_error_accepts_integer_code():
    err = CubError(int(ErrorCode.INVALID_MAP_FORMAT))
    assert err.code is ErrorCode.INVALID_MAP_FORMAT


def test_error_message_comes_from_code_name():
    err = CubError(ErrorCode.INVALID_MAP_CHARACTER)
    assert str(err) == ErrorCode.INVALID_MAP_CHARACTER.description
    assert "_" not in str(err)
    assert str(err) == str(err).lower()


def test_error_is_an_exception_carrying_its_code():
    err = CubError(ErrorCode.USAGE)
    assert isinstance(err, Exception)
    assert err.code is ErrorCode.USAGE
    assert str(err) == ErrorCode.USAGE.description


@pytest.mark.parametrize("code", [ErrorCode.OK, ErrorCode.COUNT])
def test_non_error_codes_rejected(code):
    with pytest.raises(ValueError):
        CubError(code)


def test_unknown_integer_rejected():
    with pytest.raises(ValueError):
        CubError(len(ErrorCode) + 5)