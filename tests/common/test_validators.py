import pytest

from timeclock.common.validators import require_max_length, require_non_empty, require_user_id
from timeclock.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Ana ", "Nombre requerido") == "Ana"


@pytest.mark.parametrize("value", [None, "", "   ", 42])
def test_require_non_empty_rejects(value):
    with pytest.raises(ValidationError, match="Nombre requerido"):
        require_non_empty(value, "Nombre requerido")


def test_require_user_id_accepts_ints_and_numeric_strings():
    assert require_user_id(7) == 7
    assert require_user_id(" 12 ") == 12


@pytest.mark.parametrize("value", [None, "", "  "])
def test_require_user_id_missing(value):
    with pytest.raises(ValidationError, match="userId requerido"):
        require_user_id(value)


@pytest.mark.parametrize("value", ["abc", 0, -3, True, "1.5"])
def test_require_user_id_invalid(value):
    with pytest.raises(ValidationError, match="userId inválido"):
        require_user_id(value)


def test_require_max_length():
    assert require_max_length("abc", "too long", 3) == "abc"
    with pytest.raises(ValidationError):
        require_max_length("abcd", "too long", 3)
