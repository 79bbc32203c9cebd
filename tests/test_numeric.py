from __future__ import annotations
import pytest
from vat_number.checks import NumbersOnlyCheck, numbers_only


@pytest.mark.parametrize("code", ["0", "123456789", "0012345678", "9" * 40])
def test_digit_strings(code: str) -> None:
    assert numbers_only(code)


@pytest.mark.parametrize(
    "code",
    [
        "",
        " 123",
        "123 ",
        "+123",
        "-123",
        "12.3",
        "1e5",
        "0x1F",
        "12345678\n",
        "²³",  # superscripts pass str.isdigit()
        "١٢٣",  # Arabic-Indic digits
        "１２３",  # fullwidth digits
    ],
)
def test_non_digit_strings(code: str) -> None:
    assert not numbers_only(code)


def test_check_object() -> None:
    check = NumbersOnlyCheck()
    assert check.matches("0012345678")
    assert not check.matches("00123X5678")
