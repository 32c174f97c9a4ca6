import pytest

from numask.mask_config import MaskConfig
from numask.separators import find_decimal, is_allowed_keystroke, localize_decimal, to_display

EN = MaskConfig(2, ".", ",")
DE = MaskConfig(2, ",", ".")
RU = MaskConfig(2, ",", " ")


@pytest.mark.parametrize("char", list("0123456789"))
def test_digits_are_allowed(char):
    assert is_allowed_keystroke(char, EN)
    assert is_allowed_keystroke(char, DE)


@pytest.mark.parametrize(
    ("char", "config", "expected"),
    [
        (".", EN, True),
        (",", EN, False),
        (",", DE, True),
        (".", DE, False),
        (" ", RU, False),
        ("a", EN, False),
        ("-", EN, False),
        ("٣", EN, False),
        ("12", EN, False),
        ("", EN, False),
    ],
)
def test_keystroke_allow_list(char, config, expected):
    assert is_allowed_keystroke(char, config) is expected


def test_to_display_replaces_grouping_before_decimal():
    # A naive decimal-first replacement would turn every mark into a dot.
    assert to_display("1,234,567.89", DE) == "1.234.567,89"
    assert to_display("1,234,567.89", RU) == "1 234 567,89"
    assert to_display("1,234,567.89", EN) == "1,234,567.89"
    assert to_display("1,234.5", MaskConfig(1, ".", " ")) == "1 234.5"


def test_localize_decimal():
    assert localize_decimal("1234.5", DE) == "1234,5"
    assert localize_decimal("1234.5", EN) == "1234.5"


def test_find_decimal():
    assert find_decimal("12,34", DE) == 2
    assert find_decimal("1234", DE) == -1
