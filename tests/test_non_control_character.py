import pytest

from validkit.validation.non_control_character import validate_non_control_character


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Himmel", True),
        ("आकाश", True),
        ("வானத்தில்", True),
        ("하늘", True),
        ("небо", True),
        ("2H₂ + O₂ ⇌ 2H₂O", True),
        ("\u000c", False),
        ("\u009f", False),
    ],
)
def test_non_control_character(text, expected):
    assert validate_non_control_character(text) is expected


def test_control_prefix_fails():
    assert not validate_non_control_character("\u009f하늘")


def test_iterable_of_characters():
    assert validate_non_control_character(iter(["a"]))
    assert not validate_non_control_character(iter(["\u000c"]))


def test_empty_text_passes():
    assert validate_non_control_character("")