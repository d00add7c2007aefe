from validkit.validation.must_match import validate_must_match


def test_strings_valid():
    assert validate_must_match("hey", "hey")


def test_strings_built_differently_valid():
    assert validate_must_match("hey", "".join(["h", "e", "y"]))


def test_numbers():
    assert validate_must_match(2, 2)


def test_numbers_false():
    assert not validate_must_match(2, 3)


def test_none_some_false():
    assert not validate_must_match(None, 3)


def test_some_none_false():
    assert not validate_must_match(3, None)


def test_none_none_true():
    assert validate_must_match(None, None)