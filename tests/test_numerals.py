# tests/test_numerals.py

from bsdual.numerals import localize, to_ascii_digits, to_localized_digits


def test_digits_in_order():
    assert to_localized_digits("2081") == "२०८१"
    assert to_localized_digits(2081) == "२०८१"


def test_padding_happens_before_transcoding():
    assert to_localized_digits(9, width=2) == "०९"
    assert to_localized_digits(17, width=2) == "१७"
    assert to_localized_digits(2081, width=2) == "२०८१"


def test_non_digits_pass_through():
    assert to_localized_digits("2081/09-17 th") == "२०८१/०९-१७ th"


def test_back_to_ascii():
    assert to_ascii_digits("२०८१-०९-१७") == "2081-09-17"
    assert to_ascii_digits("mixed २0") == "mixed 20"


def test_localize_by_language():
    assert localize(5, "en", width=2) == "05"
    assert localize(5, "en") == "5"
    assert localize(5, "np", width=2) == "०५"
