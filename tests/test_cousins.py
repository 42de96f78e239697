import pytest

from kinship_py.cousins import cardinal, cousin_degree, make_rel, ordinal, times_str


def test_ordinal_words():
    assert ordinal(1) == "first"
    assert ordinal(2) == "second"
    assert ordinal(8) == "eighth"
    assert ordinal(12) == "twelfth"
    assert ordinal(21) == "twenty-first"


def test_cardinal_and_times():
    assert cardinal(3) == "three"
    assert cardinal(11) == "eleven"
    assert times_str(1) == "once"
    assert times_str(2) == "twice"
    assert times_str(3) == "three times"
    assert times_str(15) == "fifteen times"


def test_same_generation_cousins():
    assert make_rel("m", 9, 9).text == "Eighth cousin"
    assert make_rel("f", 3, 3).text == "Second cousin"


def test_direct_line():
    lbl = make_rel("m", 0, 6)
    assert lbl.text == "Great, great, great, great grandfather"
    assert lbl.greats == 4
    assert lbl.term == "grandfather"
    assert make_rel("f", 7, 0).text == "Great, great, great, great, great granddaughter"
    assert make_rel("m", 0, 2).text == "Grandfather"


def test_collateral_line():
    assert make_rel("f", 1, 6).text == "Great, great, great, great aunt"
    assert make_rel("m", 6, 1).text == "Great, great, great, great nephew"
    assert make_rel("m", 1, 3).text == "Great uncle"


def test_removed_cousins():
    assert make_rel("m", 8, 5).text == "Fourth cousin three times removed"
    assert make_rel("f", 2, 6).text == "First cousin four times removed"
    assert make_rel("m", 7, 6).text == "Fifth cousin once removed"
    assert make_rel("m", 6, 8).text == "Fifth cousin twice removed"


def test_small_coords_match_table_terms():
    assert make_rel("m", 0, 0).text == "Self"
    assert make_rel("m", 0, 1).text == "Father"
    assert make_rel("f", 1, 0).text == "Daughter"
    assert make_rel("f", 1, 1).text == "Sister"
    assert make_rel("m", 1, 2).text == "Uncle"
    assert make_rel("f", 2, 1).text == "Niece"


def test_invalid_input():
    with pytest.raises(ValueError):
        make_rel("x", 2, 2)
    with pytest.raises(ValueError):
        make_rel("m", -1, 2)


def test_cousin_degree():
    assert cousin_degree(0, 3) == (None, None)
    assert cousin_degree(1, 1) == (0, 0)
    assert cousin_degree(1, 2) == (0, 1)
    assert cousin_degree(2, 2) == (1, 0)
    assert cousin_degree(8, 5) == (4, 3)
    with pytest.raises(ValueError):
        cousin_degree(-1, 0)
