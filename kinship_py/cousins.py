"""Cousin / kinship label generation.

APIs:
    make_rel(gender, x, y) -> Label
    cousin_degree(x, y) -> (degree, removed)

x and y are generation distances from each person to their most recent
common ancestor (MRCA). For example:
    - father -> son : x=0, y=1
    - siblings: x=1, y=1
    - first cousins: x=2, y=2
    - uncle -> nephew: x=1, y=2

Labels describe the first person relative to the second and use the first
person's gender. make_rel covers every coordinate pair, (0, 0) giving 'Self',
but is only consulted for the ones missing from the static relationship table.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

import inflect

from .labels import Label

_inflect = inflect.engine()

TERMS: Dict[str, Dict[str, str]] = {
    "m": {"child": "son", "parent": "father", "sibling": "brother", "parent_sibling": "uncle", "sibling_child": "nephew"},
    "f": {"child": "daughter", "parent": "mother", "sibling": "sister", "parent_sibling": "aunt", "sibling_child": "niece"},
}


def ordinal(n: int) -> str:
    """English ordinal word: 1 -> 'first', 21 -> 'twenty-first'."""
    return _inflect.number_to_words(_inflect.ordinal(n))


def cardinal(n: int) -> str:
    return _inflect.number_to_words(n)


def times_str(n: int) -> str:
    if n == 1:
        return "once"
    if n == 2:
        return "twice"
    return f"{cardinal(n)} times"


def cousin_degree(x: int, y: int) -> Tuple[Optional[int], Optional[int]]:
    """Return (degree, removed) for cousin-type relations.

    degree is 0 for siblings and the uncle/nephew family, 1 for first
    cousins and so on. Direct-line relations (x or y == 0) have no degree.
    """
    if x < 0 or y < 0:
        raise ValueError("x and y must be non-negative integers")
    if x == 0 or y == 0:
        return None, None
    return min(x, y) - 1, abs(x - y)


def make_rel(gender: str, x: int, y: int) -> Label:
    """Generate the label for coordinates (x, y) and gender of person 1."""
    if gender not in TERMS:
        raise ValueError(f"unknown gender {gender!r}")
    if x < 0 or y < 0:
        raise ValueError("x and y must be non-negative integers")
    terms = TERMS[gender]

    if x == y == 0:
        return Label.build("self")
    if x == y == 1:
        return Label.build(terms["sibling"])
    if x == y:
        return Label.build(f"{ordinal(x - 1)} cousin")
    # direct ancestor
    if x == 0:
        if y == 1:
            return Label.build(terms["parent"])
        return Label.build(f"grand{terms['parent']}", greats=y - 2)
    # direct descendant
    if y == 0:
        if x == 1:
            return Label.build(terms["child"])
        return Label.build(f"grand{terms['child']}", greats=x - 2)
    if x == 1:
        return Label.build(terms["parent_sibling"], greats=y - 2)
    if y == 1:
        return Label.build(terms["sibling_child"], greats=x - 2)

    near = min(x, y)
    diff = abs(x - y)
    return Label.build(f"{ordinal(near - 1)} cousin {times_str(diff)} removed")
