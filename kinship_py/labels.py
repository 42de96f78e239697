"""Relationship label value and "great" abbreviation.

A label keeps its leading run of "great" qualifiers as a count next to the
rendered text, so abbreviating never has to search the text again:

    >>> lbl = Label.from_text("Great, great, great, great grandfather")
    >>> lbl.greats, lbl.term
    (4, 'grandfather')
    >>> abbreviate(lbl, 3)
    '4 x great grandfather'
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

DEFAULT_ABBR = 3


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class Label:
    text: str
    greats: int = 0
    term: str = ""

    @classmethod
    def build(cls, term: str, greats: int = 0) -> "Label":
        """Render greats + term, capitalising the first letter."""
        words = ", ".join(["great"] * greats)
        text = f"{words} {term}" if greats else term
        return cls(text=capitalize(text), greats=greats, term=term)

    @classmethod
    def from_text(cls, text: str) -> "Label":
        """Split an already rendered label into its great count and term."""
        greats = 0
        rest = text
        while True:
            head, sep, tail = rest.partition(" ")
            if not sep or head.rstrip(",").lower() != "great":
                break
            greats += 1
            rest = tail
        return cls(text=text, greats=greats, term=rest)

    def abbreviated(self, threshold: int = DEFAULT_ABBR) -> str:
        # a lone "great" is not a comma-separated run and is left as is
        if not threshold or self.greats < max(threshold, 2):
            return self.text
        return f"{self.greats} x great {self.term}"

    def __str__(self) -> str:
        return self.text


def abbreviate(label: Union[Label, str], threshold: int = DEFAULT_ABBR) -> str:
    """Collapse repeated "great" qualifiers once there are ``threshold`` of them.

    A threshold of 0 turns abbreviation off.
    """
    if threshold < 0:
        raise ValueError("abbreviation threshold must be >= 0")
    if isinstance(label, str):
        label = Label.from_text(label)
    return label.abbreviated(threshold)
