"""Relationship labels between two people.

``Relationship`` maps the coordinates of two people (see ``ancestry``) to a
label such as "Grandson" or "Second cousin twice removed". The first six
generations in each direction come from a static table; anything deeper is
generated by ``cousins.make_rel`` and memoised on the instance.

API:
    Relationship(abbr=3, relationship_table=None)
    Relationship.get_relationship(p1, p2) -> str
    Relationship.label_for(gender, x, y) -> Label
    get_relationship(p1, p2) -> str   (shared default instance)

One instance may be shared between threads; the memo cache is guarded by a
lock.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import copy
import logging
import threading

from . import ancestry
from .config import Config, load_relationship_table
from .cousins import make_rel
from .labels import DEFAULT_ABBR, Label, abbreviate
from .models import PersonLike

RelationshipTable = Dict[str, List[List[Optional[str]]]]

DEFAULT_TABLE: RelationshipTable = {
    "m": [
        [None, "Father", "Grandfather", "Great grandfather", "Great, great grandfather", "Great, great, great grandfather"],
        ["Son", "Brother", "Uncle", "Great uncle", "Great, great uncle", "Great, great, great uncle"],
        ["Grandson", "Nephew", "First cousin", "First cousin once removed", "First cousin twice removed", "First cousin three times removed"],
        ["Great grandson", "Great nephew", "First cousin once removed", "Second cousin", "Second cousin once removed", "Second cousin twice removed"],
        ["Great, great grandson", "Great, great nephew", "First cousin twice removed", "Second cousin once removed", "Third cousin", "Third cousin once removed"],
        ["Great, great, great grandson", "Great, great, great nephew", "First cousin three times removed", "Second cousin twice removed", "Third cousin once removed", "Fourth cousin"],
    ],
    "f": [
        [None, "Mother", "Grandmother", "Great grandmother", "Great, great grandmother", "Great, great, great grandmother"],
        ["Daughter", "Sister", "Aunt", "Great aunt", "Great, great aunt", "Great, great, great aunt"],
        ["Granddaughter", "Niece", "First cousin", "First cousin once removed", "First cousin twice removed", "First cousin three times removed"],
        ["Great granddaughter", "Great niece", "First cousin once removed", "Second cousin", "Second cousin once removed", "Second cousin twice removed"],
        ["Great, great granddaughter", "Great, great niece", "First cousin twice removed", "Second cousin once removed", "Third cousin", "Third cousin once removed"],
        ["Great, great, great granddaughter", "Great, great, great niece", "First cousin three times removed", "Second cousin twice removed", "Third cousin once removed", "Fourth cousin"],
    ],
}


def _table_cell(table: RelationshipTable, gender: str, x: int, y: int) -> Optional[str]:
    rows = table.get(gender)
    if rows is None or x >= len(rows):
        return None
    row = rows[x]
    if y >= len(row):
        return None
    return row[y]


class Relationship:
    def __init__(self, abbr: int = DEFAULT_ABBR, relationship_table: Optional[RelationshipTable] = None) -> None:
        if abbr < 0:
            raise ValueError("abbr must be >= 0")
        self.abbr = abbr
        self.relationship_table = copy.deepcopy(relationship_table if relationship_table is not None else DEFAULT_TABLE)
        # (gender, x, y) -> Label for cells make_rel had to generate
        self._cache: Dict[Tuple[str, int, int], Label] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, cfg: Config) -> "Relationship":
        table = load_relationship_table(cfg.table_path) if cfg.table_path else None
        return cls(abbr=cfg.abbr, relationship_table=table)

    # ancestry pass-throughs so one object covers the whole API
    def get_ancestors(self, person: PersonLike) -> List[PersonLike]:
        return ancestry.get_ancestors(person)

    def most_recent_common_ancestor(self, p1: PersonLike, p2: PersonLike) -> PersonLike:
        return ancestry.most_recent_common_ancestor(p1, p2)

    def get_relationship_coords(self, p1: PersonLike, p2: PersonLike) -> Tuple[int, int]:
        return ancestry.get_relationship_coords(p1, p2)

    def get_relationship_ancestors(self, p1: PersonLike, p2: PersonLike) -> Tuple[List[PersonLike], List[PersonLike]]:
        return ancestry.get_relationship_ancestors(p1, p2)

    def label_for(self, gender: str, x: int, y: int) -> Label:
        """Return the unabbreviated label for coordinates (x, y).

        Table cells are read on every call, so edits to
        ``relationship_table`` take effect immediately; only generated
        labels are memoised.
        """
        gender = (gender or "").lower()
        text = _table_cell(self.relationship_table, gender, x, y)
        if text is not None:
            return Label.from_text(text)
        key = (gender, x, y)
        with self._lock:
            label = self._cache.get(key)
            if label is None:
                label = make_rel(gender, x, y)
                logging.debug("generated relationship %r for %s", label.text, key)
                self._cache[key] = label
            return label

    def abbreviate(self, label: Label) -> str:
        return abbreviate(label, self.abbr)

    def get_relationship(self, p1: PersonLike, p2: PersonLike) -> str:
        """Describe p1 relative to p2, e.g. 'Grandson' or 'Niece'."""
        x, y = self.get_relationship_coords(p1, p2)
        return self.abbreviate(self.label_for(p1.gender, x, y))


_default: Optional[Relationship] = None
_default_lock = threading.Lock()


def default_relationship() -> Relationship:
    global _default
    with _default_lock:
        if _default is None:
            _default = Relationship()
        return _default


def get_relationship(p1: PersonLike, p2: PersonLike) -> str:
    return default_relationship().get_relationship(p1, p2)
