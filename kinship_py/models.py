"""Person model and the capability contract the relationship code relies on.

The relationship functions only ever read three attributes from a person:
``id``, ``gender`` ('m' or 'f') and ``parent`` (another person or None).
Anything exposing those works; :class:`Person` is a convenient concrete
implementation and :class:`FieldAdapter` wraps objects that name the
attributes differently.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol
import uuid

GENDERS = ("m", "f")


def _new_id() -> str:
    return str(uuid.uuid4())


class PersonLike(Protocol):
    @property
    def id(self) -> Any: ...

    @property
    def gender(self) -> str: ...

    @property
    def parent(self) -> Optional["PersonLike"]: ...


@dataclass(eq=False)
class Person:
    id: Any = field(default_factory=_new_id)
    # 'm' or 'f'
    gender: str = "m"
    parent: Optional["Person"] = field(default=None, repr=False)
    name: Optional[str] = None

    @property
    def parent_id(self) -> Optional[Any]:
        return self.parent.id if self.parent is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "gender": self.gender, "parent_id": self.parent_id, "name": self.name}

    @staticmethod
    def from_dict(d: Dict[str, Any], parent: Optional["Person"] = None) -> "Person":
        gender = (d.get("gender") or "").lower()
        if gender not in GENDERS:
            raise ValueError(f"gender must be one of {GENDERS}, got {d.get('gender')!r}")
        return Person(id=d.get("id", _new_id()), gender=gender, parent=parent, name=d.get("name"))


def build_people(records: Iterable[Dict[str, Any]]) -> Dict[Any, Person]:
    """Link a flat list of person records into parent chains.

    Each record is a dict with ``id``, ``gender`` and optional ``parent_id``
    and ``name``. Records may appear in any order. Returns a mapping
    id -> Person. Raises ValueError for duplicate ids (including ids that
    only differ by type, such as 1 and "1"), unknown parent ids, an invalid
    gender or a cycle in the parent links.
    """
    records = list(records)
    people: Dict[Any, Person] = {}
    # str(id) -> id, so 1 and "1" cannot both appear
    spelled: Dict[str, Any] = {}
    for rec in records:
        if not isinstance(rec, dict) or "id" not in rec:
            raise ValueError("person record without an id")
        pid = rec["id"]
        if pid in people:
            raise ValueError(f"duplicate person id {pid!r}")
        if str(pid) in spelled:
            raise ValueError(f"person id {pid!r} clashes with {spelled[str(pid)]!r}")
        spelled[str(pid)] = pid
        people[pid] = Person.from_dict(rec)

    # second pass once every id is known
    for rec in records:
        parent_id = rec.get("parent_id")
        if parent_id is None:
            continue
        if parent_id not in people:
            raise ValueError(f"person {rec['id']!r} refers to unknown parent {parent_id!r}")
        people[rec["id"]].parent = people[parent_id]

    # chains already walked to a root
    acyclic = set()
    for pid, person in people.items():
        seen = set()
        while person is not None and person.id not in acyclic:
            if person.id in seen:
                raise ValueError(f"cycle in parent chain at {pid!r}")
            seen.add(person.id)
            person = person.parent
        acyclic |= seen
    return people


class FieldAdapter:
    """Expose an object with differently named fields as a person.

    ``FieldAdapter(row, parent="father", id="pk", gender="sex")`` reads
    ``row.father``, ``row.pk`` and ``row.sex``. Mapping objects are read by
    key instead of attribute. Parents are wrapped on access with the same
    field names.
    """

    def __init__(self, obj: Any, parent: str = "parent", id: str = "id", gender: str = "gender") -> None:
        self.obj = obj
        self._fields = {"parent": parent, "id": id, "gender": gender}

    def _get(self, name: str) -> Any:
        key = self._fields[name]
        if isinstance(self.obj, dict):
            return self.obj.get(key)
        return getattr(self.obj, key, None)

    @property
    def id(self) -> Any:
        return self._get("id")

    @property
    def gender(self) -> str:
        return self._get("gender")

    @property
    def parent(self) -> Optional["FieldAdapter"]:
        p = self._get("parent")
        if p is None:
            return None
        return FieldAdapter(p, **self._fields)

    def __repr__(self) -> str:
        return f"FieldAdapter({self.obj!r})"


def ids(people: Iterable[PersonLike]) -> List[Any]:
    return [p.id for p in people]
