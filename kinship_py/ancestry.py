"""Ancestor chains, relationship coordinates and most recent common ancestors.

A person's lineage is the person followed by every ancestor reached through
``parent`` links, nearest first. Two lineages are scanned with the first
person's chain as the outer loop, so the common ancestor closest to the
first person wins and, among ties, the one closest to the second person.

API:
    get_ancestors(person) -> List[person]
    find_relationship_coords(p1, p2) -> Optional[(x, y)]
    get_relationship_coords(p1, p2) -> (x, y)
    find_most_recent_common_ancestor(p1, p2) -> Optional[person]
    most_recent_common_ancestor(p1, p2) -> person
    get_relationship_ancestors(p1, p2) -> (List[person], List[person])

x and y are the number of generations from each person up to the common
ancestor. The parent chain must be acyclic; a cycle makes the walk loop
forever. ``models.build_people`` rejects cyclic trees up front.
"""
from __future__ import annotations
from typing import List, Optional, Tuple

from .errors import NoCommonAncestor, NoRelationshipPath
from .models import PersonLike


def get_ancestors(person: PersonLike) -> List[PersonLike]:
    """Return the ancestors of person, parent first, root last."""
    ancestors: List[PersonLike] = []
    person = person.parent
    while person is not None:
        ancestors.append(person)
        person = person.parent
    return ancestors


def lineage(person: PersonLike) -> List[PersonLike]:
    return [person] + get_ancestors(person)


def _first_match(p1: PersonLike, p2: PersonLike) -> Optional[Tuple[int, int, PersonLike]]:
    chain1 = lineage(p1)
    chain2 = lineage(p2)
    for i, anc1 in enumerate(chain1):
        for j, anc2 in enumerate(chain2):
            if anc1.id == anc2.id:
                return i, j, anc1
    return None


def find_relationship_coords(p1: PersonLike, p2: PersonLike) -> Optional[Tuple[int, int]]:
    """Return (x, y) for p1 and p2, or None when they share no ancestor."""
    if p1.id == p2.id:
        return 0, 0
    match = _first_match(p1, p2)
    if match is None:
        return None
    return match[0], match[1]


def get_relationship_coords(p1: PersonLike, p2: PersonLike) -> Tuple[int, int]:
    coords = find_relationship_coords(p1, p2)
    if coords is None:
        raise NoRelationshipPath(p1, p2)
    return coords


def find_most_recent_common_ancestor(p1: PersonLike, p2: PersonLike) -> Optional[PersonLike]:
    if p1.id == p2.id:
        return p1
    match = _first_match(p1, p2)
    return match[2] if match is not None else None


def most_recent_common_ancestor(p1: PersonLike, p2: PersonLike) -> PersonLike:
    mrca = find_most_recent_common_ancestor(p1, p2)
    if mrca is None:
        raise NoCommonAncestor(p1, p2)
    return mrca


def _up_to(chain: List[PersonLike], ancestor: PersonLike) -> List[PersonLike]:
    for idx, person in enumerate(chain):
        if person.id == ancestor.id:
            return chain[: idx + 1]
    raise ValueError(f"{ancestor.id!r} is not an ancestor of {chain[0].id!r}")


def get_relationship_ancestors(p1: PersonLike, p2: PersonLike) -> Tuple[List[PersonLike], List[PersonLike]]:
    """Return each person's lineage cut off after the common ancestor.

    Both lists start with the person itself and end with the MRCA.
    """
    mrca = most_recent_common_ancestor(p1, p2)
    return _up_to(lineage(p1), mrca), _up_to(lineage(p2), mrca)
