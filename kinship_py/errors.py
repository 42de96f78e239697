"""Exceptions raised when two people cannot be related."""
from __future__ import annotations
from typing import Any


class KinshipError(Exception):
    pass


class NoCommonAncestor(KinshipError):
    """The ancestor chains of two people share no identifier."""

    def __init__(self, person1: Any, person2: Any, message: str = "Can't find a common ancestor") -> None:
        self.person1 = person1
        self.person2 = person2
        super().__init__(f"{message} for {getattr(person1, 'id', person1)!r} and {getattr(person2, 'id', person2)!r}")


class NoRelationshipPath(NoCommonAncestor):
    """Raised by the coordinate and label entry points for the same condition."""

    def __init__(self, person1: Any, person2: Any) -> None:
        super().__init__(person1, person2, message="Can't work out the relationship")
