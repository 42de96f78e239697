"""Kinship labels and common ancestors for single-parent family trees."""
from .ancestry import (
    find_most_recent_common_ancestor,
    find_relationship_coords,
    get_ancestors,
    get_relationship_ancestors,
    get_relationship_coords,
    most_recent_common_ancestor,
)
from .cousins import make_rel
from .errors import KinshipError, NoCommonAncestor, NoRelationshipPath
from .labels import Label, abbreviate
from .models import FieldAdapter, Person, PersonLike, build_people
from .relationship import Relationship, get_relationship

__all__ = [
    "FieldAdapter",
    "KinshipError",
    "Label",
    "NoCommonAncestor",
    "NoRelationshipPath",
    "Person",
    "PersonLike",
    "Relationship",
    "abbreviate",
    "build_people",
    "find_most_recent_common_ancestor",
    "find_relationship_coords",
    "get_ancestors",
    "get_relationship",
    "get_relationship_ancestors",
    "get_relationship_coords",
    "make_rel",
    "most_recent_common_ancestor",
]
