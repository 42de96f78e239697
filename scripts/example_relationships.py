"""Small example script that demonstrates the relationship utilities.

Builds a tiny single-parent tree in memory and prints:
 - the ancestors of the youngest person
 - the most recent common ancestor of two cousins
 - relationship labels in both directions
 - a deep label showing "great" abbreviation

Run:
    python scripts/example_relationships.py
"""
from pathlib import Path
import sys

# Ensure repo root is on sys.path when running this script directly
repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from kinship_py.models import Person
from kinship_py.relationship import Relationship


def build_demo():
    #        grandfather
    #        /         \
    #    father       aunt
    #      |            |
    #     me          cousin
    grandfather = Person(id=1, gender="m", name="Grandfather")
    father = Person(id=2, gender="m", parent=grandfather, name="Father")
    aunt = Person(id=3, gender="f", parent=grandfather, name="Aunt")
    me = Person(id=4, gender="m", parent=father, name="Me")
    cousin = Person(id=5, gender="f", parent=aunt, name="Cousin")
    return grandfather, father, aunt, me, cousin


def main():
    rel = Relationship()
    grandfather, father, aunt, me, cousin = build_demo()

    print("Ancestors of Me:")
    for p in rel.get_ancestors(me):
        print(f"  {p.name} (id={p.id})")

    mrca = rel.most_recent_common_ancestor(me, cousin)
    print(f"\nMost recent common ancestor of Me and Cousin: {mrca.name}")

    for a, b in ((me, grandfather), (grandfather, me), (father, cousin), (cousin, father), (me, cousin)):
        print(f"  {a.name} -> {b.name}: {rel.get_relationship(a, b)} {rel.get_relationship_coords(a, b)}")

    # seven generations below grandfather
    person = grandfather
    for i in range(7):
        person = Person(id=100 + i, gender="f", parent=person, name=f"Gen {i + 1}")
    print(f"\nGrandfather -> {person.name}: {rel.get_relationship(grandfather, person)}")
    print(f"{person.name} -> Grandfather: {rel.get_relationship(person, grandfather)}")


if __name__ == "__main__":
    main()
