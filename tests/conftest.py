import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from kinship_py.models import Person


@pytest.fixture(autouse=True)
def _clean_kinship_env(monkeypatch):
    """Keep a developer's KINSHIP_* settings out of the tests."""
    for name in ("KINSHIP_CONFIG", "KINSHIP_ABBR", "KINSHIP_TABLE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def family():
    """Grandfather with two sons; Father has a son, Uncle has a daughter.

         grandfather
          /       \\
      father     uncle
        |          |
       son      cousin (f)
    """
    grandfather = Person(id=1, gender="m", name="Grandfather")
    father = Person(id=2, gender="m", parent=grandfather, name="Father")
    uncle = Person(id=3, gender="m", parent=grandfather, name="Uncle")
    son = Person(id=4, gender="m", parent=father, name="Son")
    cousin = Person(id=5, gender="f", parent=uncle, name="Cousin")
    return {"grandfather": grandfather, "father": father, "uncle": uncle, "son": son, "cousin": cousin}


@pytest.fixture
def generations():
    """Two lines of brothers descending from one root, ten generations deep.

    generations[0] holds the root twice; generations[1] are brothers,
    generations[2] first cousins and so on.
    """
    root = Person(id="root", gender="m")
    gens = [{"p1": root, "p2": root}]
    for i in range(1, 10):
        prev = gens[-1]
        gens.append({
            "p1": Person(id=f"p1-{i}", gender="m", parent=prev["p1"]),
            "p2": Person(id=f"p2-{i}", gender="m", parent=prev["p2"]),
        })
    return gens
