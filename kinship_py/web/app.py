from fastapi import FastAPI, HTTPException, Form
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union
import json
import logging

from ..config import load_config
from ..cousins import cousin_degree
from ..errors import NoCommonAncestor
from ..models import Person, build_people, ids
from ..relationship import Relationship
from ..templating import render_template

app = FastAPI(title="kinship-py")

# Ensure basic logging is configured so integration-test server logs at INFO are visible
logging.basicConfig(level=logging.INFO)

cfg = load_config()
# shared across worker threads; Relationship guards its own cache
relationship = Relationship.from_config(cfg)

PersonId = Union[int, str]


class PersonIn(BaseModel):
    id: PersonId
    gender: str
    parent_id: Optional[PersonId] = None
    name: Optional[str] = None


class RelationshipRequest(BaseModel):
    people: List[PersonIn]
    person1: PersonId
    person2: PersonId


class AncestorsRequest(BaseModel):
    people: List[PersonIn]
    person: PersonId


class RelationshipOut(BaseModel):
    relationship: str
    coords: List[int]
    degree: Optional[int] = None
    removed: Optional[int] = None
    mrca: Dict[str, Any]
    ancestors: List[List[PersonId]] = Field(default_factory=list)


def _build(records: List[Dict[str, Any]]) -> Dict[Any, Person]:
    try:
        return build_people(records)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _lookup(people: Dict[Any, Person], pid: Any) -> Person:
    p = people.get(pid)
    if p is None:
        # form fields arrive as strings while JSON ids may be numbers;
        # build_people rejects trees where 1 and "1" both appear
        p = next((q for k, q in people.items() if str(k) == str(pid)), None)
    if p is None:
        raise HTTPException(status_code=404, detail=f"Person {pid!r} not found")
    return p


def _describe(p1: Person, p2: Person) -> Dict[str, Any]:
    try:
        label = relationship.get_relationship(p1, p2)
        x, y = relationship.get_relationship_coords(p1, p2)
        mrca = relationship.most_recent_common_ancestor(p1, p2)
        line1, line2 = relationship.get_relationship_ancestors(p1, p2)
    except NoCommonAncestor as e:
        logging.info("no relationship between %s and %s", p1.id, p2.id)
        raise HTTPException(status_code=422, detail=str(e))
    degree, removed = cousin_degree(x, y)
    return {
        "relationship": label,
        "coords": [x, y],
        "degree": degree,
        "removed": removed,
        "mrca": mrca,
        "line1": line1,
        "line2": line2,
    }


def _person_label(p: Person) -> str:
    return p.name or str(p.id)


@app.get("/", response_class=HTMLResponse)
def welcome():
    return HTMLResponse(render_template("index.html", {"tree": "", "person1": "", "person2": "", "error": None}))


@app.post("/relationship", response_class=HTMLResponse)
def relationship_page(tree: str = Form(...), person1: str = Form(...), person2: str = Form(...)):
    ctx = {"tree": tree, "person1": person1, "person2": person2, "error": None}
    try:
        records = json.loads(tree)
    except ValueError:
        ctx["error"] = "People must be a JSON list"
        return HTMLResponse(render_template("index.html", ctx), status_code=400)
    if not isinstance(records, list):
        ctx["error"] = "People must be a JSON list"
        return HTMLResponse(render_template("index.html", ctx), status_code=400)
    try:
        people = _build(records)
        p1 = _lookup(people, person1)
        p2 = _lookup(people, person2)
        result = _describe(p1, p2)
    except HTTPException as e:
        ctx["error"] = e.detail
        return HTMLResponse(render_template("index.html", ctx), status_code=e.status_code)

    logging.info("relationship page: %s -> %s = %s", p1.id, p2.id, result["relationship"])
    return HTMLResponse(render_template("result.html", {
        "name1": _person_label(p1),
        "name2": _person_label(p2),
        "relationship": result["relationship"],
        "coords": result["coords"],
        "mrca": _person_label(result["mrca"]),
        "line1": [_person_label(p) for p in result["line1"]],
        "line2": [_person_label(p) for p in result["line2"]],
    }))


### Minimal JSON API (programmatic access)
@app.post("/api/relationship", response_model=RelationshipOut)
def api_relationship(req: RelationshipRequest):
    """Return the label, coordinates and common ancestor of two people."""
    people = _build([p.model_dump() for p in req.people])
    p1 = _lookup(people, req.person1)
    p2 = _lookup(people, req.person2)
    result = _describe(p1, p2)
    logging.info("api relationship: %s -> %s = %s", p1.id, p2.id, result["relationship"])
    return {
        "relationship": result["relationship"],
        "coords": result["coords"],
        "degree": result["degree"],
        "removed": result["removed"],
        "mrca": result["mrca"].to_dict(),
        "ancestors": [ids(result["line1"]), ids(result["line2"])],
    }


@app.post("/api/ancestors")
def api_ancestors(req: AncestorsRequest):
    people = _build([p.model_dump() for p in req.people])
    p = _lookup(people, req.person)
    return {"person": p.to_dict(), "ancestors": ids(relationship.get_ancestors(p))}
