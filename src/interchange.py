"""JSON interchange format for family tree storage.

    {"people": [{"id", "name", "sex", "note"?}, ...],
     "relations": [{"parentId", "childId"}, ...]}

Older exports name the relations list "rels"; both are accepted on read.
"""

import json
from pathlib import Path

from errors import SchemaError
from log import get_logger
from models import ParentEdge, Person, normalize_sex

logger = get_logger(__name__)

RELATION_KEYS = ("relations", "rels")


def from_interchange(data) -> tuple[list[Person], list[ParentEdge]]:
    """
    Validate an interchange record and convert it to persons and edges.

    Ids are normalized to strings and unknown sexes to "unknown".

    Raises:
        SchemaError: if either sequence is missing or not a list, or a record
            lacks a required field
    """
    if not isinstance(data, dict) or not isinstance(data.get("people"), list):
        raise SchemaError("Файл не похож на экспорт этого приложения: нет списка «people»")

    relations = None
    for key in RELATION_KEYS:
        if isinstance(data.get(key), list):
            relations = data[key]
            break
    if relations is None:
        raise SchemaError("Файл не похож на экспорт этого приложения: нет списка «relations»")

    persons: list[Person] = []
    for i, rec in enumerate(data["people"]):
        if not isinstance(rec, dict) or "id" not in rec or "name" not in rec:
            raise SchemaError(f"people[{i}]: ожидали запись с полями «id» и «name»")
        note = rec.get("note")
        persons.append(
            Person(
                id=str(rec["id"]),
                name=str(rec["name"]),
                sex=normalize_sex(rec.get("sex")),
                note=str(note) if note else None,
            )
        )

    edges: list[ParentEdge] = []
    for i, rec in enumerate(relations):
        if not isinstance(rec, dict) or "parentId" not in rec or "childId" not in rec:
            raise SchemaError(f"relations[{i}]: ожидали запись с полями «parentId» и «childId»")
        edges.append(ParentEdge(parent_id=str(rec["parentId"]), child_id=str(rec["childId"])))

    logger.debug("interchange_loaded", people=len(persons), relations=len(edges))
    return persons, edges


def to_interchange(persons: list[Person], edges: list[ParentEdge]) -> dict:
    people = []
    for p in persons:
        rec = {"id": p.id, "name": p.name, "sex": p.sex}
        if p.note:
            rec["note"] = p.note
        people.append(rec)

    return {
        "people": people,
        "relations": [{"parentId": e.parent_id, "childId": e.child_id} for e in edges],
    }


def load_json(path: Path):
    """Raw decoded file contents; JSON syntax errors surface as SchemaError."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Не удалось прочитать JSON: {exc}") from exc


def write_json(path: Path, persons: list[Person], edges: list[ParentEdge]) -> None:
    Path(path).write_text(
        json.dumps(to_interchange(persons, edges), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
