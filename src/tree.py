"""Mutable working graph: the direct add person / add link path."""

from errors import SchemaError
from graph import build_indices
from interchange import from_interchange, to_interchange
from kinship import ClassificationResult, classify_indexed
from log import get_logger
from models import IdGenerator, ParentEdge, Person, normalize_sex
from validation import validate_graph

logger = get_logger(__name__)


class FamilyTree:
    """
    Persons and parent edges being edited, plus the id generator that names
    new persons. Queries work on a snapshot and never change the tree.
    """

    def __init__(self, ids: IdGenerator | None = None):
        self.ids = ids if ids is not None else IdGenerator()
        self.persons: list[Person] = []
        self.edges: list[ParentEdge] = []

    def get(self, person_id: str) -> Person | None:
        return next((p for p in self.persons if p.id == person_id), None)

    def find_by_name(self, name: str) -> Person | None:
        return next((p for p in self.persons if p.name == name), None)

    def add_person(self, name: str, sex: str = "unknown", note: str | None = None) -> Person:
        name = (name or "").strip()
        if not name:
            raise ValueError("Person name must not be blank")
        person = Person(id=self.ids(), name=name, sex=normalize_sex(sex), note=note)
        self.persons.append(person)
        logger.info("person_added", id=person.id, name=person.name, sex=person.sex)
        return person

    def add_parent_child(self, parent_id: str, child_id: str) -> bool:
        """
        Link parent -> child.

        Returns:
            False if the same link already exists (nothing is added)

        Raises:
            ValueError: for a self-link or an id not in the tree
        """
        if parent_id == child_id:
            raise ValueError(f"Person {parent_id} cannot be their own parent")
        for pid in (parent_id, child_id):
            if self.get(pid) is None:
                raise ValueError(f"Person ID {pid} not found in tree")

        edge = ParentEdge(parent_id=parent_id, child_id=child_id)
        if edge in self.edges:
            logger.info("duplicate_edge_ignored", parent=parent_id, child=child_id)
            return False
        self.edges.append(edge)
        logger.info("edge_added", parent=parent_id, child=child_id)
        return True

    def remove_person(self, person_id: str) -> None:
        """Remove a person and every edge that references them."""
        self.persons = [p for p in self.persons if p.id != person_id]
        before = len(self.edges)
        self.edges = [
            e for e in self.edges if e.parent_id != person_id and e.child_id != person_id
        ]
        logger.info("person_removed", id=person_id, edges_removed=before - len(self.edges))

    def replace(self, persons: list[Person], edges: list[ParentEdge]) -> None:
        """Swap in a whole new graph (phrase result, demo or import)."""
        persons, edges = list(persons), list(edges)
        self.ids.ensure_above(p.id for p in persons)
        self.persons = persons
        self.edges = edges
        logger.info(
            "tree_replaced",
            people=len(persons),
            relations=len(edges),
            next_id=self.ids.peek(),
        )

    def load_interchange(self, data) -> None:
        """Replace the tree from interchange data; unchanged on SchemaError."""
        try:
            persons, edges = from_interchange(data)
        except SchemaError as exc:
            logger.warning("interchange_rejected", error=str(exc))
            raise
        self.replace(persons, edges)

    def to_interchange(self) -> dict:
        return to_interchange(self.persons, self.edges)

    def classify(self, a_id: str, b_id: str) -> ClassificationResult:
        return classify_indexed(a_id, b_id, build_indices(self.persons, self.edges))

    def validate(self) -> list[str]:
        return validate_graph(self.persons, self.edges)
