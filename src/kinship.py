"""Relationship classification between two people in a parent/child graph."""

from dataclasses import dataclass, field
from functools import partial

from graph import Indices, ancestor_distances, build_indices, find_lca, path_to_ancestor
from log import get_logger
from models import ParentEdge, Person
import terms

logger = get_logger(__name__)


@dataclass
class ClassificationResult:
    role_of_a: str  # what A is to B
    role_of_b: str  # what B is to A
    evidence: list[str] = field(default_factory=list)
    found: bool = True


def not_found() -> ClassificationResult:
    return ClassificationResult(
        role_of_a=terms.RELATION_NOT_FOUND,
        role_of_b=terms.RELATION_NOT_FOUND,
        evidence=[],
        found=False,
    )


def classify(
    a_id: str, b_id: str, persons: list[Person], edges: list[ParentEdge]
) -> ClassificationResult:
    """
    Name the kinship between A and B in both directions.

    Never raises: unknown ids, A == B and disconnected pairs all yield the
    "relation not found" result. The graph is assumed to be acyclic.
    """
    return classify_indexed(a_id, b_id, build_indices(persons, edges))


def classify_indexed(a_id: str, b_id: str, idx: Indices) -> ClassificationResult:
    a = idx.by_id.get(a_id)
    b = idx.by_id.get(b_id)
    if a is None or b is None or a_id == b_id:
        return not_found()

    dist_a = ancestor_distances(a_id, idx.parents_of)
    dist_b = ancestor_distances(b_id, idx.parents_of)

    # Direct line: one is an ancestor of the other
    up = dist_b.get(a_id, -1)
    if up >= 1:
        path = path_to_ancestor(b_id, a_id, idx.parents_of)
        line = _line_of_path(path, idx)
        return ClassificationResult(
            role_of_a=terms.with_line(terms.ancestor_term(up, a.sex), line),
            role_of_b=terms.with_line(terms.descendant_term(up, b.sex), line),
            evidence=_direct_evidence(path, line, idx),
        )

    down = dist_a.get(b_id, -1)
    if down >= 1:
        path = path_to_ancestor(a_id, b_id, idx.parents_of)
        line = _line_of_path(path, idx)
        return ClassificationResult(
            role_of_a=terms.with_line(terms.descendant_term(down, a.sex), line),
            role_of_b=terms.with_line(terms.ancestor_term(down, b.sex), line),
            evidence=_direct_evidence(path, line, idx),
        )

    lca = find_lca(dist_a, dist_b)
    if lca is None:
        logger.debug("relation_not_found", a=a_id, b=b_id)
        return not_found()

    anc, k, l = lca
    path_a = path_to_ancestor(a_id, anc, idx.parents_of)
    path_b = path_to_ancestor(b_id, anc, idx.parents_of)
    evidence = [
        f"Общий предок: {_name(anc, idx)}",
        f"Путь: {_path_names(path_a, idx)}",
        f"Путь: {_path_names(path_b, idx)}",
    ]

    # Siblings
    if k == 1 and l == 1:
        line_a = _line_of_path(path_a, idx) or "—"
        line_b = _line_of_path(path_b, idx) or "—"
        evidence.append(f"Линии: {line_a} / {line_b}")
        return ClassificationResult(
            role_of_a=terms.word("sibling", a.sex),
            role_of_b=terms.word("sibling", b.sex),
            evidence=evidence,
        )

    # Aunt/uncle <-> niece/nephew, possibly a generation or two further apart
    if min(k, l) == 1:
        senior_is_a = k == 1
        degree = max(k, l) - 1
        if degree == 1:
            senior = partial(terms.word, "aunt_uncle")
            junior = partial(terms.word, "niece_nephew")
        else:
            senior = partial(terms.grand_aunt_uncle_term, degree)
            junior = partial(terms.grand_niece_nephew_term, degree)
        return _senior_junior(senior_is_a, senior, junior, a, b, evidence)

    # Cousins, with generational removal
    degree = min(k, l) - 1
    removal = abs(k - l)
    stem = terms.cousin_stem(degree)

    if removal == 0:
        return ClassificationResult(
            role_of_a=terms.prefixed(stem, "sibling", a.sex),
            role_of_b=terms.prefixed(stem, "sibling", b.sex),
            evidence=evidence,
        )

    return _senior_junior(
        k < l,
        partial(terms.prefixed, stem, "aunt_uncle"),
        partial(terms.prefixed, stem, "niece_nephew"),
        a,
        b,
        evidence,
        suffix="" if removal == 1 else f" (удаление {removal})",
    )


def _senior_junior(senior_is_a, senior, junior, a, b, evidence, suffix="") -> ClassificationResult:
    """The side nearer the common ancestor gets the senior term."""
    if senior_is_a:
        return ClassificationResult(senior(a.sex) + suffix, junior(b.sex) + suffix, evidence)
    return ClassificationResult(junior(a.sex) + suffix, senior(b.sex) + suffix, evidence)


def _name(person_id: str, idx: Indices) -> str:
    person = idx.by_id.get(person_id)
    return person.name if person else str(person_id)


def _path_names(path: list[str], idx: Indices) -> str:
    return " → ".join(_name(pid, idx) for pid in path)


def _line_of_path(path: list[str], idx: Indices) -> str:
    """Maternal/paternal line from the sex of the first parent on the path."""
    if len(path) < 2:
        return ""
    first_parent = idx.by_id.get(path[1])
    if first_parent is None:
        return ""
    return terms.line_of(first_parent.sex)


def _direct_evidence(path: list[str], line: str, idx: Indices) -> list[str]:
    evidence = [f"Путь: {_path_names(path, idx)}"]
    if line:
        evidence.append(f"Линия: {line}")
    return evidence
