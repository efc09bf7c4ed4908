"""NetworkX graph building and ancestry operations."""

from collections import deque
from dataclasses import dataclass, field

import networkx as nx

from models import ParentEdge, Person


@dataclass
class Indices:
    """Lookup tables derived from one snapshot of persons and edges."""

    by_id: dict[str, Person] = field(default_factory=dict)
    parents_of: dict[str, list[str]] = field(default_factory=dict)
    children_of: dict[str, list[str]] = field(default_factory=dict)


def build_graph(persons: list[Person], edges: list[ParentEdge]) -> nx.DiGraph:
    """Build a NetworkX directed graph, parent -> child.

    Duplicate edges collapse into one. Edges whose endpoints are not in
    `persons` are kept; their unknown endpoints become attribute-less nodes.
    Edges with a missing (None) endpoint are skipped.
    """
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for p in persons:
        G.add_node(p.id, person_name=p.name, sex=p.sex, note=p.note)

    for e in edges:
        if e.parent_id is None or e.child_id is None:
            continue
        G.add_edge(e.parent_id, e.child_id)

    return G


def build_indices(persons: list[Person], edges: list[ParentEdge]) -> Indices:
    """
    Derive parent-of / children-of tables covering every person id.

    Never raises. Neighbour lists are sorted by id so the result does not
    depend on the order persons and edges were supplied in.
    """
    G = build_graph(persons, edges)

    by_id = {p.id: p for p in persons}
    parents_of = {n: sorted(G.predecessors(n), key=str) for n in G.nodes}
    children_of = {n: sorted(G.successors(n), key=str) for n in G.nodes}

    return Indices(by_id=by_id, parents_of=parents_of, children_of=children_of)


def ancestor_distances(person_id: str, parents_of: dict[str, list[str]]) -> dict[str, int]:
    """
    Minimum number of parent hops from `person_id` to each reachable ancestor.

    Breadth-first, one generation at a time; the first time an ancestor is
    reached fixes its distance. The start itself is never reported. Assumes an
    acyclic graph: a cycle cannot hang the search, but distances through it
    are not guaranteed minimal.
    """
    distances: dict[str, int] = {}
    seen = {person_id}
    layer = [person_id]
    depth = 0

    while layer:
        depth += 1
        next_layer = []
        for current in layer:
            for parent in parents_of.get(current, ()):
                if parent in seen:
                    continue
                seen.add(parent)
                distances[parent] = depth
                next_layer.append(parent)
        layer = next_layer

    return distances


def find_lca(
    distances_a: dict[str, int], distances_b: dict[str, int]
) -> tuple[str, int, int] | None:
    """
    Pick the nearest common ancestor of two people.

    Args:
        distances_a: Ancestor distances of the first person
        distances_b: Ancestor distances of the second person

    Returns:
        (ancestor_id, distance_from_a, distance_from_b) minimizing the distance
        sum, then the smaller maximum distance, then the id; None when the
        ancestor sets are disjoint.
    """
    common = [anc for anc in distances_a if anc in distances_b]
    if not common:
        return None

    def score(anc: str):
        da, db = distances_a[anc], distances_b[anc]
        return (da + db, max(da, db), str(anc))

    best = min(common, key=score)
    return best, distances_a[best], distances_b[best]


def path_to_ancestor(
    from_id: str, ancestor_id: str, parents_of: dict[str, list[str]]
) -> list[str]:
    """
    One shortest upward path [from_id, ..., ancestor_id].

    Layered search with parent pointers, bounded by the visited set. Returns
    [from_id] when the ancestor is unreachable.
    """
    prev: dict[str, str] = {}
    seen = {from_id}
    queue = deque([from_id])

    while queue:
        current = queue.popleft()
        if current == ancestor_id:
            path = [current]
            while path[-1] != from_id:
                path.append(prev[path[-1]])
            path.reverse()
            return path
        for parent in parents_of.get(current, ()):
            if parent not in seen:
                seen.add(parent)
                prev[parent] = current
                queue.append(parent)

    return [from_id]


def build_family_layout_graph(G: nx.DiGraph) -> nx.DiGraph:
    """
    Build a layout graph using the family-node model for better tree rendering.

    Creates one "family node" per distinct set of parents, connecting those
    parents to all of the children they share:
    - Parents of the same children sit on the same generation
    - All children hang from the family node, so siblings align
    - Fewer edge crossings than direct parent→child edges

    Args:
        G: Graph from `build_graph` (parent -> child edges)

    Returns:
        A new graph with family nodes suitable for hierarchical layout
    """
    H = nx.DiGraph()

    # Copy person nodes with their attributes
    for n, data in G.nodes(data=True):
        H.add_node(n, node_type="person", **data)

    for child in G.nodes:
        parents = sorted(G.predecessors(child), key=str)
        if not parents:
            continue

        fam_id = f"FAM_{'_'.join(map(str, parents))}"
        if fam_id not in H:
            H.add_node(fam_id, node_type="family", parents=tuple(parents))
            for p in parents:
                H.add_edge(p, fam_id, edge_type="parent_to_family")

        # Child hangs from family node
        H.add_edge(fam_id, child, edge_type="family_to_child")

    return H
