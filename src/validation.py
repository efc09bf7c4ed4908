"""Graph validation for kinship data."""

from collections import Counter

import networkx as nx

from graph import build_graph
from models import FEMALE, MALE, ParentEdge, Person


def validate_graph(persons: list[Person], edges: list[ParentEdge]) -> list[str]:
    """
    Validate the kinship graph for:
    - Duplicate person ids
    - Self-links, duplicate links and links to unknown persons
    - Cycles in parent-child relationships
    - More than one mother or more than one father

    Nothing is repaired. Relationship classification assumes the graph is
    acyclic; a reported cycle means its distances may be wrong.

    Returns a list of warning messages.
    """
    warnings: list[str] = []
    names = {p.id: p.name for p in persons}

    for pid, count in Counter(p.id for p in persons).items():
        if count > 1:
            warnings.append(f"Duplicate person id {pid} used {count} times")

    for e in edges:
        if e.parent_id == e.child_id:
            warnings.append(f"Impossible: {names.get(e.parent_id, e.parent_id)} is their own parent")
        for pid in (e.parent_id, e.child_id):
            if pid not in names:
                warnings.append(f"Dangling link {e.parent_id} -> {e.child_id}: person {pid} not found")

    for (parent, child), count in Counter((e.parent_id, e.child_id) for e in edges).items():
        if count > 1:
            warnings.append(f"Duplicate link {parent} -> {child} appears {count} times")

    G = build_graph(persons, edges)

    # Check for cycles
    try:
        cycle = nx.find_cycle(G, orientation="original")
        cycle_nodes = [names.get(edge[0], edge[0]) for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass  # No cycle found, which is good

    for child, data in G.nodes(data=True):
        parent_sexes = Counter(G.nodes[p].get("sex") for p in G.predecessors(child))
        for sex, word in ((FEMALE, "mother"), (MALE, "father")):
            if parent_sexes[sex] > 1:
                warnings.append(
                    f"Suspicious: {data.get('person_name', child)} has {parent_sexes[sex]} "
                    f"parents recorded as {word}"
                )

    return warnings
