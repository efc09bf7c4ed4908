"""Visualization functions for kinship graphs."""

from pathlib import Path

import pydot

from graph import build_family_layout_graph, build_graph
from log import get_logger
from models import FEMALE, MALE, ParentEdge, Person

logger = get_logger(__name__)

FILL_COLORS = {MALE: "lightblue", FEMALE: "lightpink"}
SEX_BADGES = {MALE: "Мужчина", FEMALE: "Женщина"}
OUTPUT_FORMATS = ("png", "svg", "pdf")


def build_dot(persons: list[Person], edges: list[ParentEdge], rankdir: str = "TB") -> pydot.Dot:
    """
    Build a Graphviz hierarchical chart using the family-node model.

    Creates a genealogical chart where:
    - Parents appear above children (ancestors at top)
    - Two parents of the same children are aligned on the same rank
    - Siblings align under their family node
    - Family nodes connect each parent set to its children

    Args:
        persons: People to draw
        edges: Parent -> child links
        rankdir: Graphviz rank direction (TB, BT, LR, RL)
    """
    H = build_family_layout_graph(build_graph(persons, edges))

    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", rankdir)
    P.set("splines", "ortho")  # Orthogonal edges for cleaner tree look
    P.set("nodesep", "0.4")  # Horizontal spacing between nodes
    P.set("ranksep", "0.6")  # Vertical spacing between ranks

    # Parent pairs with their family node, for rank=same subgraphs
    parent_pairs: list[tuple] = []

    for node, data in H.nodes(data=True):
        if data.get("node_type") == "family":
            # Family nodes are small invisible points
            P.add_node(
                pydot.Node(
                    _quote(node),
                    shape="point",
                    width="0.1",
                    height="0.1",
                    label="",
                )
            )
            parents = data.get("parents", ())
            if len(parents) == 2:
                parent_pairs.append((parents[0], parents[1], node))
        else:
            sex = data.get("sex")
            name = data.get("person_name", str(node))
            lines = [name, SEX_BADGES.get(sex, "Пол не указан")]
            if data.get("note"):
                lines.append(data["note"])

            P.add_node(
                pydot.Node(
                    _quote(node),
                    label=_quote_lines(lines),
                    shape="box",
                    style="rounded,filled",
                    fillcolor=FILL_COLORS.get(sex, "lightgray"),
                    fontsize="10",
                )
            )

    for u, v, data in H.edges(data=True):
        if data.get("edge_type") == "parent_to_family":
            # Parent to family node: no arrow
            P.add_edge(pydot.Edge(_quote(u), _quote(v), dir="none", color="darkgray"))
        else:
            # Family node to child: arrow pointing down
            P.add_edge(pydot.Edge(_quote(u), _quote(v), color="darkgray"))

    for i, (a, b, _) in enumerate(parent_pairs):
        sg = pydot.Subgraph(f"parents_{i}", rank="same")
        sg.add_node(pydot.Node(_quote(a)))
        sg.add_node(pydot.Node(_quote(b)))
        P.add_subgraph(sg)

    return P


def plot_graph(
    persons: list[Person],
    edges: list[ParentEdge],
    output_path: Path | None = None,
    rankdir: str = "TB",
):
    """
    Render the kinship chart with Graphviz.

    Args:
        persons: People to draw
        edges: Parent -> child links
        output_path: Path to save the image (png, svg or pdf). If None,
            displays interactively.
        rankdir: Graphviz rank direction
    """
    P = build_dot(persons, edges, rankdir=rankdir)

    if output_path is None:
        _show(P)
        return

    output_path = Path(output_path)
    fmt = output_path.suffix.lower().lstrip(".")
    if fmt not in OUTPUT_FORMATS:
        fmt = "png"
    P.write(str(output_path), format=fmt)
    logger.info("graph_saved", path=str(output_path), format=fmt, people=len(persons))


def _show(P: pydot.Dot) -> None:
    """Render to PNG in memory and open it in a matplotlib window."""
    import io

    import matplotlib.image as mpimg
    import matplotlib.pyplot as plt

    image = mpimg.imread(io.BytesIO(P.create_png()), format="png")
    fig, ax = plt.subplots(figsize=(14, 10))
    ax.imshow(image)
    ax.set_axis_off()
    fig.tight_layout()
    plt.show()


def _escape(value) -> str:
    # Backslashes first, or the quote escapes would be doubled
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def _quote(value) -> str:
    """Graphviz ids and labels with non-ASCII text must be quoted."""
    return f'"{_escape(value)}"'


def _quote_lines(lines: list[str]) -> str:
    """Multi-line label; the "\\n" separators themselves stay unescaped."""
    return '"' + "\\n".join(_escape(line) for line in lines) + '"'
