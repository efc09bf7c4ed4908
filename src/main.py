"""
Command line entry point for the kinship analyzer.

1) `parse`: compile a phrase such as «его мать — младшая сестра её деда по
   материнской линии» into a graph, and name how «Он» and «Она» are related.
2) `demo`: the same graph, built by hand.
3) `classify`: name the relationship between two people of a saved graph.
4) `validate`: report cycles, duplicates and dangling links.
5) `plot`: draw the graph with Graphviz.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from config import get_settings
from errors import ParseError, SchemaError
from interchange import load_json, write_json
from kinship import ClassificationResult
from log import configure_logging
from plotting import plot_graph
from synthesis import SynthesisResult, build_demo, parse_phrase
from tree import FamilyTree

app = typer.Typer(
    name="kinship",
    help="Kinship relationship analyzer",
    add_completion=False,
)
console = Console()


@app.callback()
def setup():
    """Configure logging from the environment before any command runs."""
    configure_logging(get_settings().log_level)


def print_result(a_name: str, b_name: str, result: ClassificationResult) -> None:
    table = Table(title=f"{a_name} ↔ {b_name}")
    table.add_column("Кто")
    table.add_column("Кем приходится")
    table.add_row(f"{a_name} для {b_name}", result.role_of_a)
    table.add_row(f"{b_name} для {a_name}", result.role_of_b)
    console.print(table)
    for line in result.evidence:
        console.print(f"  • {line}")


def report_synthesis(result: SynthesisResult, output: Path | None) -> None:
    tree = FamilyTree()
    tree.replace(result.persons, result.edges)
    console.print(f"  {len(tree.persons)} persons, {len(tree.edges)} relations")

    if result.root_he and result.root_she:
        he = tree.get(result.root_he)
        she = tree.get(result.root_she)
        print_result(he.name, she.name, tree.classify(he.id, she.id))

    if output:
        write_json(output, tree.persons, tree.edges)
        console.print(f"Graph saved to {output}")


def load_tree(path: Path) -> FamilyTree:
    tree = FamilyTree()
    try:
        tree.load_interchange(load_json(path))
    except (SchemaError, OSError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    return tree


def resolve(tree: FamilyTree, key: str):
    """Look a person up by id, falling back to an exact name match."""
    person = tree.get(key) or tree.find_by_name(key)
    if person is None:
        console.print(f"[red]Person {key!r} not found[/red]")
        raise typer.Exit(code=1)
    return person


@app.command()
def parse(
    phrase: str = typer.Argument(..., help="Kinship phrase to compile"),
    output: Path = typer.Option(None, "--output", "-o", help="Write interchange JSON"),
):
    """Compile a kinship phrase into a graph and classify «Он» ↔ «Она»."""
    try:
        result = parse_phrase(phrase)
    except ParseError as exc:
        console.print(f"[red]Не удалось разобрать фразу: {exc}[/red]")
        console.print(
            "Поддерживаются конструкции: «его/ее мать|отец — [младшая|старшая] "
            "сестра|брат ее/его деда|бабушки по материнской|отцовской линии»."
        )
        raise typer.Exit(code=1)
    report_synthesis(result, output)


@app.command()
def demo(
    output: Path = typer.Option(None, "--output", "-o", help="Write interchange JSON"),
):
    """Build the example graph and classify «Он» ↔ «Она»."""
    report_synthesis(build_demo(), output)


@app.command()
def classify(
    person_a: str = typer.Argument(..., help="Id or name of the first person"),
    person_b: str = typer.Argument(..., help="Id or name of the second person"),
    data: Path = typer.Option(None, "--data", "-d", help="Interchange JSON file"),
):
    """Name the relationship between two people of a saved graph."""
    tree = load_tree(data or get_settings().data_path)

    warnings = tree.validate()
    if warnings:
        console.print(f"[yellow]  Found {len(warnings)} validation warnings, results may be wrong[/yellow]")

    a = resolve(tree, person_a)
    b = resolve(tree, person_b)
    print_result(a.name, b.name, tree.classify(a.id, b.id))


@app.command()
def validate(
    data: Path = typer.Option(None, "--data", "-d", help="Interchange JSON file"),
):
    """Check a saved graph for cycles, duplicates and dangling links."""
    tree = load_tree(data or get_settings().data_path)
    warnings = tree.validate()
    if warnings:
        console.print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            console.print(f"    - {w}")
        if len(warnings) > 10:
            console.print(f"    ... and {len(warnings) - 10} more")
        raise typer.Exit(code=1)
    console.print("  No validation issues found")


@app.command()
def plot(
    data: Path = typer.Option(None, "--data", "-d", help="Interchange JSON file"),
    output: Path = typer.Option(None, "--output", "-o", help="png, svg or pdf path"),
    show: bool = typer.Option(False, "--show", help="Display instead of saving"),
):
    """Draw a saved graph with Graphviz."""
    settings = get_settings()
    tree = load_tree(data or settings.data_path)
    target = None if show else (output or settings.plot_path)
    plot_graph(tree.persons, tree.edges, target, rankdir=settings.rankdir)
    if target:
        console.print(f"Graph saved to {target}")


if __name__ == "__main__":
    app()
