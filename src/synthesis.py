"""Turn parsed kinship phrases into persons and parent edges."""

from dataclasses import dataclass, field

from log import get_logger
from models import FEMALE, MALE, UNKNOWN, IdGenerator, ParentEdge, Person
from parsing import HE, SHE, Connector, RelativeSpec, Sentence, parse_sentence
import terms

logger = get_logger(__name__)

ROOTS = {
    HE: ("Он", MALE),
    SHE: ("Она", FEMALE),
}
POSSESSIVE = {HE: "Его", SHE: "Её"}

# Synthetic parents shared by the two sides of a sibling statement
COMMON_PARENTS = (("Общий прадед", MALE), ("Общая прабабушка", FEMALE))

SIBLING_SEX = {"sister": FEMALE, "brother": MALE}


@dataclass
class SynthesisResult:
    persons: list[Person]
    edges: list[ParentEdge]
    root_he: str | None = None
    root_she: str | None = None


@dataclass
class SymbolTable:
    """Persons created during one synthesis, addressable by their label."""

    ids: IdGenerator
    persons: list[Person] = field(default_factory=list)
    edges: list[ParentEdge] = field(default_factory=list)
    by_label: dict[str, str] = field(default_factory=dict)

    def person(self, label: str, sex: str, note: str | None = None) -> Person:
        """Return the person named `label`, creating it on first use."""
        if label in self.by_label:
            logger.debug("node_reused", label=label, id=self.by_label[label])
            return self.get(self.by_label[label])
        p = Person(id=self.ids(), name=label, sex=sex, note=note)
        self.persons.append(p)
        self.by_label[label] = p.id
        logger.debug("node_created", label=label, id=p.id, sex=sex)
        return p

    def get(self, person_id: str) -> Person:
        return next(p for p in self.persons if p.id == person_id)

    def link(self, parent: Person, child: Person) -> None:
        edge = ParentEdge(parent_id=parent.id, child_id=child.id)
        if edge not in self.edges:
            self.edges.append(edge)

    def root_id(self, base: str) -> str | None:
        return self.by_label.get(ROOTS[base][0])


def label_for_path(base: str, steps: tuple[str, ...]) -> tuple[str, str]:
    """Deterministic (label, sex) for the ancestor reached by `steps`."""
    owner = POSSESSIVE[base]
    if len(steps) == 1:
        if steps[0] == "mother":
            return f"{owner} мать", FEMALE
        return f"{owner} отец", MALE
    if len(steps) == 2:
        line = terms.MATERNAL_LINE if steps[0] == "mother" else terms.PATERNAL_LINE
        if steps[1] == "father":
            return f"{owner} дед ({line})", MALE
        return f"{owner} бабушка ({line})", FEMALE
    return f"{owner} предок в {len(steps)}-м колене", UNKNOWN


def ensure_chain(symbols: SymbolTable, spec: RelativeSpec) -> Person:
    """Build root -> ... -> ancestor for one relative; returns the ancestor."""
    label, sex = ROOTS[spec.base]
    child = symbols.person(label, sex)
    for depth in range(1, len(spec.steps) + 1):
        label, sex = label_for_path(spec.base, spec.steps[:depth])
        node = symbols.person(label, sex)
        symbols.link(node, child)
        child = node
    return child


def make_siblings(symbols: SymbolTable, left: Person, right: Person) -> None:
    for label, sex in COMMON_PARENTS:
        parent = symbols.person(label, sex)
        symbols.link(parent, left)
        symbols.link(parent, right)


def synthesize(
    left: RelativeSpec, connector: Connector, right: RelativeSpec, ids: IdGenerator
) -> SynthesisResult:
    """
    Build the graph stating that `left` and `right` are siblings.

    Both relatives are chained up from their pronoun root («Он»/«Она»); the two
    chain ends then get the same two synthetic parents. The rank word, if
    any, becomes a note on the left relative.
    """
    symbols = SymbolTable(ids=ids)

    left_node = ensure_chain(symbols, left)
    if connector.rank:
        left_node.note = f"{left_node.note}; {connector.rank}" if left_node.note else connector.rank

    expected_sex = SIBLING_SEX[connector.kind]
    if left_node.sex not in (expected_sex, UNKNOWN):
        logger.warning(
            "sibling_word_sex_mismatch",
            relative=left_node.name,
            sex=left_node.sex,
            sibling_word=connector.kind,
        )

    right_node = ensure_chain(symbols, right)
    if right_node.id == left_node.id:
        logger.warning("sibling_of_self", relative=left_node.name)

    make_siblings(symbols, left_node, right_node)

    return SynthesisResult(
        persons=symbols.persons,
        edges=symbols.edges,
        root_he=symbols.root_id(HE),
        root_she=symbols.root_id(SHE),
    )


def synthesize_sentence(sentence: Sentence, ids: IdGenerator) -> SynthesisResult:
    return synthesize(sentence.left, sentence.connector, sentence.right, ids)


def parse_phrase(text: str, ids: IdGenerator | None = None) -> SynthesisResult:
    """
    Compile a kinship phrase into a graph.

    Raises:
        ParseError: if the phrase does not match the grammar; no graph is built
    """
    sentence = parse_sentence(text)
    return synthesize_sentence(sentence, ids if ids is not None else IdGenerator())


def build_demo(ids: IdGenerator | None = None) -> SynthesisResult:
    """
    Hand-built graph for «его мать — младшая сестра её деда по материнской линии».

    Resets `ids` so the demo always has the same identifiers.
    """
    ids = ids if ids is not None else IdGenerator()
    ids.reset()
    symbols = SymbolTable(ids=ids)

    she = symbols.person("Она", FEMALE)
    her_mother = symbols.person("Её мать", FEMALE)
    her_mgf = symbols.person(f"Её дед ({terms.MATERNAL_LINE})", MALE)
    her_mgm = symbols.person(f"Её бабушка ({terms.MATERNAL_LINE})", FEMALE)

    symbols.link(her_mother, she)
    symbols.link(her_mgf, her_mother)
    symbols.link(her_mgm, her_mother)

    his_mother = symbols.person("Его мать", FEMALE, note="младшая сестра её деда")
    he = symbols.person("Он", MALE)
    symbols.link(his_mother, he)

    make_siblings(symbols, her_mgf, his_mother)

    return SynthesisResult(
        persons=symbols.persons,
        edges=symbols.edges,
        root_he=he.id,
        root_she=she.id,
    )
