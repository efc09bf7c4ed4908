"""Kinship phrase normalization, tokenizing and grammar parsing.

Accepted sentences look like:

    его мать — младшая сестра её деда по материнской линии

i.e. `<pronoun> <relative> [line] <connector> <pronoun> <relative> [line]`,
where the connector states that the two relatives are siblings.
"""

from dataclasses import dataclass
import re

from errors import ParseError, ParseErrorKind
from log import get_logger

logger = get_logger(__name__)

HE = "he"
SHE = "she"

# «ё» is folded to «е» before lookup, so «её» arrives as «ее»
PRONOUNS = {
    "его": HE,
    "ее": SHE,
}

MOTHER_WORDS = {"мать", "мама", "матери", "мамы"}
FATHER_WORDS = {"отец", "папа", "отца", "папы"}

FILLERS = {"это", "есть", "является", "явл"}

RANK_WORDS = {
    "младшая",
    "старшая",
    "младший",
    "старший",
    "младшей",
    "старшей",
    "младшим",
    "старшим",
}

LINE_SIDES = {
    "материнской": "maternal",
    "отцовской": "paternal",
}

DASHES = re.compile(r"[\-‐‑‒–—―−]")


@dataclass
class RelativeSpec:
    base: str  # "he" | "she"
    steps: tuple[str, ...]  # ("mother",) | ("mother", "father") | ...
    line: str | None = None  # "maternal" | "paternal" for grandparents


@dataclass
class Connector:
    kind: str  # "sister" | "brother"
    rank: str | None = None  # «младшая», «старший», ...


@dataclass
class Sentence:
    left: RelativeSpec
    connector: Connector
    right: RelativeSpec


def normalize_text(text: str | None) -> str:
    """
    Case-fold and clean a phrase for tokenizing.

    - «ё» becomes «е»
    - every dash or hyphen becomes a space
    - any other punctuation becomes a space
    - runs of whitespace collapse to one space
    """
    s = (text or "").lower()
    s = s.replace("ё", "е")
    s = DASHES.sub(" ", s)
    s = re.sub(r"[^a-zа-я0-9\s]", " ", s)
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def tokenize(text: str | None) -> list[str]:
    return normalize_text(text).split()


def is_grandfather_word(token: str) -> bool:
    return token.startswith("дед")


def is_grandmother_word(token: str) -> bool:
    return token.startswith("баб")


def sibling_kind(token: str) -> str | None:
    if token.startswith("сестр"):
        return "sister"
    if token.startswith("брат"):
        return "brother"
    return None


def take_line(tokens: list[str], i: int) -> tuple[str | None, int]:
    """Consume «по материнской|отцовской линии» at `i`, if present."""
    if (
        i + 2 < len(tokens)
        and tokens[i] == "по"
        and tokens[i + 1] in LINE_SIDES
        and tokens[i + 2] == "линии"
    ):
        return LINE_SIDES[tokens[i + 1]], i + 3
    return None, i


def parse_relative_spec(tokens: list[str], i: int) -> tuple[RelativeSpec, int]:
    """Parse `<pronoun> <relation term> [line clause]` starting at token `i`."""
    if i >= len(tokens) or tokens[i] not in PRONOUNS:
        raise ParseError(
            ParseErrorKind.EXPECTED_PRONOUN,
            "Ожидали «его/ее»",
            position=i,
            token=tokens[i] if i < len(tokens) else None,
        )
    base = PRONOUNS[tokens[i]]
    i += 1

    if i >= len(tokens):
        raise ParseError(
            ParseErrorKind.EXPECTED_RELATION_TERM,
            "Ожидали термин родства после «его/ее»",
            position=i,
        )
    term = tokens[i]

    if term in MOTHER_WORDS:
        return RelativeSpec(base=base, steps=("mother",)), i + 1
    if term in FATHER_WORDS:
        return RelativeSpec(base=base, steps=("father",)), i + 1

    if is_grandfather_word(term) or is_grandmother_word(term):
        second = "father" if is_grandfather_word(term) else "mother"
        side, nxt = take_line(tokens, i + 1)
        if side is None:
            # Without a line a grandparent may be on either side of the family
            raise ParseError(
                ParseErrorKind.MISSING_LINE_CLAUSE,
                "Уточните линию: «по материнской линии» или «по отцовской линии» "
                "для «дед/бабушка»",
                position=i + 1,
                token=tokens[i + 1] if i + 1 < len(tokens) else None,
            )
        first = "mother" if side == "maternal" else "father"
        return RelativeSpec(base=base, steps=(first, second), line=side), nxt

    raise ParseError(
        ParseErrorKind.UNKNOWN_RELATION_TERM,
        f"Неизвестный термин родства: {term}",
        position=i,
        token=term,
    )


def parse_connector(tokens: list[str], i: int) -> tuple[Connector, int]:
    """Parse `{filler}* [rank] <sibling word>` starting at token `i`."""
    while i < len(tokens) and tokens[i] in FILLERS:
        i += 1

    rank = None
    if i < len(tokens) and tokens[i] in RANK_WORDS:
        rank = tokens[i]
        i += 1

    kind = sibling_kind(tokens[i]) if i < len(tokens) else None
    if kind is None:
        raise ParseError(
            ParseErrorKind.EXPECTED_SIBLING_WORD,
            "Ожидали «сестра/брат»",
            position=i,
            token=tokens[i] if i < len(tokens) else None,
        )
    return Connector(kind=kind, rank=rank), i + 1


def parse_sentence(text: str | None) -> Sentence:
    """
    Parse a full sibling-equivalence sentence.

    Raises:
        ParseError: on the first violated grammar expectation; nothing is
            returned for a partially matching sentence. Tokens left over after
            the second relative are ignored.
    """
    tokens = tokenize(text)
    if not tokens:
        raise ParseError(ParseErrorKind.EMPTY_INPUT, "Пустая строка")

    try:
        left, i = parse_relative_spec(tokens, 0)
        connector, i = parse_connector(tokens, i)
        right, i = parse_relative_spec(tokens, i)
    except ParseError as exc:
        logger.info("phrase_rejected", kind=exc.kind.value, position=exc.position, token=exc.token)
        raise

    if i < len(tokens):
        logger.debug("phrase_trailing_tokens", tokens=tokens[i:])

    return Sentence(left=left, connector=connector, right=right)
