"""Tests for phrase normalization, tokenizing and grammar parsing."""

import pytest

from errors import ParseError, ParseErrorKind
from parsing import (
    HE,
    SHE,
    normalize_text,
    parse_connector,
    parse_relative_spec,
    parse_sentence,
    tokenize,
)


class TestNormalize:
    """Tests for text normalization."""

    def test_case_and_yo(self):
        assert normalize_text("ЕЁ Мать") == "ее мать"

    def test_dashes_become_spaces(self):
        assert normalize_text("мать—сестра–брат-дед") == "мать сестра брат дед"

    def test_punctuation_and_whitespace(self):
        assert normalize_text("  его,  мать!!  «сестра»?  ") == "его мать сестра"

    def test_empty(self):
        assert normalize_text(None) == ""
        assert normalize_text(" — ") == ""

    def test_tokenize(self):
        assert tokenize("его мать — младшая сестра") == ["его", "мать", "младшая", "сестра"]


class TestRelativeSpec:
    """Tests for `<pronoun> <relation> [line]`."""

    def test_mother(self):
        spec, nxt = parse_relative_spec(["его", "мать"], 0)
        assert spec.base == HE
        assert spec.steps == ("mother",)
        assert nxt == 2

    def test_father_genitive(self):
        spec, _ = parse_relative_spec(["ее", "отца"], 0)
        assert spec.base == SHE
        assert spec.steps == ("father",)

    @pytest.mark.parametrize(
        "tokens, steps, line",
        [
            (["ее", "деда", "по", "материнской", "линии"], ("mother", "father"), "maternal"),
            (["его", "дедушка", "по", "отцовской", "линии"], ("father", "father"), "paternal"),
            (["ее", "бабушки", "по", "материнской", "линии"], ("mother", "mother"), "maternal"),
            (["его", "бабушка", "по", "отцовской", "линии"], ("father", "mother"), "paternal"),
        ],
    )
    def test_grandparents(self, tokens, steps, line):
        spec, nxt = parse_relative_spec(tokens, 0)
        assert spec.steps == steps
        assert spec.line == line
        assert nxt == 5

    def test_grandparent_needs_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse_relative_spec(["его", "дед"], 0)
        assert exc_info.value.kind == ParseErrorKind.MISSING_LINE_CLAUSE
        assert exc_info.value.token is None

    def test_incomplete_line_clause(self):
        with pytest.raises(ParseError) as exc_info:
            parse_relative_spec(["его", "дед", "по", "материнской"], 0)
        assert exc_info.value.kind == ParseErrorKind.MISSING_LINE_CLAUSE

    def test_missing_pronoun(self):
        with pytest.raises(ParseError) as exc_info:
            parse_relative_spec(["мать"], 0)
        assert exc_info.value.kind == ParseErrorKind.EXPECTED_PRONOUN
        assert exc_info.value.token == "мать"
        assert exc_info.value.position == 0

    def test_missing_relation_term(self):
        with pytest.raises(ParseError) as exc_info:
            parse_relative_spec(["его"], 0)
        assert exc_info.value.kind == ParseErrorKind.EXPECTED_RELATION_TERM

    def test_unknown_relation_term(self):
        with pytest.raises(ParseError) as exc_info:
            parse_relative_spec(["его", "тесть"], 0)
        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_RELATION_TERM
        assert "тесть" in str(exc_info.value)


class TestConnector:
    """Tests for `{filler}* [rank] <sibling word>`."""

    def test_rank_and_sister(self):
        connector, nxt = parse_connector(["младшая", "сестра", "ее"], 0)
        assert connector.kind == "sister"
        assert connector.rank == "младшая"
        assert nxt == 2

    def test_fillers_and_instrumental(self):
        connector, nxt = parse_connector(["является", "старшим", "братом"], 0)
        assert connector.kind == "brother"
        assert connector.rank == "старшим"
        assert nxt == 3

    def test_no_rank(self):
        connector, _ = parse_connector(["это", "брат"], 0)
        assert connector.rank is None

    def test_missing_sibling_word(self):
        with pytest.raises(ParseError) as exc_info:
            parse_connector(["младшая", "дочь"], 0)
        assert exc_info.value.kind == ParseErrorKind.EXPECTED_SIBLING_WORD
        assert exc_info.value.token == "дочь"


class TestParseSentence:
    """Tests for whole sentences."""

    def test_canonical_sentence(self):
        sentence = parse_sentence("его мать — младшая сестра её деда по материнской линии")

        assert sentence.left.base == HE
        assert sentence.left.steps == ("mother",)
        assert sentence.connector.kind == "sister"
        assert sentence.connector.rank == "младшая"
        assert sentence.right.base == SHE
        assert sentence.right.steps == ("mother", "father")

    def test_grandparent_without_line_fails(self):
        with pytest.raises(ParseError) as exc_info:
            parse_sentence("его дед является старшим братом ее матери")
        assert exc_info.value.kind == ParseErrorKind.MISSING_LINE_CLAUSE
        assert "линии" in exc_info.value.message

    def test_empty(self):
        with pytest.raises(ParseError) as exc_info:
            parse_sentence("   ")
        assert exc_info.value.kind == ParseErrorKind.EMPTY_INPUT

    def test_missing_second_relative(self):
        with pytest.raises(ParseError) as exc_info:
            parse_sentence("его мать сестра")
        assert exc_info.value.kind == ParseErrorKind.EXPECTED_PRONOUN
        assert exc_info.value.position == 3

    def test_trailing_tokens_ignored(self):
        sentence = parse_sentence("ее отец брат его матери и так далее")
        assert sentence.right.steps == ("mother",)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_sentence("кто-то кому-то брат")
