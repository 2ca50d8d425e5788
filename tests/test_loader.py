import os

import pytest

from johtolog import GrammarError, GrammarFormatError, Production, TokenizationError, build_grammar, load_input, parse_input
from johtolog.loader import split_rule


ANBN = """
2 a b
1 S
S
2 S->aSb S->e
3 aabb aab ab
"""

EXAMPLES = os.path.join(os.path.dirname(os.path.realpath(__file__)), "..", "examples")


def test_parse_input():
	grammar, words = parse_input(ANBN)
	assert grammar.terminals == {"a", "b"}
	assert grammar.nonterminals == {"S"}
	assert grammar.start == "S"
	assert grammar.productions == (
		Production(("S",), ("a", "S", "b")),
		Production(("S",), ()),
	)
	assert words == ["aabb", "aab", "ab"]


def test_start_symbol_is_added_to_nonterminals():
	grammar, _ = parse_input("1 a 0 S 1 S->a 0")
	assert grammar.nonterminals == {"S"}


def test_custom_epsilon_marker():
	grammar, _ = parse_input("1 e 1 S S 2 S->eS S->0 0", epsilon="0")
	assert grammar.productions == (
		Production(("S",), ("e", "S")),
		Production(("S",), ()),
	)


def test_empty_right_side_is_epsilon():
	grammar = build_grammar({"a"}, set(), "S", ["S->"])
	assert grammar.productions == (Production(("S",), ()),)


def test_split_rule():
	assert split_rule("CB->BC") == ("CB", "BC")
	assert split_rule("S->e") == ("S", "e")
	with pytest.raises(GrammarFormatError):
		split_rule("SaSb")


def test_separator_is_checked_before_tokenization():
	with pytest.raises(GrammarFormatError):
		build_grammar({"a"}, set(), "S", ["S->x", "Sa"])


def test_unknown_symbol_in_rule():
	with pytest.raises(TokenizationError) as info:
		parse_input("2 a b 1 S S 1 S->aXb 0")

	assert info.value.remainder == "Xb"


def test_empty_left_side():
	with pytest.raises(GrammarError):
		parse_input("1 a 1 S S 1 ->a 0")


@pytest.mark.parametrize("text", [
	"x a b 1 S S 0 0",
	"2 a b 1 S S 2 S->a",
	"2 a",
	"",
	"1 a 1 S S 1 S->a 1 a extra",
])
def test_malformed_input(text):
	with pytest.raises(GrammarFormatError):
		parse_input(text)


def test_load_input(tmp_path):
	path = tmp_path / "input.txt"
	path.write_text(ANBN, encoding="utf-8")
	grammar, words = load_input(path)
	assert len(grammar.productions) == 2
	assert words == ["aabb", "aab", "ab"]


def test_example_files_load():
	grammar, words = load_input(os.path.join(EXAMPLES, "anbncn.txt"))
	assert grammar.nonterminals == {"S", "B", "C"}
	assert len(grammar.productions) == 7
	assert grammar.classify() == "context-sensitive"
	assert words[0] == "abc"


def test_non_decimal_count():
	with pytest.raises(GrammarFormatError):
		parse_input("² a b 1 S S 0 0")


def test_load_input_not_utf8(tmp_path):
	path = tmp_path / "input.txt"
	path.write_bytes(b"1 \xff 1 S S 0 0")
	with pytest.raises(GrammarFormatError) as info:
		load_input(path)

	assert "input.txt" in str(info.value)
