# Johtolog
# Copyright (C) 2026 The Johtolog authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from typing import Iterable, NamedTuple

from .grammar import Grammar, GrammarError, Production, Symbol
from .tokenizer import Tokenizer


log = logging.getLogger(__name__)

EPSILON = "e"
"""
The default right side that denotes the empty string.
"""

RULE_SEPARATOR = "->"


class GrammarFormatError(GrammarError):
	"""
	Raised when the input text does not follow the input format.
	"""


class GrammarInput(NamedTuple):
	grammar: Grammar
	words: list[str]


def split_rule(rule: str) -> tuple[str, str]:
	"""
	Splits a rule of the form `LHS->RHS` at the first separator.
	"""
	lhs, separator, rhs = rule.partition(RULE_SEPARATOR)
	if not separator:
		raise GrammarFormatError("Malformed rule `" + rule + "': expected `" + RULE_SEPARATOR + "' between the left and the right side")

	return lhs, rhs


def parse_production(lhs_raw: str, rhs_raw: str, tokenizer: Tokenizer, epsilon: str = EPSILON) -> Production:
	lhs = tuple(tokenizer.tokenize(lhs_raw))
	if rhs_raw == epsilon:
		return Production(lhs, ())

	return Production(lhs, tuple(tokenizer.tokenize(rhs_raw)))


def build_grammar(terminals: Iterable[Symbol], nonterminals: Iterable[Symbol], start: Symbol, rules: Iterable[str], epsilon: str = EPSILON) -> Grammar:
	"""
	Builds a grammar from rules written as `LHS->RHS`, tokenizing both sides with the declared symbols.
	All rules are split before any of them is tokenized, so a missing separator is always reported first.
	"""
	terminals = set(terminals)
	nonterminals = set(nonterminals) | {start}
	raw_rules = [split_rule(rule) for rule in rules]
	tokenizer = Tokenizer(terminals, nonterminals)
	productions = [parse_production(lhs, rhs, tokenizer, epsilon) for lhs, rhs in raw_rules]
	return Grammar.create(terminals, nonterminals, start, productions)


def parse_input(text: str, epsilon: str = EPSILON) -> GrammarInput:
	"""
	Parses a grammar and a list of words from whitespace-separated text:

	```
	<number of terminals> <terminal>...
	<number of nonterminals> <nonterminal>...
	<start symbol>
	<number of rules> <LHS->RHS>...
	<number of words> <word>...
	```
	"""
	tokens = iter(text.split())

	def take(expected: str) -> str:
		token = next(tokens, None)
		if token is None:
			raise GrammarFormatError("Unexpected end of input, expected " + expected)

		return token

	def take_list(name: str) -> list[str]:
		count = take("the number of " + name)
		if not count.isdecimal():
			raise GrammarFormatError("Expected the number of " + name + ", got `" + count + "'")

		return [take(name + " " + str(i+1) + "/" + count) for i in range(int(count))]

	terminals = take_list("terminals")
	nonterminals = take_list("nonterminals")
	start = take("the start symbol")
	rules = take_list("rules")
	words = take_list("words")

	leftover = next(tokens, None)
	if leftover is not None:
		raise GrammarFormatError("Unexpected `" + leftover + "' after the last word")

	grammar = build_grammar(terminals, nonterminals, start, rules, epsilon)
	log.debug("loaded %d terminals, %d nonterminals, %d rules and %d words", len(grammar.terminals), len(grammar.nonterminals), len(grammar.productions), len(words))
	return GrammarInput(grammar, words)


def load_input(path: str | os.PathLike, epsilon: str = EPSILON) -> GrammarInput:
	with open(path, encoding="utf-8") as file:
		try:
			text = file.read()

		except UnicodeDecodeError as e:
			raise GrammarFormatError(str(path) + " is not valid UTF-8 (byte " + str(e.start) + ")") from e

	return parse_input(text, epsilon)
