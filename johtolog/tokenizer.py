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

from typing import AbstractSet

from .grammar import GrammarError, Symbol


class TokenizationError(GrammarError):
	"""
	Raised when a string cannot be split into known symbols.
	"""
	def __init__(self, raw: str, position: int):
		self.raw = raw
		self.position = position
		self.remainder = raw[position:]
		super().__init__("No known symbol at the start of \"" + self.remainder + "\" in \"" + raw + "\". Check the lists of terminals and nonterminals.")


class Tokenizer:
	"""
	Splits strings into grammar symbols using greedy longest match.

	At each position the longest known symbol is taken. This is not always the right choice: with the symbols
	`ab`, `a` and `bc`, the string `abc` is rejected even though `a bc` would be a valid split.
	"""
	def __init__(self, terminals: AbstractSet[Symbol], nonterminals: AbstractSet[Symbol]):
		self.terminals = terminals
		self.nonterminals = nonterminals
		self.max_length = max((len(symbol) for symbol in terminals | nonterminals), default=0)

	def is_symbol(self, string: str) -> bool:
		return string in self.terminals or string in self.nonterminals

	def tokenize(self, raw: str) -> list[Symbol]:
		tokens: list[Symbol] = []
		max_length = self.max_length or len(raw)
		i = 0
		while i < len(raw):
			upper = min(len(raw) - i, max_length)
			for length in range(upper, 0, -1):
				candidate = raw[i:i+length]
				if self.is_symbol(candidate):
					break

			else:
				raise TokenizationError(raw, i)

			tokens.append(candidate)
			i += length

		return tokens


def tokenize(raw: str, terminals: AbstractSet[Symbol], nonterminals: AbstractSet[Symbol]) -> list[Symbol]:
	return Tokenizer(terminals, nonterminals).tokenize(raw)
