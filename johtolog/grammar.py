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

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Literal


type Symbol = str
"""
A terminal or a nonterminal. Symbols are plain strings compared by equality.
"""

type Form = tuple[Symbol, ...]
"""
A sentential form: the symbols of one step of a derivation.
"""

type GrammarClass = Literal["regular", "context-free", "context-sensitive", "unrestricted"]


class GrammarError(Exception):
	"""
	Raised when a grammar cannot be constructed. Errors of this kind are fatal: there is no partial grammar to fall back to.
	"""


@dataclass(frozen=True)
class Production:
	"""
	A rewrite rule. Any contiguous occurrence of `lhs` in a sentential form may be replaced with `rhs`.
	"""

	lhs: Form
	"""
	The left side of the rule. Non-empty, may contain both terminals and nonterminals.
	"""

	rhs: Form
	"""
	The right side of the rule. An empty right side makes this an epsilon rule.
	"""

	def __post_init__(self):
		if not self.lhs:
			raise GrammarError("The left side of a production must not be empty (right side: " + repr(self.rhs) + ")")

	def is_epsilon(self) -> bool:
		return not self.rhs

	def to_code(self) -> str:
		return " ".join(self.lhs) + " -> " + (" ".join(self.rhs) if self.rhs else "ε")


@dataclass(frozen=True)
class Grammar:
	"""
	An unrestricted (type-0) grammar. Grammars are immutable: once built, the same object can be shared by any number of searches.
	"""

	terminals: frozenset[Symbol]
	nonterminals: frozenset[Symbol]
	start: Symbol
	productions: tuple[Production, ...]

	def __post_init__(self):
		overlap = self.terminals & self.nonterminals
		if overlap:
			raise GrammarError("Symbols declared both as terminals and nonterminals: " + ", ".join(sorted(overlap)))

		if self.start not in self.nonterminals:
			raise GrammarError("The start symbol " + repr(self.start) + " is not a nonterminal")

		for production in self.productions:
			for symbol in production.lhs + production.rhs:
				if symbol not in self.terminals and symbol not in self.nonterminals:
					raise GrammarError("Unknown symbol " + repr(symbol) + " in production `" + production.to_code() + "'")

	@classmethod
	def create(cls, terminals: AbstractSet[Symbol], nonterminals: AbstractSet[Symbol], start: Symbol, productions: Iterable[Production]) -> "Grammar":
		"""
		Builds a grammar, adding the start symbol to the nonterminals if it is not declared there.
		"""
		return cls(frozenset(terminals), frozenset(nonterminals) | {start}, start, tuple(productions))

	def is_terminal(self, symbol: Symbol) -> bool:
		return symbol in self.terminals

	def is_terminal_form(self, form: Form) -> bool:
		return all(symbol in self.terminals for symbol in form)

	def terminal_length(self, form: Form) -> int:
		"""
		Returns the total length in bytes (UTF-8) of the terminals of the form.
		"""
		return sum(len(symbol.encode()) for symbol in form if symbol in self.terminals)

	def spell(self, form: Form) -> str:
		return "".join(form)

	def classify(self) -> GrammarClass:
		"""
		Returns the most restrictive class in the Chomsky hierarchy the rules of this grammar fit in.
		"""
		def single_nonterminal(production: Production):
			return len(production.lhs) == 1 and production.lhs[0] in self.nonterminals

		def right_linear(production: Production):
			rhs = production.rhs
			return (
				len(rhs) == 0
				or len(rhs) == 1 and rhs[0] in self.terminals
				or len(rhs) == 2 and rhs[0] in self.terminals and rhs[1] in self.nonterminals
			)

		if all(single_nonterminal(p) and right_linear(p) for p in self.productions):
			return "regular"

		if all(single_nonterminal(p) for p in self.productions):
			return "context-free"

		if all(len(p.lhs) <= len(p.rhs) for p in self.productions):
			return "context-sensitive"

		return "unrestricted"

	def print(self):
		print("terminals:", " ".join(sorted(self.terminals)))
		print("nonterminals:", " ".join(sorted(self.nonterminals)))
		print("start:", self.start)
		for production in self.productions:
			print(" " + production.to_code())
