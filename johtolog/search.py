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

import functools
import logging
import multiprocessing
from collections import deque
from typing import Iterator, Literal, NamedTuple, Sequence

from .grammar import Form, Grammar, Production


log = logging.getLogger(__name__)

DEFAULT_MAX_STATES = 2_000_000
"""
The number of distinct sentential forms a single search may visit before it gives up.
"""


type Verdict = Literal["found", "exhausted", "limit-reached"]


class SearchResult(NamedTuple):
	verdict: Verdict
	"""
	`found` if the target was derived, `exhausted` if every reachable form was explored without finding it,
	and `limit-reached` if the search was stopped by the state limit.
	"""

	states: int
	"""
	The number of distinct sentential forms seen during the search.
	"""

	@property
	def derivable(self) -> bool:
		return self.verdict == "found"


def matches_at(form: Form, position: int, lhs: Form) -> bool:
	return form[position:position+len(lhs)] == lhs


def rewrite(form: Form, position: int, production: Production) -> Form:
	"""
	Replaces the occurrence of the left side of `production` at `position` with its right side.
	"""
	return form[:position] + production.rhs + form[position+len(production.lhs):]


def successors(form: Form, grammar: Grammar) -> Iterator[Form]:
	"""
	Yields every form reachable from `form` with one rule application, in rule order and then in position order.
	The same form may be yielded more than once.
	"""
	for production in grammar.productions:
		for position in range(len(form) - len(production.lhs) + 1):
			if matches_at(form, position, production.lhs):
				yield rewrite(form, position, production)


def search(target: str, grammar: Grammar, max_states: int = DEFAULT_MAX_STATES) -> SearchResult:
	"""
	Searches breadth-first for a derivation of `target` from the start symbol of `grammar`.

	Membership is undecidable for unrestricted grammars, so the search is bounded. Forms with more terminal bytes
	than the target are pruned, and after `max_states` distinct forms the search stops with `limit-reached`.
	A negative answer therefore means "not found", which is not necessarily "not derivable".
	"""
	target_length = len(target.encode())
	start: Form = (grammar.start,)
	queue = deque([start])
	seen = {start}
	log.debug("searching for %r (max %d states)", target, max_states)
	while queue:
		form = queue.popleft()
		if grammar.terminal_length(form) > target_length:
			continue

		if grammar.is_terminal_form(form):
			if grammar.spell(form) == target:
				log.debug("found %r after %d states", target, len(seen))
				return SearchResult("found", len(seen))

			continue

		for new_form in successors(form, grammar):
			if grammar.terminal_length(new_form) > target_length or new_form in seen:
				continue

			seen.add(new_form)
			queue.append(new_form)
			if len(seen) > max_states:
				log.warning("state limit reached while searching for %r: %d states seen, stopping", target, len(seen))
				return SearchResult("limit-reached", len(seen))

	log.debug("%r not found, all %d reachable states explored", target, len(seen))
	return SearchResult("exhausted", len(seen))


def is_derivable(target: str, grammar: Grammar, max_states: int = DEFAULT_MAX_STATES) -> bool:
	return search(target, grammar, max_states).derivable


def check_words(grammar: Grammar, words: Sequence[str], max_states: int = DEFAULT_MAX_STATES, jobs: int = 1) -> list[SearchResult]:
	"""
	Searches each word independently. With `jobs > 1` the searches run in a pool of worker processes.
	The results are in the same order as the words.
	"""
	search_word = functools.partial(search, grammar=grammar, max_states=max_states)
	if jobs <= 1 or len(words) <= 1:
		return [search_word(word) for word in words]

	with multiprocessing.Pool(min(jobs, len(words))) as pool:
		return pool.map(search_word, words)
