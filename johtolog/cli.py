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

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .grammar import GrammarError
from .loader import EPSILON, load_input
from .search import DEFAULT_MAX_STATES, SearchResult, check_words


console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)


def setup_logging(debug: bool):
	logging.basicConfig(
		level=logging.DEBUG if debug else logging.WARNING,
		format="%(message)s",
		datefmt="[%X]",
		handlers=[RichHandler(console=Console(stderr=True))],
	)


def format_verdict(word: str, result: SearchResult) -> str:
	prefix = f"Word \"{escape(word)}\": "
	if result.verdict == "found":
		return prefix + "[b green]derivable[/b green]"

	elif result.verdict == "limit-reached":
		return prefix + "[b red]not derivable[/b red] [yellow](search limit reached)[/yellow]"

	else:
		return prefix + "[b red]not derivable[/b red]"


def main(argv: list[str] | None = None) -> int:
	argparser = argparse.ArgumentParser(prog="johtolog", description="Checks which words can be derived from an unrestricted grammar.")
	argparser.add_argument("-d", "--debug", action="store_true", help="print the grammar and log the progress of each search")
	argparser.add_argument("--max-states", type=int, default=DEFAULT_MAX_STATES, help="stop a search after this many distinct sentential forms (default: %(default)s)")
	argparser.add_argument("--epsilon", default=EPSILON, help="the right side that denotes the empty string (default: %(default)s)")
	argparser.add_argument("-j", "--jobs", type=int, default=1, help="number of words to check in parallel")
	argparser.add_argument("file", nargs="?", default="input.txt", help="input file (default: %(default)s)")
	args = argparser.parse_args(argv)

	setup_logging(args.debug)

	try:
		grammar, words = load_input(args.file, args.epsilon)

	except OSError as e:
		error_console.print(f"[b red]Cannot read {escape(args.file)}:[/b red] {escape(str(e))}")
		return 1

	except GrammarError as e:
		error_console.print(f"[b red]Error:[/b red] {escape(str(e))}")
		return 1

	if args.debug:
		grammar.print()
		print("class:", grammar.classify())

	for word, result in zip(words, check_words(grammar, words, args.max_states, args.jobs)):
		console.print(format_verdict(word, result))

	return 0
