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

from .grammar import Symbol as Symbol
from .grammar import Form as Form

from .grammar import Grammar as Grammar
from .grammar import Production as Production
from .grammar import GrammarError as GrammarError

from .tokenizer import Tokenizer as Tokenizer
from .tokenizer import TokenizationError as TokenizationError
from .tokenizer import tokenize as tokenize

from .search import search as search
from .search import is_derivable as is_derivable
from .search import check_words as check_words
from .search import SearchResult as SearchResult
from .search import DEFAULT_MAX_STATES as DEFAULT_MAX_STATES

from .loader import build_grammar as build_grammar
from .loader import load_input as load_input
from .loader import parse_input as parse_input
from .loader import GrammarFormatError as GrammarFormatError
