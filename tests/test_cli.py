import pytest

from johtolog.cli import main


@pytest.fixture
def input_file(tmp_path):
	def write(text):
		path = tmp_path / "input.txt"
		path.write_text(text, encoding="utf-8")
		return str(path)

	return write


def test_verdicts(input_file, capsys):
	path = input_file("2 a b 1 S S 2 S->aSb S->e 2 aabb aab")
	assert main([path]) == 0
	lines = capsys.readouterr().out.splitlines()
	assert lines == [
		"Word \"aabb\": derivable",
		"Word \"aab\": not derivable",
	]


def test_search_limit_is_reported(input_file, capsys):
	path = input_file("1 a 1 S S 1 S->SS 1 a")
	assert main(["--max-states", "10", path]) == 0
	out = capsys.readouterr().out
	assert "Word \"a\": not derivable (search limit reached)" in out


def test_loading_error_aborts(input_file, capsys):
	path = input_file("2 a b 1 S S 1 S->aXb 1 ab")
	assert main([path]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert "Xb" in captured.err


def test_missing_file(tmp_path, capsys):
	assert main([str(tmp_path / "missing.txt")]) == 1
	assert "Cannot read" in capsys.readouterr().err


def test_debug_prints_grammar(input_file, capsys):
	path = input_file("2 a b 1 S S 2 S->aSb S->e 1 ab")
	assert main(["-d", "--epsilon", "e", path]) == 0
	out = capsys.readouterr().out
	assert "S -> a S b" in out
	assert "class: context-free" in out
	assert "Word \"ab\": derivable" in out


def test_long_words_stay_on_one_line(input_file, capsys):
	long_word = "ab" * 60
	path = input_file("2 a b 1 S S 2 S->aSb S->e 2 " + long_word + " " + "a" * 60 + "b" * 60)
	assert main([path]) == 0
	lines = capsys.readouterr().out.splitlines()
	assert lines == [
		"Word \"" + long_word + "\": not derivable",
		"Word \"" + "a" * 60 + "b" * 60 + "\": derivable",
	]


def test_file_that_is_not_utf8(tmp_path, capsys):
	path = tmp_path / "input.txt"
	path.write_bytes(b"1 \xff 1 S S 0 0")
	assert main([str(path)]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert "UTF-8" in captured.err
