import os

import rich

import johtolog


def main():
	ok = 0
	total = 0
	path = os.path.dirname(os.path.realpath(__file__))
	grammars: dict[str, johtolog.Grammar] = {}
	with open(os.path.join(path, "cases.tsv")) as file:
		for line in file:
			line = line.strip()
			if line == "":
				continue

			file_name, word, gold = line.split("\t")
			if file_name not in grammars:
				grammars[file_name] = johtolog.load_input(os.path.join(path, file_name)).grammar

			result = johtolog.search(word, grammars[file_name])

			rich.print("[b]===")
			print(file_name, word)
			print("->", result.verdict, f"({result.states} states)")

			if result.verdict == gold:
				rich.print("[b green] OK")
				ok += 1
			else:
				rich.print(f"[b red] FAIL[/b red] (expected {gold})")

			total += 1

	error = total - ok
	if error == 0:
		rich.print(f"[b green]{ok} ok[/b green] ({total} total)")
	else:
		rich.print(f"[b green]{ok} ok[/b green], [b red]{error} failed[/b red] ({total} total)")


if __name__ == "__main__":
	main()
