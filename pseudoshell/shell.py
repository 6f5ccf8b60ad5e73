"""Batch and interactive front ends that run the shell's commands."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .commands import (
    CommandError,
    change_dir,
    copy_file,
    delete_file,
    display_file,
    list_dir,
    make_dir,
    move_file,
    show_current_dir,
)
from .parser import tokenize

__all__ = ["PROMPT", "Shell", "file_mode", "interactive_mode", "main"]

PROMPT = ">>> "
DEFAULT_OUTPUT = "output.txt"

_UNRECOGNIZED = "Error: Unrecognized command\n"
_TOO_MANY = "Error: too many arguemnts!"
_USAGE = "File mode usage: pseudo-shell -f <filename>\n"
_NO_MESSAGE = ""
_LIST_EXTRA = "Error: ls doesn't take arguments\n"
_CURRENT_DIR_EXTRA = "Error: pwd\npwd doesn't take arguments\n"

# Number of arguments each command consumes in batch mode; "cat" is
# handled on its own because it reads its argument without consuming it.
_BATCH_ARITY = {"cp": 2, "mv": 2, "mkdir": 1, "cd": 1, "rm": 1, "ls": 0, "pwd": 0}


@dataclass(frozen=True)
class _Spec:
    arity: int
    missing: str
    extra: str


_INTERACTIVE = {
    "cp": _Spec(
        2,
        "Error: One of the file arguments was NULL\nUsage: cp <filepath> <filepath>",
        _TOO_MANY,
    ),
    "mkdir": _Spec(
        1,
        "Error: Directory argument was NULL\nUsage: mkdir <directory name>",
        _TOO_MANY,
    ),
    "ls": _Spec(0, _NO_MESSAGE, _LIST_EXTRA),
    "pwd": _Spec(0, _NO_MESSAGE, _CURRENT_DIR_EXTRA),
    "cd": _Spec(
        1,
        "Error: Directory argument was NULL\nUsage: cd <filepath>",
        _TOO_MANY,
    ),
    "mv": _Spec(
        2,
        "Error: One of the arguments was NULL\nUsage: mv <filepath> <filepath>",
        _TOO_MANY,
    ),
    "rm": _Spec(1, "Error: File argument was NULL\nUsage: rm <filepath>", _TOO_MANY),
    "cat": _Spec(1, "Error: File argument was NULL\nUsage: cat <filepath>", _TOO_MANY),
}


class Shell:
    """Runs command lines, writing results to ``out`` and failures to ``err``."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self._actions: dict[str, Callable[..., None]] = {
            "ls": lambda: list_dir(self.out),
            "pwd": lambda: show_current_dir(self.out),
            "mkdir": make_dir,
            "cd": change_dir,
            "cp": copy_file,
            "mv": move_file,
            "rm": delete_file,
            "cat": lambda filename: display_file(filename, self.out),
        }

    def _call(self, name: str, args: Sequence[str]) -> None:
        try:
            self._actions[name](*args)
        except CommandError as exc:
            self.err.write(f"{exc}\n")

    def run_batch_line(self, line: str) -> None:
        """Run one line of a command file.

        Commands are separated by ``;``; within a segment every word is read
        as a command followed by its arguments. ``cat`` does not consume its
        argument, so the file name is then read as a command as well.
        """
        for segment in tokenize(line, ";"):
            words = deque(tokenize(segment, " "))
            while words:
                name = words.popleft()
                if name == "cat":
                    if words:
                        self._call("cat", [words[0]])
                    continue
                arity = _BATCH_ARITY.get(name)
                if arity is None:
                    self.out.write(_UNRECOGNIZED)
                    continue
                if len(words) < arity:
                    self.err.write(f"Error: {name} is missing an argument\n")
                    break
                args = [words.popleft() for _ in range(arity)]
                self._call(name, args)

    def run_interactive_line(self, line: str) -> bool:
        """Run one line typed at the prompt.

        Each ``;`` segment holds one command and its arguments; a usage
        error ends only its own segment. Returns ``False`` once ``exit``
        is reached, ``True`` otherwise.
        """
        for segment in tokenize(line, ";"):
            words = tokenize(segment, " ")
            if not words:
                continue
            name, *args = words
            if name == "exit":
                return False
            spec = _INTERACTIVE.get(name)
            if spec is None:
                self.out.write(_UNRECOGNIZED)
                continue
            if len(args) < spec.arity:
                self.out.write(spec.missing)
                continue
            if len(args) > spec.arity:
                self.out.write(spec.extra)
                continue
            self._call(name, args)
        return True


def file_mode(source_path: str, output_path: str = DEFAULT_OUTPUT) -> int:
    """Run every line of ``source_path``, writing results to ``output_path``.

    Raises ``OSError`` when either file cannot be opened.
    """
    with open(source_path, encoding="utf-8") as source:
        with open(output_path, "w", encoding="utf-8") as out:
            shell = Shell(out, sys.stderr)
            for line in source:
                shell.run_batch_line(line)
            out.write("\n")
    return 0


def interactive_mode(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Prompt for and run lines from ``stdin`` until ``exit`` or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    shell = Shell(stdout, stderr)
    stdout.write(PROMPT)
    stdout.flush()
    for line in stdin:
        if not shell.run_interactive_line(line):
            return 0
        stdout.write(PROMPT)
        stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell: interactive with no arguments, batch with ``-f FILE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return interactive_mode()
    if args[0] != "-f":
        sys.stderr.write(_USAGE)
        return 0
    if len(args) < 2:
        sys.stderr.write(_USAGE)
        return 1
    try:
        return file_mode(args[1])
    except OSError as exc:
        sys.stderr.write(f"Error opening file: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())