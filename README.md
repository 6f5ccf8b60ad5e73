# pseudoshell

A small shell with eight built-in file commands. It runs in one of two
ways. Interactively, it reads commands from standard input. In batch
mode, it reads a file of commands and writes the results to
`output.txt`.

## Install

```
pip install .
```

## Commands

| Command              | Effect                                                       |
|----------------------|--------------------------------------------------------------|
| `ls`                 | list the current directory                                   |
| `pwd`                | print the current directory                                  |
| `mkdir <name>`       | create a directory inside the current directory              |
| `cd <path>`          | change directory                                             |
| `cp <src> <dst>`     | copy a file; if `dst` is a directory, copy into it           |
| `mv <src> <dst>`     | copy, then delete the source                                 |
| `rm <path>`          | delete a file                                                |
| `cat <path>`         | print a file                                                 |
| `exit`               | leave interactive mode                                       |

Separate commands with `;` to put several on one line. Words are
separated by spaces.

```
mkdir out; cd out; pwd
```

Some details of how the commands behave:

- `ls` prints `. .. ` first. It then prints the entries that do not
  start with a dot, separated by single spaces and in the order the
  directory gives them, and ends with a newline.
- `cp` opens the target without truncating it. If an existing target is
  longer than the source, the bytes past the copied part stay in place.
- `mv` removes the source even when the copy fails.
- `cat` prints nothing for a file it cannot open.

When a command fails (for example `cd` into a missing directory), the
shell writes the reason to standard error and carries on.

## Interactive mode

```
pseudo-shell
```

The prompt is `>>> `. Each `;` segment holds one command and its
arguments. If the number of arguments is wrong, the shell prints a usage
message for that segment and then runs the next one. An unknown command
prints `Error: Unrecognized command`. `exit`, or the end of input, ends
the session.

## Batch mode

```
pseudo-shell -f commands.txt
```

Each line of `commands.txt` runs in turn. Everything the commands print
goes to `output.txt` in the current directory, and a final newline is
added at the end.

Within a segment, every word is read as a command followed by the
arguments it takes, so one segment can hold several commands. `cat`
does not consume its argument. That file name is then read as a command
as well, which usually gives `Error: Unrecognized command` in the
output.

If a command is missing an argument, the shell reports it on standard
error and skips the rest of the segment.

If the first argument is anything other than `-f`, the shell prints this
usage line to standard error:

```
File mode usage: pseudo-shell -f <filename>
```

It then exits with status 0. If `-f` has no file name, or a file cannot
be opened, it exits with status 1.

## From Python

```python
import sys
from pseudoshell.shell import Shell, file_mode, interactive_mode
from pseudoshell.parser import tokenize, count_tokens

shell = Shell(sys.stdout, sys.stderr)
shell.run_interactive_line("mkdir demo; ls")   # returns False after "exit"
shell.run_batch_line("pwd; ls")

tokenize("cp a.txt  b.txt", " ")   # ['cp', 'a.txt', 'b.txt']
count_tokens("a;;b;", ";")         # 2
```

`file_mode(source_path, output_path="output.txt")` runs a command file.
`interactive_mode(stdin, stdout, stderr)` runs the prompt loop over any
text streams.

The file commands are in `pseudoshell.commands`:

- `list_dir`
- `show_current_dir`
- `make_dir`
- `change_dir`
- `copy_file`
- `move_file`
- `delete_file`
- `display_file`

They raise `CommandError` when they fail.

## What it does not do

This shell does not start other programs. It also has no pipes, no
redirection, no quoting, no variables and no command history. Only the
commands listed above are understood.