# pipex

`pipex` connects two commands with a pipe. The first command reads its
input from a file, and the second command writes its output to another
file. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are needed. With any other number, `pipex` does
nothing and exits with status 1. With four arguments it runs both
commands at the same time, waits for both, and exits with status 0. Each
command's own failures are reported on standard error. They do not change
the exit status of `pipex`.

Each command is split on spaces. Empty words are dropped, and there is no
quoting or escaping. The first word is looked up in the directories listed
in `PATH`. The first directory that holds a file of that name wins. If
that file is not executable, the command fails with "Permission denied".
It does not go on to the later directories.

A command is used directly as a file name, without a `PATH` lookup, in
these cases:

- it starts with `./` or `/`,
- it is empty,
- the environment has no `PATH` variable.

In that case the whole command string is checked as a file name,
arguments included. So `"/bin/ls -l"` is reported as not found, while
`"/bin/ls"` runs.

The output file is opened for writing with mode `0644`. It is created if
it does not exist and emptied if it does.

These failures are reported on standard error:

| Situation | Message | Status of that stage |
|---|---|---|
| Input or output file cannot be opened | `<name>: <reason>` | 1 |
| Command not found | `command not found: <name>` | 127 |
| Command found but not executable | `Permission denied: <name>` | 126 |
| Program could not be started | (no message) | 1 |

If one stage fails, the other stage still runs.

## Using it from Python

```python
from pipex.cli import run_pipeline

statuses = run_pipeline(
    "in.txt", "grep foo", "wc -l", "out.txt", env={"PATH": "/usr/bin:/bin"}
)
```

`run_pipeline(infile, first, second, outfile, env=None)` returns a pair
with the exit status of each stage. If `env` is left out, the current
process environment is used. `main(argv=None)` is the command-line entry
point. It returns the status described above.

`pipex.resolve` holds the lookup logic on its own:

- `get_path(env)` returns the `PATH` value of a mapping, or `None`.
- `is_direct_path(cmd, path, env)` tells whether a command is used as a
  file name rather than looked up.
- `find_in_path(name, directories)` returns the first `directory/name`
  that exists, or `None`.
- `check_executable(path)` returns the path if it is an executable file.
  Otherwise it raises an error.
- `resolve_command(cmd, env)` turns a command string into a
  `ResolvedCommand`, which holds `program` and `argv`.

Lookup failures raise `CommandNotFoundError` (exit status 127) or
`CommandPermissionError` (exit status 126). Both are subclasses of
`CommandError` and carry `name` and `exit_status`.

## Helper modules

- `pipex.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case conversion (`to_lower`,
  `to_upper`), and 32-bit `atoi` / `itoa`.
- `pipex.memory`: operations on byte buffers: `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`.
- `pipex.textops`: string helpers: `split`, `strchr`, `strrchr`,
  `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strncmp`,
  `strnstr`, `strtrim`, `substr`. Positions are returned as indices, or
  `None` where nothing is found.
- `pipex.linked`: `LinkedList`, a singly linked list of `Node` cells. It
  supports `add_front`, `add_back`, `last`, `pop_front`, `clear`,
  `for_each`, `map`, `len()` and iteration.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_number`,
  which write to a text stream (standard output by default).

## Limits

`pipex` runs exactly two commands. It does not support more stages,
here-documents or appending to the output file. Commands are not parsed
by a shell, so quotes, variables and globs are passed through literally.

## Running the tests

```sh
pip install ".[test]"
pytest
```