# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file, and the second command writes to an output file. A call of the
form

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

works like this shell line:

```
< infile cmd1 args | cmd2 args > outfile
```

## Installation

```
pip install .
```

## Command line usage

```
pipex input.txt "grep error" "wc -l" count.txt
```

The command takes exactly four arguments. With any other number it prints
`./pipex infile cmd cmd outfile` to standard error and exits with status 0.

Each command is split on spaces. No shell quoting, globbing or variable
expansion is done. The program name is looked up in the directories listed
in `PATH`. If it is not found there and holds no `/`, it is tried relative to
the current directory. If a command cannot be started, the message
`pipex: command not found: <name>` goes to standard error.

The output file is created with mode `0777` (subject to the umask) if it is
missing, and emptied if it exists. The input file is opened read-only.

- If the input file cannot be opened, the first command is not run and the
  second command reads empty input.
- If the output file cannot be created or opened, the second command is not
  run; the first command still runs, with its output discarded.

The exit status is that of the second command. A command killed by a signal
gives `128 + signal number`. If the second command did not run, the status
is 0.

## Library usage

```python
from pipex.runner import UsageError, open_file, run_pipeline, main
from pipex.environment import find_executable, lookup_env

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt",
                      env={"PATH": "/usr/bin:/bin"})

lookup_env("PATH", {"PATH": "/usr/bin"})             # "/usr/bin"
lookup_env("HOME", ["HOME=/home/user", "PATH=/bin"])  # "/home/user"
find_executable("ls -l", {"PATH": "/usr/bin:/bin"})   # e.g. "/usr/bin/ls"
```

- `run_pipeline(infile, first_command, second_command, outfile, env=None)`
  runs the pipeline and returns the exit status described above. With
  `env=None` the current process environment is used.
- `main(argv=None)` is the command entry point; it takes the four operands
  (defaulting to `sys.argv[1:]`) and returns the exit status.
- `open_file(path, for_output)` opens a file for binary reading, or creates
  and truncates it for binary writing.
- `UsageError` is raised internally for a wrong number of operands; `main`
  reports it and returns 0.
- `lookup_env(name, env)` accepts a mapping or a sequence of `NAME=value`
  entries and returns the value, or `None`.
- `find_executable(command, env)` returns the full path of the first
  executable match for the command's first word in `PATH`, or `command`
  unchanged when there is none.

The `pipex.text` module has string helpers:

- `split_words(text, sep)`: split on a single character, dropping empty pieces.
- `parse_int(text)`: read a leading integer like `atoi`, wrapping as a signed
  32-bit value.
- `format_int(number)`: decimal text of a signed 32-bit integer; raises
  `ValueError` outside that range.
- `trim(text, chars)`: strip the given characters from both ends.
- `find_within(haystack, needle, limit)`: index of `needle` within the first
  `limit` characters, 0 for an empty needle, otherwise `None`.
- `compare_prefix(first, second, limit)`: compare at most `limit` characters
  like `strncmp`.

## Limitations

Only two commands can be joined, and there is no here-document mode. Commands
are not run through a shell, so quoted arguments containing spaces are not
supported.

## Running the tests

```
pip install ".[test]"
pytest
```