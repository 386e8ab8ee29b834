# pipeline-runner

Run a chain of commands with the first reading from an input file and the
last writing to an output file. Each command's output goes to the next
command's input, the same way `< infile cmd1 | cmd2 | ... > outfile` works
in a shell.

Requires a POSIX system and Python 3.10 or later.

## Installation

```
pip install .
```

## Command line

```
pipeline-runner infile "cmd1 args" "cmd2 args" ... outfile
```

For example:

```
pipeline-runner input.txt "grep error" "wc -l" count.txt
```

How the command behaves:

- Every command string is split on spaces into a program name and its
  arguments. Quotes are not interpreted; an empty command is an error.
- A name that starts with `/`, `./` or `../` is first tried as given. After
  that, and for every other name, each directory of the `PATH` environment
  variable is tried in order. The first executable file found is run.
- Commands are started with an empty environment.
- The output file is opened before the input file, and is created (mode
  `0777`, subject to the umask) or truncated even when nothing ends up
  running.
- When the input file is missing or cannot be read, or the output file
  cannot be opened or written, an error message goes to standard error and
  the command at that end of the chain does not start. The other commands
  still run.
- A command that cannot be found is skipped silently.
- The exit status is 1 when no arguments, or too few, are given, or when a
  command string is empty; otherwise it is 0, whatever the commands return.

## Library use

```python
from pipeline_runner.pipeline import Pipeline

pipeline = Pipeline.from_argv(
    ["input.txt", "sort", "uniq -c", "out.txt"],
    {"PATH": "/usr/bin:/bin"},
)
statuses = pipeline.run()
```

`Pipeline.from_argv` takes `[infile, command..., outfile]` (without a
program name) and an optional environment mapping, defaulting to
`os.environ`; it raises `PipexError` for missing or empty arguments.
`Pipeline.run()` waits for every command and returns their exit statuses in
order, with 1 for a command that could not be started.

`pipeline_runner.pipeline` also provides `search_paths`, `join_path_command`,
`is_explicit_path`, `resolve_command`, `parse_commands` and `main`.

The package also contains the helpers the runner is built from:

- `pipeline_runner.splitting`: `split`, which cuts on a separator and drops
  empty words, the quote-aware `split_command`, and `find_quote_end`.
- `pipeline_runner.textops`: string and number helpers `atoi` (lenient,
  32-bit wrapping), `atoi_ll` (strict, 64-bit, raises `ValueError`), `itoa`,
  `str_comp`, `strtrim`, `strnstr`, `substr`, `strncmp` and `strjoin`.
- `pipeline_runner.linereader`: `LineReader`, which reads a file descriptor
  in fixed-size chunks (3 bytes by default) and returns one line of bytes at
  a time, keeping the newline; it can also be iterated.
- `pipeline_runner.redirection`: `open_io_files`, `check_infile`,
  `check_outfile`, the `IOFiles` record (usable as a context manager) and
  `PipexError`.

## What it does not do

The runner is not a shell: it has no here-document input, no appending
output, no quoting, globbing or variable expansion in command strings, and
it does not report the commands' exit statuses through its own exit status.

## Running the tests

```
pip install ".[test]"
pytest
```