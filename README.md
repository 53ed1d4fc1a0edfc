# pipex

`pipex` runs a chain of commands the way a shell pipeline with redirections
does. The first command reads its standard input from a file, each command's
output feeds the next command, and the output of the last command is written
to a file.

```
pipex infile "cmd1 args" "cmd2 args" ... outfile
```

behaves like

```
< infile cmd1 args | cmd2 args | ... > outfile
```

## Installation

```
pip install .
```

This installs the `pipex` command. The same entry point can also be run as
`python -m pipex.pipeline`.

## Usage

```
pipex input.txt "grep foo" "wc -l" result.txt
```

Behaviour:

- At least two commands are required, so the command line must hold at least
  four arguments. With fewer, `Invalid number of arguments.` is printed to
  standard error and the exit status is 1.
- Each command string is split on space characters; empty fields are
  dropped. Quotes and other shell syntax are not interpreted.
- A command name that is executable as given (for example `/bin/cat` or
  `./script`) is run directly. Otherwise each directory of `PATH` is tried in
  order.
- If the environment has no `PATH` entry, `Path not found.` is printed and
  only commands executable as given can run.
- A command that cannot be found prints `Command not found.`; its stage
  counts as exit status 127.
- If the input file cannot be opened, `Input: <reason>` is printed. The first
  command is then not started and counts as exit status 1; the rest of the
  pipeline still runs.
- The output file is created if missing and truncated if present, with mode
  `0644`. If it cannot be opened, `Output: <reason>` is printed and the exit
  status is 1.
- The exit status of `pipex` is the exit status of the last command. A last
  command ended by a signal counts as 0.

## Library use

```python
from pipex.pipeline import run_pipeline, PipexError

try:
    status = run_pipeline("input.txt", ["grep foo", "wc -l"], "result.txt")
except PipexError as exc:
    print(exc, exc.status)
```

`run_pipeline(infile, commands, outfile, env=None)` returns the exit status
of the last command. `env` is a mapping used as the commands' environment and
for the `PATH` lookup; it defaults to the current process environment.
`PipexError` is raised, with a `status` attribute, when fewer than two
commands are given, a pipe cannot be created, or the output file cannot be
opened.

Command lookup is available on its own:

- `pipex.paths.get_path(env)` returns the value of the first environment
  entry starting with `PATH`, from a mapping or a list of `NAME=value`
  strings, or None.
- `pipex.paths.find_command(path_dirs, cmd)` returns the executable path for
  `cmd`, or None.

## Helper modules

The package also carries small helpers with C-library semantics:

- `pipex.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower` on ASCII characters or code points.
- `pipex.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `strjoin`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`.
  Text ends at the first NUL character; searches return an index or None.
- `pipex.numbers`: `atoi` (wraps to a signed 32-bit value), `itoa` (raises
  `OverflowError` outside the 32-bit range), `num_len`.
- `pipex.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc` on byte buffers.
- `pipex.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  to raw file descriptors.
- `pipex.linked`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `pop_front`, `clear`, `iterate` and `map`.

## Running the tests

```
pip install .[test]
pytest
```