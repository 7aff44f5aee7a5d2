# pipex

`pipex` runs two commands connected by a pipe. The first command reads its
input from a file, and the second command writes its output to a file. It
behaves like this shell line:

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

The command takes exactly four arguments. With any other number it prints
`ERROR : wrong arg number` on standard error and exits with status 1.

For example, this counts the lines of `input.txt` that contain `error`:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

### How commands are run

- Each command string is split on spaces, and runs of spaces are collapsed.
  There is no quoting and no shell expansion.
- The first word is checked as a path relative to the working directory. If
  that path is executable, it is run as given. If not, each directory listed
  in `PATH` is tried in turn.
- When a command cannot be found, a message is printed on standard error and
  that side of the pipe fails:
  - For most commands the message is `<command string> : Command not found`.
    A command string that starts with a space gets the same message.
  - For a command string that starts with `/`, the message is the system
    error text instead, for example `/bin/nope: No such file or directory`.
- A command string that holds no words fails without a message.
- The output file is opened before either command starts. It is created or
  truncated with mode `0666`, less the umask. If it cannot be opened, the
  error is printed as `outfile: <reason>`.
- If the input file cannot be opened, the error is printed as
  `infile: <reason>` and the first command is not started. The second command
  still runs, with empty input, as it would in the shell.
- The exit status is the status of the second command. It is 1 if the second
  command could not be started, and 128 plus the signal number if a signal
  killed it.

## Library use

```python
from pipex.runner import parse_command, run_pipeline

parse_command("grep -i  error")        # ['grep', '-i', 'error']
status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", env=None)
```

- `run_pipeline(infile, first, second, outfile, env=None)` returns the exit
  status described above. When `env` is `None`, it uses `os.environ`.
- `parse_command(text)` raises `CommandNotFound` for text that starts with a
  space. It raises `PipexError` for text that holds no words.
- `pipex.runner.main(argv=None)` is the command-line entry point. It returns
  the exit status.

`pipex.resolve` finds executables:

- `path_directories(environ)` returns the non-empty entries of `PATH`, or
  `None` when there are none.
- `find_executable(command, directories)` returns the path to run, or `None`.

### Helper modules

- `pipex.strtools`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp` and
  `strjoin`.
- `pipex.chars`: `atoi`, `itoa`, `isalpha`, `isalnum`, `isascii`, `isdigit`,
  `isprint`, `tolower` and `toupper`.
- `pipex.fmt`: `format_message`, `fprintf` and `printf`. They understand
  `%c %s %p %d %i %u %x %X %%`. `%s` with `None` prints `(null)`, and `%p` with
  a null value prints `(nil)`.

### Errors

Errors are subclasses of `pipex.errors.PipexError`, and each carries an
`exit_status` of 1:

- `UsageError`
- `CommandNotFound`
- `ExecError`, which is raised when starting a process fails. Its message has
  the form `Execve: <reason>`.

## What it does not do

- It joins exactly two commands. It has no support for longer pipelines.
- It has no here-document input and no append mode for the output file.
- It does not quote, escape or expand command strings.

## Running the tests

```sh
pip install ".[test]"
pytest
```