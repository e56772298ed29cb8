# minishell

A small interactive shell. It runs a single command or a pipeline of
commands, supports `<`, `>` and `>>` redirections, and provides the builtins
`echo`, `cd`, `pwd`, `export`, `unset` and `env`. Any other command is looked
up on `PATH` (or taken as given when it starts with `./` or `/`) and run as a
child process with the shell's environment.

## Installing

```
pip install .
```

## Running

```
minishell
```

The shell prints the environment it starts with (`Key : ...` / `Value : ...`),
then asks for each command step by step:

1. the command name (for example `ls`);
2. its arguments, one per prompt; an empty line ends the list;
3. an optional redirection operator (`<`, `>`, `>>` or `<<`) and its target;
   any other operator is rejected with `Invalid redirection operator.`;
4. whether to pipe into another command (`y` continues, anything else runs
   what has been entered).

Entering `exit` as the first command name leaves the shell, and so does end of
input (Ctrl+D).

### How commands behave

- Output of each stage of a pipeline is collected and passed as input to the
  next; the exit status of the last command is returned.
- `>` truncates and `>>` appends to the target file; `<` feeds the file to the
  command. A file that cannot be opened is reported on standard error.
- Builtins run on a copy of the environment and working directory, so `cd`,
  `export` and `unset` do not change the running shell.
- A command name is recognised as a builtin when it starts with a builtin's
  name.
- `echo` writes its arguments separated by spaces. A first argument starting
  with `-n` is dropped and the output then ends with a newline; without it no
  newline is written.
- `export` with no arguments lists the variables as `declare -x` lines;
  invalid names are reported as `not a valid identifier`, as in `unset`.

## Using it as a library

The parsing pieces can be used on their own:

- `minishell.environment` holds `Environment` and `EnvVar`, built from
  `KEY=VALUE` strings with `fill_env`, along with `is_valid_identifier` and
  `split_key_value`.
- `minishell.expand` expands `$NAME` and `$?` with `expand` (which also
  strips quotes and leaves single-quoted text alone) and `expand_heredoc`.
  `$?` gives the exit status passed in (0 by default) and `$$` becomes `@`.
  `detect_quotes` tells whether a string holds quotes.
- `minishell.lexer` turns a command line into `Token` objects with `tokenize`;
  `add_space_inputs`, `split_words` and `define_token_type` are the steps it
  uses.
- `minishell.syntax` reports malformed input by raising `ShellSyntaxError`
  from `check_unclosed_quotes` and `check_unexpected_token`.
- `minishell.paths` resolves a command on `PATH` with `get_cmd_path` and
  `configure_path`, which raises `CommandNotFound`.
- `minishell.shell_builtins` provides the builtins and `run_builtin`.
- `minishell.executor` runs `Command` objects with `execute_command`,
  `run_single` and `run_pipeline`.

## What it does not do

- The interactive shell does not read a typed command line: it asks for the
  command, arguments and redirection separately, and the lexer, expansion and
  syntax checks are not applied to what is entered there.
- Here-documents are not read: `<<` is accepted at the prompt, but its target
  is then opened as an input file like `<`.
- There is no `exit` builtin with a status, no signal handling, no line
  editing and no history.

## Running the tests

```
pip install ".[test]"
pytest
```