# mipssim

The interactive command-line layer of a MIPS simulator, in plain Python with
no third-party dependencies. It provides nested menus of typed commands, a
command history, tab completion, quote-aware word splitting and raw-terminal
line editing.

## Modules

- `mipssim.textsplit`: `split(text)` breaks a line into words. Quoted parts
  stay whole, backslash escapes are honoured and empty words are dropped.
- `mipssim.conversion`: `from_string(text, kind)` strictly converts a word.
  `kind` may be `str`, `int`, `float`, `bool`, `None`, or a C-style type name
  such as `"unsigned short"` or `"char"`. Failures raise `BadConversion`,
  which is a `ValueError`. There are also `parse_signed`, `parse_unsigned`,
  `parse_bool`, `parse_char` and `parse_float`.
- `mipssim.commands`: `Command`, `FunctionCommand` (fixed, typed parameters),
  `FreeformCommand` (all remaining words as a list), `CommandHandle`
  (enable, disable or remove an inserted command), `get_completions` and
  `type_name`.
- `mipssim.menu`: `Menu`, a command that holds sub-commands and sub-menus.
- `mipssim.session`: `Cli` (root menu, shared history storage, exit action,
  exception handler, `broadcast` to every open session), `CliSession` (feeds
  lines, prints help and the prompt, browses history, completes) and
  `InputHandler` (turns key presses into edits, commands, history moves and
  completion).
- `mipssim.terminal`: `Terminal` tracks the edited line and the cursor and
  echoes changes. `KeyType` and `Symbol` are the key and result kinds.
- `mipssim.history`: `History`, a bounded history of one session.
- `mipssim.history_storage`: `HistoryStorage` and `VolatileHistoryStorage`.
  They keep commands across sessions, up to 1000 by default.
- `mipssim.prefix`: `common_prefix(strings)`.
- `mipssim.colors`: `set_color()` and `set_no_color()` switch ANSI colouring
  of the prompt and of echoed input on and off.

## Example

```python
import io

from mipssim.menu import Menu
from mipssim.session import Cli, CliSession

root = Menu("mips")
root.insert("add", lambda out, a, b: out.write(f"{a + b}\n"),
            "Add two numbers", param_types=[int, int])
regs = Menu("regs")
root.insert_command(regs)

cli = Cli(root)
out = io.StringIO()
with CliSession(cli, out) as session:
    session.feed("add 2 3")        # writes "5\n"
    session.feed("add x 3")        # writes "wrong command: add x 3\n"
    session.feed("regs")           # regs becomes the current menu
    session.prompt()               # writes "regs> "
    print(session.completions(""))
```

Each session also has the commands `help` and `exit`. If a command raises
an exception, the message is written to the session output, unless
`Cli.set_exception_handler` installed a handler. When a session exits, it
hands its commands to the `Cli`'s history storage. Later sessions start
with those commands in their history.

```python
from mipssim.textsplit import split

print(split(' first  "foo \tbar"  last'))  # ['first', 'foo \tbar', 'last']
```

## What this package does not do

This package does not assemble, encode or decode MIPS instructions. It does
not simulate memory or a CPU, and it does not load or run programs. It has
no command to start from the shell. It does not read keys from the keyboard
itself: the caller passes `KeyType` events to `InputHandler.keypressed` or
`Terminal.keypressed`.

## Tests

The tests use pytest. It is declared in the `test` extra.