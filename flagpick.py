#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.10"
# dependencies = ["textual>=0.86", "rich>=13", "pyperclip>=1.8"]
# ///
"""flagpick - Interactive option picker for any CLI.

Runs a target command with --help (or -h), extracts its flags from the free-form
help text, lets you toggle them in a terminal UI and assembles the final command
line for printing, clipboard copy or execution.

Configuration:
- Optional `config.json` under `~/.config/flagpick/`.
- `FLAGPICK_HOME` environment variable overrides the location.
- Any key can be overridden with `FLAGPICK_<KEY>` (e.g. `FLAGPICK_VERBOSE=1`).

Usage:
    flagpick ls                     # Pick options for `ls`
    flagpick git commit             # Base command with leading arguments
    flagpick --dump cargo build     # Show raw help and the parsed options
    flagpick --dump --json rg       # Same, as JSON
"""

from __future__ import annotations

import argparse
import json
import os
import re
import shlex
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Final

import pyperclip
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

# ANSI colors for terminal output
DIM: Final[str] = "\033[2m"
RESET: Final[str] = "\033[0m"
CYAN: Final[str] = "\033[36m"
GREEN: Final[str] = "\033[32m"

HELP_FLAGS: Final[tuple[str, ...]] = ("--help", "-h")


class FlagpickError(RuntimeError):
    pass


class HelpUnavailableError(FlagpickError):
    def __init__(self, command: Sequence[str]) -> None:
        self.command = tuple(command)
        super().__init__(
            f"No help output from `{shlex.join(self.command)}` (tried --help and -h)"
        )


class NoOptionsParsedError(FlagpickError):
    def __init__(self, command: Sequence[str]) -> None:
        self.command = tuple(command)
        super().__init__(
            f"No options parsed from the help text of `{shlex.join(self.command)}`"
        )


class ExecuteError(FlagpickError):
    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"Command exited with status {returncode}: {command}")


def flagpick_home() -> Path:
    """Return flagpick's home directory.

    Defaults to `~/.config/flagpick`, overridable via `FLAGPICK_HOME`.
    """
    raw = os.environ.get("FLAGPICK_HOME")
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".config" / "flagpick"


def flagpick_config_path() -> Path:
    return flagpick_home() / "config.json"


def _load_config() -> dict:
    path = flagpick_config_path()
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError:
        return {}
    if isinstance(payload, dict):
        return payload
    return {}


def _config_get(*, key: str) -> object | None:
    # Environment variables override config.json, e.g. `FLAGPICK_VERBOSE=2`.
    env_key = f"FLAGPICK_{key.upper()}"
    env_val = os.environ.get(env_key)
    if env_val is not None and env_val.strip() != "":
        return env_val
    return _load_config().get(key)


def _setting_int(*, config_key: str, default: int) -> int:
    cfg = _config_get(key=config_key)
    if cfg is None:
        return default
    try:
        return int(cfg)
    except (TypeError, ValueError):
        return default


def _verbose_level() -> int:
    raw = _config_get(key="verbose")
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return 1 if raw else 0
    if isinstance(raw, int):
        if raw <= 0:
            return 0
        return 2 if raw > 1 else 1
    if isinstance(raw, str):
        value = raw.strip().lower()
        if value in {"", "0", "false", "no", "off"}:
            return 0
        if value in {"1", "true", "yes", "on", "basic"}:
            return 1
        return 2
    return 0


def _help_timeout_s() -> int | None:
    timeout_s = _setting_int(config_key="help_timeout_s", default=0)
    return timeout_s if timeout_s > 0 else None


@dataclass(slots=True)
class CliOption:
    """One flag extracted from help text, plus its live selection state.

    Identity (`short`, `long`) and the extracted metadata never change after
    extraction; `selected`, `value` and `choice_index` are driven by the
    InteractionEngine.
    """

    short: str | None = None
    long: str | None = None
    description: str = ""
    takes_value: bool = False
    value_hint: str | None = None
    choices: list[str] | None = None
    selected: bool = False
    value: str = ""
    choice_index: int = 0

    @property
    def identity(self) -> tuple[str | None, str | None]:
        return (self.short, self.long)

    def has_choices(self) -> bool:
        return bool(self.choices)

    def current_choice(self) -> str | None:
        if not self.choices or not 0 <= self.choice_index < len(self.choices):
            return None
        return self.choices[self.choice_index]

    def next_choice(self) -> None:
        if self.choices:
            self.choice_index = (self.choice_index + 1) % len(self.choices)

    def prev_choice(self) -> None:
        if self.choices:
            self.choice_index = (self.choice_index - 1) % len(self.choices)

    def display_label(self) -> str:
        if self.short and self.long:
            return f"-{self.short}, --{self.long}"
        if self.short:
            return f"-{self.short}"
        if self.long:
            return f"--{self.long}"
        return ""

    def flag_token(self) -> str | None:
        if self.long:
            return f"--{self.long}"
        if self.short:
            return f"-{self.short}"
        return None

    def to_arg(self) -> str | None:
        """Render this option as a command-line fragment, or None to omit it."""
        if not self.selected:
            return None
        flag = self.flag_token()
        if flag is None:
            return None

        choice = self.current_choice()
        if choice is not None:
            return f"{flag} {choice}"
        if self.takes_value and self.value:
            return f"{flag} {self.value}"
        if self.takes_value:
            # A value-taking flag without a value would swallow the next token.
            return None
        return flag


# Help text heuristics. Recognized shapes:
#   -f, --flag           Description
#   -f, --flag=VALUE     Description
#   -f, --flag <VALUE>   Description
#   -f, --flag...        Description (repeatable)
#   --flag               Description
#   -f                   Description
_OPTION_LINE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(-([a-zA-Z]),?\s*)?(?:--([\w-]+))?(?:\.\.\.)?(?:[=\s]<([^>]+)>|=(\S+))?\s{2,}(.+)$",
    re.MULTILINE,
)
_SHORT_ONLY_LINE: Final[re.Pattern[str]] = re.compile(
    r"^\s*-([a-zA-Z])\s{2,}(.+)$", re.MULTILINE
)
_LONG_ONLY_LINE: Final[re.Pattern[str]] = re.compile(
    r"^\s*--([\w-]+)(?:[=\s]<([^>]+)>|=(\S+))?\s{2,}(.+)$", re.MULTILINE
)
# [possible values: a, b, c] or [values: a, b, c]
_CHOICE_LIST: Final[re.Pattern[str]] = re.compile(
    r"\[\s*(?:possible\s+)?values?\s*:\s*([^\]]+)\]", re.IGNORECASE
)


def extract_choices(description: str) -> tuple[str, list[str] | None]:
    """Split an inline choice-list annotation off a description."""
    match = _CHOICE_LIST.search(description)
    if match is None:
        return description, None

    choices = [item.strip() for item in match.group(1).split(",")]
    choices = [item for item in choices if item]
    if not choices:
        return description, None

    cleaned = (description[: match.start()] + description[match.end() :]).strip()
    return cleaned, choices


def _make_option(
    *,
    short: str | None,
    long: str | None,
    value_hint: str | None,
    raw_description: str,
) -> CliOption:
    description, choices = extract_choices(raw_description.strip())
    return CliOption(
        short=short,
        long=long,
        description=description,
        takes_value=value_hint is not None or choices is not None,
        value_hint=value_hint,
        choices=choices,
    )


def _dedupe(options: list[CliOption]) -> list[CliOption]:
    seen: set[tuple[str | None, str | None]] = set()
    result: list[CliOption] = []
    for option in options:
        if option.identity in seen:
            continue
        seen.add(option.identity)
        result.append(option)
    return result


def extract_options(text: str) -> list[CliOption]:
    """Extract an ordered, deduplicated option set from raw help text.

    The combined short/long pattern runs first. Only when it finds nothing do
    the short-only and long-only patterns run; their results are merged in
    that order. An empty list means nothing looked like a flag.
    """
    options: list[CliOption] = []

    for match in _OPTION_LINE.finditer(text):
        short, long = match.group(2), match.group(3)
        if short is None and long is None:
            continue
        options.append(
            _make_option(
                short=short,
                long=long,
                value_hint=match.group(4) or match.group(5),
                raw_description=match.group(6),
            )
        )

    if not options:
        for match in _SHORT_ONLY_LINE.finditer(text):
            options.append(
                _make_option(
                    short=match.group(1),
                    long=None,
                    value_hint=None,
                    raw_description=match.group(2),
                )
            )
        for match in _LONG_ONLY_LINE.finditer(text):
            options.append(
                _make_option(
                    short=None,
                    long=match.group(1),
                    value_hint=match.group(2) or match.group(3),
                    raw_description=match.group(4),
                )
            )

    return _dedupe(options)


def build_command(base_command: Sequence[str], options: Sequence[CliOption]) -> str:
    """Join the base tokens and every contributing option, in option-set order."""
    parts: list[str] = list(base_command)
    for option in options:
        arg = option.to_arg()
        if arg is not None:
            parts.append(arg)
    return " ".join(parts)


class OutputMode(Enum):
    PRINT = "print"
    CLIPBOARD = "clipboard"
    EXECUTE = "execute"


@dataclass(frozen=True, slots=True)
class SessionResult:
    """What the user asked for when the session ended."""

    command: str | None
    mode: OutputMode | None

    @classmethod
    def abort(cls) -> SessionResult:
        return cls(command=None, mode=None)

    @property
    def aborted(self) -> bool:
        return self.mode is None


class Mode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


class InteractionEngine:
    """Browse/toggle/edit state machine over an owned option set.

    Options are addressed by their index in extraction order, which never
    changes. Every mutation of option state goes through the methods below;
    front ends only read `options`, `cursor`, `mode`, `edit_buffer` and
    `command()`.
    """

    def __init__(
        self, options: Sequence[CliOption], base_command: Sequence[str]
    ) -> None:
        self._options: list[CliOption] = list(options)
        self._base_command: tuple[str, ...] = tuple(base_command)
        self._cursor: int | None = 0 if self._options else None
        self._mode = Mode.NORMAL
        self._edit_buffer = ""

    @property
    def options(self) -> tuple[CliOption, ...]:
        """The option set in extraction order. Read-only view: change state
        through the engine operations, never by assigning to these objects."""
        return tuple(self._options)

    @property
    def base_command(self) -> tuple[str, ...]:
        return self._base_command

    @property
    def cursor(self) -> int | None:
        return self._cursor

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def edit_buffer(self) -> str:
        return self._edit_buffer

    @property
    def current(self) -> CliOption | None:
        if self._cursor is None:
            return None
        return self._options[self._cursor]

    def command(self) -> str:
        return build_command(self._base_command, self._options)

    # Normal mode

    def move_up(self) -> None:
        if self._mode is Mode.NORMAL and self._cursor is not None:
            self._cursor = max(0, self._cursor - 1)

    def move_down(self) -> None:
        if self._mode is Mode.NORMAL and self._cursor is not None:
            self._cursor = min(len(self._options) - 1, self._cursor + 1)

    def cycle_next(self) -> None:
        option = self._cyclable()
        if option is not None:
            option.next_choice()

    def cycle_prev(self) -> None:
        option = self._cyclable()
        if option is not None:
            option.prev_choice()

    def _cyclable(self) -> CliOption | None:
        # Choices stay locked until the option is switched on.
        option = self.current
        if self._mode is not Mode.NORMAL or option is None:
            return None
        if option.selected and option.has_choices():
            return option
        return None

    def toggle(self) -> None:
        option = self.current
        if self._mode is not Mode.NORMAL or option is None:
            return
        option.selected = not option.selected
        if option.selected and option.takes_value and not option.has_choices():
            self._enter_editing(option)

    def begin_edit(self) -> bool:
        option = self.current
        if self._mode is not Mode.NORMAL or option is None:
            return False
        if not (option.selected and option.takes_value):
            return False
        self._enter_editing(option)
        return True

    def _enter_editing(self, option: CliOption) -> None:
        self._mode = Mode.EDITING
        self._edit_buffer = option.value

    def request_output(self, mode: OutputMode) -> SessionResult | None:
        if self._mode is not Mode.NORMAL:
            return None
        return SessionResult(command=self.command(), mode=mode)

    def abort(self) -> SessionResult | None:
        if self._mode is not Mode.NORMAL:
            return None
        return SessionResult.abort()

    # Editing mode

    def type_char(self, char: str) -> None:
        if self._mode is Mode.EDITING:
            self._edit_buffer += char

    def backspace(self) -> None:
        if self._mode is Mode.EDITING:
            self._edit_buffer = self._edit_buffer[:-1]

    def commit_edit(self) -> None:
        option = self.current
        if self._mode is not Mode.EDITING or option is None:
            return
        option.value = self._edit_buffer
        if not option.value:
            option.selected = False
        self._mode = Mode.NORMAL
        self._edit_buffer = ""

    # Escape keeps whatever was typed, same as confirm.
    cancel_edit = commit_edit


def acquire_help(base_command: Sequence[str], *, timeout_s: int | None = None) -> str:
    """Run the target with --help, then -h, and return the first non-blank output.

    For each flag stdout is preferred and stderr of the same run is the
    fallback. A missing executable or a timeout counts as an empty attempt.
    """
    if not base_command:
        raise HelpUnavailableError(base_command)

    verbosity = _verbose_level()
    for help_flag in HELP_FLAGS:
        cmd = [*base_command, help_flag]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                stdin=subprocess.DEVNULL,
                timeout=timeout_s,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            if verbosity:
                print(
                    f"[flagpick] {shlex.join(cmd)} failed: {e.__class__.__name__}",
                    file=sys.stderr,
                )
            continue

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        if verbosity > 1:
            print(
                f"[flagpick] {shlex.join(cmd)} exit {result.returncode}: "
                f"stdout chars {len(stdout)}, stderr chars {len(stderr)}",
                file=sys.stderr,
            )
        for output in (stdout, stderr):
            if output.strip():
                if verbosity:
                    print(f"[flagpick] help from: {shlex.join(cmd)}", file=sys.stderr)
                return output

    raise HelpUnavailableError(base_command)


def emit(command: str, mode: OutputMode) -> None:
    """Deliver the assembled command. Clipboard and spawn errors propagate."""
    if mode is OutputMode.PRINT:
        print(command)
    elif mode is OutputMode.CLIPBOARD:
        pyperclip.copy(command)
        print("Command copied to clipboard", file=sys.stderr)
    elif mode is OutputMode.EXECUTE:
        if _verbose_level():
            print(f"[flagpick] executing: {command}", file=sys.stderr)
        result = subprocess.run(command, shell=True, check=False)
        if result.returncode != 0:
            raise ExecuteError(command, result.returncode)


def _value_suffix(option: CliOption) -> str:
    if option.has_choices():
        if option.selected:
            return f" = {option.current_choice()}"
        return f" [{'|'.join(option.choices or [])}]"
    if option.takes_value and option.selected and option.value:
        return f" = {option.value}"
    if option.takes_value:
        return f" <{option.value_hint or 'VALUE'}>"
    return ""


def wrap_text(text: str, width: int = 80) -> list[str]:
    """Wrap text to multiple lines at word boundaries."""
    if len(text) <= width:
        return [text]

    lines = []
    while len(text) > width:
        wrap_pos = text.rfind(" ", 0, width)
        if wrap_pos == -1:  # No space found, hard wrap
            wrap_pos = width
        lines.append(text[:wrap_pos])
        text = text[wrap_pos:].lstrip()

    if text:
        lines.append(text)

    return lines


def format_option_table(
    *,
    options: Sequence[CliOption],
    use_color: bool = True,
) -> str:
    """Format a parsed option set for terminal display."""
    if not options:
        return "  (no options parsed)"

    labels = [f"{o.display_label()}{_value_suffix(o)}" for o in options]
    max_label_len = max(len(label) for label in labels)

    lines: list[str] = []
    for option, label in zip(options, labels):
        label_padded = label.ljust(max_label_len)
        desc_lines = wrap_text(option.description, width=80)

        if use_color:
            lines.append(
                f"  {CYAN}{label_padded}{RESET}  {DIM}{desc_lines[0]}{RESET}"
            )
        else:
            lines.append(f"  {label_padded}  {desc_lines[0]}".rstrip())

        for cont_line in desc_lines[1:]:
            indent = " " * (max_label_len + 4)
            if use_color:
                lines.append(f"{DIM}{indent}{cont_line}{RESET}")
            else:
                lines.append(f"{indent}{cont_line}")

    return "\n".join(lines)


def format_dump(
    *,
    base_command: Sequence[str],
    help_text: str,
    options: Sequence[CliOption],
    as_json: bool = False,
    use_color: bool = True,
) -> str:
    """Raw help text and the parsed option set, for debugging the heuristics."""
    if as_json:
        return json.dumps(
            {
                "command": list(base_command),
                "help_text": help_text,
                "options": [asdict(option) for option in options],
            },
            indent=2,
        )

    target = shlex.join(base_command)
    header = f"== {target} (options: {len(options)}) =="
    if use_color:
        header = f"{GREEN}{header}{RESET}"
    return "\n".join(
        [
            f"== {target} (help) ==",
            help_text.rstrip("\n"),
            "",
            header,
            format_option_table(options=options, use_color=use_color),
        ]
    )


def _option_line(option: CliOption, *, is_cursor: bool) -> Text:
    checkbox = "[x]" if option.selected else "[ ]"
    if is_cursor:
        style = "bold white on grey30"
    elif option.selected:
        style = "green"
    else:
        style = ""
    line = Text(f"{checkbox} {option.display_label()}{_value_suffix(option)}", style=style)
    line.append(f"  {option.description}", style="grey50")
    return line


class PickerApp(App[SessionResult]):
    """Terminal front end. Reads engine state, forwards keys to engine operations."""

    TITLE = "flagpick"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    #options {
        height: 1fr;
        border: round $primary;
    }
    #option-list {
        width: 100%;
    }
    #preview {
        height: 3;
        border: round $accent;
    }
    #prompt {
        height: 3;
        border: round $secondary;
        color: $text-muted;
    }
    """
    BINDINGS = [
        Binding("up,k", "move_up", "Up", show=False, priority=True),
        Binding("down,j", "move_down", "Down", show=False, priority=True),
        Binding("left,h", "cycle_prev", "Prev choice", show=False, priority=True),
        Binding("right,l", "cycle_next", "Next choice", show=False, priority=True),
        Binding("space", "toggle", "Toggle", priority=True),
        Binding("e", "edit", "Edit", priority=True),
        Binding("enter", "finish('print')", "Print", priority=True),
        Binding("ctrl+c", "finish('clipboard')", "Copy", priority=True),
        Binding("ctrl+x", "finish('execute')", "Exec", priority=True),
        Binding("q,escape", "abort", "Quit", priority=True),
    ]
    NORMAL_ACTIONS: Final[frozenset[str]] = frozenset(
        {
            "move_up",
            "move_down",
            "cycle_prev",
            "cycle_next",
            "toggle",
            "edit",
            "finish",
            "abort",
        }
    )

    def __init__(self, engine: InteractionEngine) -> None:
        super().__init__()
        self._engine = engine

    @property
    def engine(self) -> InteractionEngine:
        return self._engine

    @property
    def session_result(self) -> SessionResult:
        if self.return_value is None:
            # Closed without a terminal action (e.g. Ctrl+Q).
            return SessionResult.abort()
        return self.return_value

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="options"):
            yield Static(id="option-list")
        yield Static(id="preview")
        yield Static(id="prompt")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = shlex.join(self._engine.base_command)
        self.query_one("#options").border_title = "Options"
        self.query_one("#preview").border_title = "Command"
        self._refresh_view()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action in self.NORMAL_ACTIONS:
            return self._engine.mode is Mode.NORMAL
        return True

    def _refresh_view(self) -> None:
        engine = self._engine
        # One row per option; the cursor row doubles as a scroll offset.
        listing = Text(no_wrap=True, overflow="ellipsis")
        for index, option in enumerate(engine.options):
            if index:
                listing.append("\n")
            listing.append_text(_option_line(option, is_cursor=index == engine.cursor))
        self.query_one("#option-list", Static).update(listing)
        self.query_one("#preview", Static).update(Text(engine.command()))

        prompt = self.query_one("#prompt", Static)
        if engine.mode is Mode.EDITING:
            prompt.border_title = "Enter value (Enter to confirm, Esc to cancel)"
            prompt.update(Text(f"Value: {engine.edit_buffer}█"))
        else:
            prompt.border_title = "Help"
            prompt.update(
                Text(
                    "Space: toggle  ←/→: cycle choice  Enter: print  "
                    "Ctrl+C: copy  Ctrl+X: exec  e: edit  q: quit"
                )
            )

        if engine.cursor is not None:
            container = self.query_one("#options", VerticalScroll)
            top = round(container.scroll_offset.y)
            height = max(1, container.scrollable_content_region.height)
            if engine.cursor < top:
                container.scroll_to(y=engine.cursor, animate=False)
            elif engine.cursor >= top + height:
                container.scroll_to(y=engine.cursor - height + 1, animate=False)

        self.refresh_bindings()

    def action_move_up(self) -> None:
        self._engine.move_up()
        self._refresh_view()

    def action_move_down(self) -> None:
        self._engine.move_down()
        self._refresh_view()

    def action_cycle_prev(self) -> None:
        self._engine.cycle_prev()
        self._refresh_view()

    def action_cycle_next(self) -> None:
        self._engine.cycle_next()
        self._refresh_view()

    def action_toggle(self) -> None:
        self._engine.toggle()
        self._refresh_view()

    def action_edit(self) -> None:
        if self._engine.begin_edit():
            self._refresh_view()

    def action_finish(self, mode: str) -> None:
        result = self._engine.request_output(OutputMode(mode))
        if result is not None:
            self.exit(result)

    def action_abort(self) -> None:
        result = self._engine.abort()
        if result is not None:
            self.exit(result)

    def on_key(self, event: events.Key) -> None:
        # Normal-mode keys arrive as bindings; only the edit buffer is fed here.
        engine = self._engine
        if engine.mode is not Mode.EDITING:
            return
        if event.key in ("enter", "escape"):
            engine.commit_edit()
        elif event.key == "backspace":
            engine.backspace()
        elif event.is_printable and event.character:
            engine.type_char(event.character)
        else:
            return
        event.stop()
        event.prevent_default()
        self._refresh_view()


def run_picker(engine: InteractionEngine) -> SessionResult:
    app = PickerApp(engine)
    app.run()
    return app.session_result


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="flagpick",
        description="Interactive option picker for any CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--dump",
        action="store_true",
        help="Print the raw help text and the parsed options, then exit",
    )
    parser.add_argument(
        "--json", action="store_true", help="With --dump, print JSON"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command (and leading arguments) to build options for",
    )

    args = parser.parse_args(argv)
    base_command: list[str] = list(args.command)
    if base_command and base_command[0] == "--":
        base_command = base_command[1:]
    if not base_command:
        parser.print_usage(sys.stderr)
        return 2

    verbosity = _verbose_level()
    try:
        help_text = acquire_help(base_command, timeout_s=_help_timeout_s())
        options = extract_options(help_text)
        if verbosity:
            print(f"[flagpick] parsed options: {len(options)}", file=sys.stderr)

        if args.dump:
            print(
                format_dump(
                    base_command=base_command,
                    help_text=help_text,
                    options=options,
                    as_json=args.json,
                    use_color=not args.no_color,
                )
            )
            return 0

        if not options:
            raise NoOptionsParsedError(base_command)

        result = run_picker(InteractionEngine(options, base_command))
        if result.aborted or result.command is None or result.mode is None:
            return 0
        emit(result.command, result.mode)
    except (FlagpickError, pyperclip.PyperclipException, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
