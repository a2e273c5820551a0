"""Command router: parses a line with the registered commands and applies it.

Each command module must provide:
    parse(text: str) -> Command | None   # recognize + extract args, None if not ours
    handle(cmd: Command, state) -> (state, output)   # pure transition

The router owns the single robot state for the session. Bad lines and
moves off the table never raise out of dispatch(); they are logged and
dropped.
"""

import os
from datetime import datetime

from toyrobot.commands.parse import ParseError
from toyrobot.state import UNPLACED, Placed

_commands = []
state = UNPLACED

# Log file: lives next to the toyrobot package directory.
# TOYROBOT_LOG overrides it; an empty value turns request logging off.
_LOG_PATH = os.environ.get(
    "TOYROBOT_LOG",
    os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "toyrobot.log"))


def _log_request(text, cmd, source="[cli]", note=None):
    """Append a compact 2-line entry to the log file."""
    if not _LOG_PATH:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    if cmd is None:
        parse_line = f"  -> none ({note})"
    else:
        parts = [cmd.command] + [f"{k}={_fmt_arg(v)}" for k, v in cmd.args.items()]
        parse_line = f"  -> {', '.join(parts)}"
        if note:
            parse_line += f" [{note}]"
    try:
        with open(_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"{ts} {source}  {text}\n{parse_line}\n")
    except OSError:
        pass


def _fmt_arg(v):
    return v.name if hasattr(v, "name") else repr(v)


def register(command_module):
    """Register a command module (must have parse and handle functions)."""
    if command_module not in _commands:
        _commands.append(command_module)


def _ensure_registered():
    if not _commands:
        from toyrobot.commands import ALL_COMMANDS
        for cmd in ALL_COMMANDS:
            register(cmd)


def reset():
    """Start a fresh session: take the robot off the table."""
    global state
    state = UNPLACED


def parse_line(text):
    """Parse one line into a Command. Raises ParseError if nothing matches."""
    _ensure_registered()
    if not text.strip():
        raise ParseError(text, "empty line")
    for mod in _commands:
        cmd = mod.parse(text)
        if cmd is not None:
            cmd.module = mod
            return cmd
    raise ParseError(text, "unknown command")


def apply(current, cmd):
    """Apply a Command to a state. Returns (next_state, output or None)."""
    new_state, output = cmd.module.handle(cmd, current)
    if isinstance(new_state, Placed) and not new_state.position.in_bounds():
        raise ValueError(f"{cmd.command} produced off-table state {new_state}")
    return new_state, output


def dispatch(text, source="[cli]"):
    """Run one line of input against the session state.

    Args:
        text: One command line, e.g. "PLACE 1,2,EAST".
        source: Source tag for logging, e.g. "[cli]" or "[Telegram:Joe]".

    Returns:
        The report string for a REPORT on a placed robot, otherwise None.
    """
    global state
    try:
        cmd = parse_line(text)
    except ParseError as e:
        _log_request(text, None, source, note=e.reason)
        return None

    new_state, output = apply(state, cmd)
    note = "ignored" if new_state is state and output is None else None
    state = new_state
    _log_request(text, cmd, source, note=note)
    return output


def run_lines(lines, source="[batch]"):
    """Dispatch each line in order. Returns the list of outputs produced."""
    outputs = []
    for line in lines:
        output = dispatch(line, source=source)
        if output is not None:
            outputs.append(output)
    return outputs
