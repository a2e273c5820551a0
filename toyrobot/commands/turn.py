"""Turn commands: rotate 90 degrees in place.

Handles:
    "LEFT"
    "RIGHT"
"""

import re

from toyrobot.commands.parse import Command
from toyrobot.state import Placed

_PATTERN = re.compile(r"^(left|right)$", re.IGNORECASE)


def parse(text):
    m = _PATTERN.match(text.strip())
    if m is None:
        return None
    return Command(command=m.group(1).lower())


def handle(cmd, state):
    if not isinstance(state, Placed):
        return state, None
    if cmd.command == "left":
        return Placed(state.position, state.facing.left()), None
    return Placed(state.position, state.facing.right()), None
