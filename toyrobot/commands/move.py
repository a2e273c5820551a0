"""Move command: one step forward in the direction the robot is facing.

Handles:
    "MOVE"

A step that would leave the table is ignored.
"""

import re

from toyrobot.commands.parse import Command
from toyrobot.state import Placed

_PATTERN = re.compile(r"^move$", re.IGNORECASE)


def parse(text):
    if _PATTERN.match(text.strip()):
        return Command(command="move")
    return None


def handle(cmd, state):
    if not isinstance(state, Placed):
        return state, None
    target = state.position.step(state.facing)
    if not target.in_bounds():
        return state, None
    return Placed(target, state.facing), None
