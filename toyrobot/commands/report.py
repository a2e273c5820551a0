"""Report command: announce position and facing as "X,Y,FACING"."""

import re

from toyrobot.commands.parse import Command
from toyrobot.state import Placed

_PATTERN = re.compile(r"^report$", re.IGNORECASE)


def parse(text):
    if _PATTERN.match(text.strip()):
        return Command(command="report")
    return None


def handle(cmd, state):
    if isinstance(state, Placed):
        return state, state.report()
    return state, None
