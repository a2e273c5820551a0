"""Place command: put the robot on the table at X,Y facing F.

Handles:
    "PLACE 0,0,NORTH"
    "place 3,1,west"
    "PLACE 1 , 2 , East"

Grammar: the keyword, at least one space, then three comma-separated
fields. Spaces around the commas are allowed. X and Y are (optionally
signed) integers; F is NORTH, EAST, SOUTH or WEST in any case. A line that
starts with PLACE but has a bad argument list raises ParseError; any other
line is not a place command and returns None.

A placement off the table is ignored, whether or not the robot is already
placed.
"""

import re

from toyrobot.commands.parse import Command, ParseError
from toyrobot.state import Facing, Placed, Position, in_bounds

_KEYWORD = re.compile(r"^place(?:\s+(?P<rest>.*))?$", re.IGNORECASE)
_INT = re.compile(r"^[+-]?[0-9]+$")


def _parse_args(text, rest):
    """Split "X,Y,F" into (x, y, facing) or raise ParseError."""
    fields = [f.strip() for f in rest.split(",")]
    if len(fields) != 3:
        raise ParseError(text, "PLACE takes X,Y,F")
    x, y, f = fields
    if not _INT.match(x) or not _INT.match(y):
        raise ParseError(text, "PLACE coordinates must be integers")
    try:
        x, y = int(x), int(y)
    except ValueError:
        # past the interpreter's int string-length limit
        raise ParseError(text, "PLACE coordinates must be integers") from None
    facing = Facing.from_name(f)
    if facing is None:
        raise ParseError(text, f"unknown facing {f!r}")
    return x, y, facing


def parse(text):
    m = _KEYWORD.match(text.strip())
    if m is None:
        return None
    rest = m.group("rest")
    if not rest:
        raise ParseError(text, "PLACE needs X,Y,F")
    x, y, facing = _parse_args(text, rest)
    return Command(command="place", args={"x": x, "y": y, "facing": facing})


def handle(cmd, state):
    x, y = cmd.args["x"], cmd.args["y"]
    if not in_bounds(x, y):
        return state, None
    return Placed(Position(x, y), cmd.args["facing"]), None


# --- Standalone test ---

if __name__ == "__main__":
    tests = [
        "PLACE 0,0,NORTH",
        "place 3,1,west",
        "PLACE 1 , 2 , East",
        "PLACE 5,5,NORTH",
        "PLACE 1,2",
        "PLACE a,2,NORTH",
        "PLACE 1,2,UP",
        "MOVE",
    ]
    for t in tests:
        try:
            result = parse(t)
        except ParseError as e:
            print(f"  {t!r:30s} => ParseError({e.reason})")
            continue
        if result:
            print(f"  {t!r:30s} => {result.command} {result.args}")
        else:
            print(f"  {t!r:30s} => None")
