"""Command object for the robot command system.

Each command module's parse(text) returns a Command (or None).
The router applies the Command by passing it to handle(cmd, state).
"""

from dataclasses import dataclass, field


@dataclass
class Command:
    command: str          # "place", "move", "left", "right", "report"
    args: dict = field(default_factory=dict)
    module: object = None  # reference to the module, set by router


class ParseError(ValueError):
    """A line that is not a valid command. Never fatal: the line is dropped."""

    def __init__(self, text, reason):
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason
