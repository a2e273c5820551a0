from toyrobot.commands import place, move, turn, report

ALL_COMMANDS = [place, move, turn, report]
