"""Toy Robot main loop.

Reads commands one per line, runs them against the robot, and prints any
report.

Usage:
    python -m toyrobot              # interactive
    python -m toyrobot commands.txt # batch, "-" for stdin
"""

import sys

from toyrobot.commands import router, ALL_COMMANDS

_BANNER = "Toy Robot. Enter a command: "
_PROMPT = "> "
_FAREWELL = "Have a great day!"


def log(msg, out=None):
    print(msg, file=out or sys.stdout, flush=True)


def _register():
    for cmd in ALL_COMMANDS:
        router.register(cmd)


def main(stdin=None, stdout=None):
    """Interactive shell. Returns when input ends or on Ctrl-C."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    _register()

    log(_BANNER, stdout)
    try:
        while True:
            stdout.write(_PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                # EOF: finish the prompt line before saying goodbye
                stdout.write("\n")
                break
            output = router.dispatch(line.rstrip("\n"))
            if output is not None:
                log(output, stdout)
    except KeyboardInterrupt:
        stdout.write("\n")
    log(_FAREWELL, stdout)


def run_batch(lines, stdout=None):
    """Run every line, printing each report. No banner or prompt."""
    _register()
    outputs = router.run_lines(line.rstrip("\n") for line in lines)
    for output in outputs:
        log(output, stdout)
    return outputs


def run_file(path, stdout=None):
    if path == "-":
        return run_batch(sys.stdin, stdout)
    with open(path) as f:
        return run_batch(f, stdout)


if __name__ == "__main__":
    main()
