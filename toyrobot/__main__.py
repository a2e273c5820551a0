"""Entry point for `python -m toyrobot`."""

import sys


def _parse_cmd(text):
    """Parse a single input and print the result in test_cases.txt format."""
    from toyrobot.commands import router
    from toyrobot.commands.parse import ParseError

    print(f"> {text}")

    try:
        cmd = router.parse_line(text)
    except ParseError as e:
        print("command: none")
        print(f"# {e.reason}")
        return

    print(f"command: {cmd.command}")
    for key, val in cmd.args.items():
        if hasattr(val, "name"):
            print(f"{key}: {val.name}")
        else:
            print(f"{key}: {val}")


if __name__ == "__main__" or not sys.argv[0]:
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(" ".join(sys.argv[2:]))
    elif len(sys.argv) == 2 and sys.argv[1] == "-parse":
        print("usage: python -m toyrobot -parse TEXT...")
    elif len(sys.argv) >= 2 and sys.argv[1] == "-telegram":
        from toyrobot.telegram_bot import run_telegram
        run_telegram()
    elif len(sys.argv) >= 2:
        from toyrobot.main import run_file
        run_file(sys.argv[1])
    else:
        from toyrobot.main import main
        main()
