"""Command-line entry point: run Egg files or source text, or start the shell.

    python -m egg program.egg          # run a file
    python -m egg part1.egg part2.egg  # files are joined into one program
    python -m egg -e 'print(+(1, 2))'  # run source text
    python -m egg                      # interactive shell
"""

import argparse
import logging
import sys

from egg import config
from egg.debug_utils.pprint import format_expression, format_value
from egg.errors import EggError
from egg.interpreter import Interpreter
from egg.reader.parser import parse

logger = logging.getLogger("egg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="egg", description="Run programs written in the Egg language.")
    parser.add_argument("files", help="files to run as one program (if empty, starts the shell)", nargs="*")
    parser.add_argument("-e", "--eval", dest="code", help="run CODE instead of reading files")
    parser.add_argument("--show-result", action="store_true", help="print the value of the program")
    parser.add_argument("--ast", action="store_true", help="print the parsed program instead of running it")
    parser.add_argument("--log-level", default=None,
                        help="logging level name (default: $EGG_LOG_LEVEL or WARNING)")
    return parser


def _read_sources(args) -> list[str]:
    if args.code is not None:
        return [args.code]
    lines = []
    for path in args.files:
        with open(path, encoding="utf-8") as f:
            lines.append(f.read())
    return lines


def main(argv=None) -> int:
    """Runs the egg interpreter. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    level = logging.getLevelName(args.log_level.upper()) if args.log_level else config.get_log_level()
    logging.basicConfig(level=level if isinstance(level, int) else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.code is None and not args.files:
        from egg.shell import Shell
        Shell(color=sys.stdout.isatty()).cmdloop()
        return 0

    try:
        program = "\n".join(_read_sources(args))
        if args.ast:
            print(format_expression(parse(program)))
            return 0
        result = Interpreter().eval(program)
    except OSError as error:
        print(f"egg: {error}", file=sys.stderr)
        return 1
    except EggError as error:
        logger.debug("program failed", exc_info=True)
        print(f"{type(error).__name__}: {error}", file=sys.stderr)
        return 1

    if args.show_result:
        print(format_value(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
