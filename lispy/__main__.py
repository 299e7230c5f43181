"""CLI entry point for the Lispy interpreter.

Usage:
    python -m lispy [-v|-vv|-vvv] [--debug-file PATH] [--prompt TEXT] [--no-banner]

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug lines are written (default: debug.txt)
  --prompt      Prompt shown before each line of input
  --no-banner   Do not print the version banner

Debug information is written to the debug file when verbosity is greater
than zero. Each line of input is read, evaluated and its result printed
before the next line is read. Press Ctrl+C to exit.
"""

import argparse
import builtins
import sys

from . import __version__
from .interpreter import Interpreter

# Line editing and history for input(), where the platform has it
try:
    import readline  # noqa: F401
except ImportError:
    readline = None


def repl(interpreter: Interpreter, prompt: str = 'lispy> ') -> None:
    """Read, evaluate and print lines until input runs out."""
    while True:
        try:
            line = builtins.input(prompt)
        except EOFError:
            print()
            return
        print(interpreter.eval_line(line))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Lispy language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file that receives debug output')
    parser.add_argument('--prompt', default='lispy> ', help='prompt shown before each line')
    parser.add_argument('--no-banner', action='store_true', help='do not print the version banner')
    args = parser.parse_args(argv)

    if not args.no_banner:
        print(f"Lispy Version {__version__}")
        print("Press Ctrl+c to Exit\n")

    interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file)
    try:
        repl(interpreter, args.prompt)
    except KeyboardInterrupt:
        print()
        sys.exit(130)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
