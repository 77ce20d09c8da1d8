import sys
import traceback
from pathlib import Path

from tap import Tap

from gstack.errors import ScriptError
from gstack.script import parse_file, run_script, trace
from gstack.stack import GenericStack


class DriverArguments(Tap):
    words: list[str] = []
    """Words to push, in order, before anything is popped."""

    script: Path | None = None
    """Run a stack script instead of draining the pushed words."""

    upper: bool = False
    """Upper-case every element that is printed."""

    verbose: bool = False
    """Prints each stack operation to stderr."""

    debug: bool = False
    """Print full exception traces."""

    def __init__(self):
        super().__init__(underscores_to_dashes=True)

    def configure(self) -> None:
        self.add_argument("words", nargs="*")
        self.add_argument("-s", "--script")
        self.add_argument("-u", "--upper")
        self.add_argument("-v", "--verbose")


def drain(stack: GenericStack[str], verbose: bool) -> list[str]:
    output: list[str] = []
    while not stack.is_empty():
        element = stack.pop()
        if verbose:
            trace(f"pop {element!r}")
        output.append(element)

    return output


def main(argv: list[str] | None = None) -> None:
    args = DriverArguments().parse_args(argv)

    stack: GenericStack[str] = GenericStack()
    for word in args.words:
        if args.verbose:
            trace(f"push {word!r}")
        stack.push(word)

    if args.script is None:
        output = drain(stack, args.verbose)
    else:
        try:
            output = run_script(parse_file(args.script), stack, args.verbose)
        except (OSError, UnicodeDecodeError) as exc:
            args.error(f"argument -s/--script: cannot read '{args.script}': {exc}")
        except ScriptError as exc:
            if args.debug:
                traceback.print_exc(file=sys.stderr)
                print("~~~ User-facing error message ~~~", file=sys.stderr)

            context = f", in '{exc.context.strip()}'" if exc.context else ""
            print(f"File '{args.script}', line {exc.line}{context}", file=sys.stderr)
            print(f"    {exc.message}", file=sys.stderr)
            sys.exit(1)

    for element in output:
        print(element.upper() if args.upper else element)


if __name__ == "__main__":
    main()
