import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from gstack.errors import EmptyStackError, ScriptError, ScriptSyntaxError
from gstack.stack import GenericStack

GRAMMAR_PATH = Path(__file__).parent / "script_grammar.lark"

# Global; only ever make one parser
lark = Lark.open(str(GRAMMAR_PATH), parser="lalr")


@dataclass(frozen=True)
class Command:
    line: int


@dataclass(frozen=True)
class Push(Command):
    value: str


@dataclass(frozen=True)
class Pop(Command):
    pass


@dataclass(frozen=True)
class IsEmpty(Command):
    pass


class CommandBuilder(Transformer):
    def __init__(self, lines: list[str]) -> None:
        super().__init__()

        self.lines = lines

    def start(self, commands: list[Command]) -> list[Command]:
        return commands

    def push_cmd(self, children: list[Token]) -> Push:
        keyword, value = children
        if value.type != "ESCAPED_STRING":
            return Push(keyword.line, str(value))

        try:
            return Push(keyword.line, json.loads(value, strict=False))
        except json.JSONDecodeError as exc:
            # The grammar accepts any backslash escape, json only the valid ones
            raise ScriptSyntaxError(value.line, self.lines[value.line - 1]) from exc

    def pop_cmd(self, children: list[Token]) -> Pop:
        (keyword,) = children
        return Pop(keyword.line)

    def empty_cmd(self, children: list[Token]) -> IsEmpty:
        (keyword,) = children
        return IsEmpty(keyword.line)


def parse_script(text: str) -> list[Command]:
    lines = text.splitlines()
    try:
        tree = lark.parse(text)
    except UnexpectedInput as exc:
        # Errors at the very end of the input may not carry a position
        if isinstance(exc.line, int) and exc.line > 0:
            line = exc.line
        else:
            line = max(len(lines), 1)
        context = lines[line - 1] if line <= len(lines) else ""
        raise ScriptSyntaxError(line, context) from exc

    try:
        return CommandBuilder(lines).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ScriptSyntaxError):
            raise exc.orig_exc from exc.orig_exc.__cause__
        raise


def parse_file(path: Path) -> list[Command]:
    with path.open(encoding="utf-8") as file:
        return parse_script(file.read())


def trace(operation: str, line: Optional[int] = None) -> None:
    prefix = f"line {line}: " if line is not None else ""
    print(f"{prefix}{operation}", file=sys.stderr)


def run_script(
    commands: list[Command],
    stack: Optional[GenericStack[str]] = None,
    verbose: bool = False,
) -> list[str]:
    """Execute `commands` in order and return the lines they emit.

    `pop` emits the popped element and `empty` emits "true" or "false". A pop
    from an empty stack aborts the script with a `ScriptError` pointing at the
    offending line; earlier commands have already taken effect.
    """
    if stack is None:
        stack = GenericStack()

    output: list[str] = []
    for command in commands:
        match command:
            case Push(value=value):
                stack.push(value)
                if verbose:
                    trace(f"push {value!r}", command.line)
            case Pop():
                try:
                    element = stack.pop()
                except EmptyStackError as exc:
                    raise ScriptError(exc.message, command.line, "pop") from exc
                if verbose:
                    trace(f"pop {element!r}", command.line)
                output.append(element)
            case IsEmpty():
                is_empty = "true" if stack.is_empty() else "false"
                if verbose:
                    trace(f"empty {is_empty}", command.line)
                output.append(is_empty)
            case _:
                assert False, f"unknown command {command!r}"

    return output
