from typing import Optional


class StackError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyStackError(StackError, IndexError):
    def __init__(self) -> None:
        super().__init__("Error: pop from an empty stack")


class ScriptError(StackError):
    def __init__(self, message: str, line: int, context: Optional[str] = None) -> None:
        super().__init__(message)

        self.line = line
        self.context = context


class ScriptSyntaxError(ScriptError):
    def __init__(self, line: int, context: str) -> None:
        super().__init__(f"Error: invalid syntax in '{context.strip()}'", line, context)
