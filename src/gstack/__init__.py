from gstack.errors import EmptyStackError, StackError
from gstack.stack import DEFAULT_INITIAL_CAPACITY, GenericStack

__all__ = ["DEFAULT_INITIAL_CAPACITY", "EmptyStackError", "GenericStack", "StackError"]
