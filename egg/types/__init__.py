from egg.types.expression import Apply, Expression, Value, Word
from egg.types.environment import Environment
from egg.types.function import Function

__all__ = ["Apply", "Environment", "Expression", "Function", "Value", "Word"]
