# Core type aliases for Egg's data model.
# Runtime values are plain Python objects: int/float for numbers, str for strings,
# bool for true/false, list for sequences. Only the syntax tree and closures get
# their own classes (see egg.types).
#
# Naming guidance:
# - Expression: a parsed syntax tree node (Value, Word or Apply).
# - EggValue:   anything the evaluator can produce at runtime.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: passed into special forms and the application engine
EvaluatorFn = Callable[..., EggValue]
