
class EggError(Exception):
    """ Base class for all Egg errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised for malformed source text or malformed special form usage"""

    def __init__(self, message: str, offset: int | None = None, source: str | None = None):
        self.offset = offset
        self.line: int | None = None
        self.column: int | None = None
        if offset is not None and source is not None:
            self.line = source.count("\n", 0, offset) + 1
            self.column = offset - (source.rfind("\n", 0, offset) + 1) + 1
            message = f"{message} (line {self.line}, column {self.column})"
        super().__init__(message)

class EggReferenceError(EggError):
    """ Raised when a variable is read or set before it is defined"""

class EggTypeError(EggError):
    """ Raised when a value of the wrong kind is applied or passed to a builtin"""

class EggRangeError(EggError):
    """ Raised when a sequence index or divisor is out of range"""
