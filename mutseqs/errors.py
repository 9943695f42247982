from typing import Any, Optional


class MutseqsError(Exception):
    """base class for every error raised by mutseqs"""


class EmptyInputError(MutseqsError, ValueError):
    """an operation that needs at least one element got none"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"cannot compute {operation} of empty sequence")


class TypeMismatchError(MutseqsError, TypeError):
    """a named field does not exist on the element type"""

    def __init__(self, field_name: str, record_type: Optional[type] = None):
        self.field_name = field_name
        self.record_type = record_type
        type_name = record_type.__name__ if record_type is not None else 'element'
        super().__init__(f"'{type_name}' has no field named '{field_name}'")


class ConsumedSequenceError(MutseqsError, RuntimeError):
    """a sequence was used after a consuming operation took its data"""

    def __init__(self, operation: Optional[str] = None, by: Optional[Any] = None):
        self.operation = operation
        self.consumed_by = by
        message = "sequence was already consumed"
        if by: message += f" by '{by}'"
        if operation: message += f" and cannot be used for '{operation}'"
        super().__init__(message)
