class EzUtilitiesError(Exception):
    """Base class for the errors raised by ezutils."""

class NullSequenceError(EzUtilitiesError, TypeError):
    def __init__(self, name="sequence"):
        self.name = name
        super().__init__(f"'{name}' must not be None")

class OutOfRangeError(EzUtilitiesError, IndexError):
    def __init__(self, name, index, length, inclusive=False):
        self.name = name
        self.index = index
        self.length = length
        upper = f"{length}]" if inclusive else f"{length})"
        super().__init__(f"'{name}' index {index!r} is out of range [0, {upper}")

class DuplicateSelectionError(EzUtilitiesError, ValueError):
    def __init__(self, name, duplicates):
        self.name = name
        self.duplicates = list(duplicates)
        super().__init__(f"'{name}' contains duplicates: {self.duplicates!r}")

class NotFoundError(EzUtilitiesError, ValueError):
    def __init__(self, items):
        self.items = list(items)
        super().__init__(f"items not found in sequence: {self.items!r}")
