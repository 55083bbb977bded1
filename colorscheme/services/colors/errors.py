"""
ColorScheme Engine - Configuration Errors

Every engine failure is synchronous and raised before any state is mutated,
so the caller can simply retry with corrected input.
"""


class SchemeConfigError(ValueError):
    """Base class for invalid scheme configuration."""
    pass


class MissingArgumentError(SchemeConfigError):
    """A configuration setter was called without a value."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} needs an argument")


class InvalidFormatError(SchemeConfigError):
    """Input string is not in the expected RRGGBB form."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"from_hex({value!r}) - argument must be in the form of RRGGBB")


class InvalidRangeError(SchemeConfigError):
    """Numeric argument outside its permitted interval."""

    def __init__(self, operation: str, value, bound: str):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}({value}) - argument must be {bound}")


class UnknownNameError(SchemeConfigError):
    """Scheme kind or variation name that was never registered."""

    def __init__(self, kind: str, name):
        self.kind = kind
        self.name = name
        super().__init__(f"'{name}' isn't a valid {kind} name")
