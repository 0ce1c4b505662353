"""Common exception types for the gas-surface interaction wall state."""


class MissingPropertyData(RuntimeError):
    """Raised when property data required by a provider (e.g. a molar mass) is absent."""


class InvalidInputError(ValueError):
    """Raised when an input value is outside the set accepted by an operation."""

    def __init__(self, input_name: str, value, details: str = ""):
        self.input_name = input_name
        self.value = value
        message = f"Invalid input for {input_name}: {value}"
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class UnsupportedVariableSet(InvalidInputError):
    """Raised by ``set_wall_state`` for a variable-set id it does not implement."""


class UnsupportedVariableGet(InvalidInputError):
    """Raised by ``get_wall_state`` for a variable-set id it does not implement."""


class StateSizeMismatch(ValueError):
    """Raised when an array passed to or from the wall state has the wrong length."""


class InvalidSiteModel(ValueError):
    """Raised when a surface site configuration cannot be turned into site densities."""


class StaleWallState(RuntimeError):
    """Raised when a quantity is read from a representation that is not authoritative."""
