"""Custom exception hierarchy for obershelp."""


class ObershelpError(Exception):
    """Base exception for all obershelp errors."""


class InvalidArgument(ObershelpError, ValueError):
    """A required input string was not supplied (None)."""

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Argument '{param}' must not be None")
