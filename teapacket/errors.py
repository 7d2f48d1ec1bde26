"""Errors raised for functionality that is not available."""


class NotImplementedFeature(NotImplementedError):
    """Raised when a feature is not implemented."""

    def __init__(self, message):
        self.feature = message
        super().__init__(f"{message} not implemented.")


class FunctionNotImplemented(NotImplementedFeature):
    """Raised when a specific function exists only as a stub."""

    def __init__(self, function_name):
        self.function_name = function_name
        super().__init__(f"Function {function_name}")