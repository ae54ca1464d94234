class InvalidInput(ValueError):
    """Raised when a review is requested with values outside the SM-2 domain."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")
