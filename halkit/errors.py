class ValidationError(ValueError):
    """Raised when a Link cannot be built from the given attributes."""

    def __init__(self, attribute: str, message: str | None = None):
        self.attribute = attribute
        super().__init__(message or f"{attribute} required")
