"""Rule parser error types."""


class RuleSyntaxError(ValueError):
    """Raised when a rule pattern cannot be parsed."""

    def __init__(self, message: str, rule: str = "", column: int | None = None):
        self.rule = rule
        self.column = column
        super().__init__(message)
