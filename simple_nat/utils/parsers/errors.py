"""
Parser exceptions for endpoint and rule text.
"""


class EndpointFormatError(ValueError):
    """Raised when text is not a valid '<address>:<port>' endpoint."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{text!r}: {reason}")


class RuleFormatError(ValueError):
    """Raised when text is not a valid '<source>,<destination>' rule."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"{text!r}: {reason}")
