"""
Error types raised by the nhs_number package.
"""


class NHSNumberError(Exception):
    pass


class ParseError(NHSNumberError, ValueError):
    """Raised when text is not an NHS number in grouped or compact form."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"could not parse NHS number from {text!r}")
        self.text = text


class DigitCountError(NHSNumberError, ValueError):
    """Raised when a digit sequence has the wrong number of entries."""
    pass
