from __future__ import annotations


class QuickplotError(Exception):
    pass


class StyleSyntaxError(QuickplotError, ValueError):
    def __init__(self, message: str, *, position: int, text: str) -> None:
        super().__init__(f"{message} at position {position} in style {text!r}")
        self.position = position
        self.text = text


class ParseError(StyleSyntaxError):
    def __init__(self, *, position: int, text: str, expected: str) -> None:
        found = repr(text[position]) if position < len(text) else "end of style"
        super().__init__(f"expected {expected}, found {found}", position=position, text=text)
        self.expected = expected


class LexError(ParseError):
    """Unrecognized character; subclasses ParseError so one except clause covers both."""

    def __init__(self, *, position: int, text: str) -> None:
        super().__init__(position=position, text=text, expected="a style character")


class PlotDataError(QuickplotError, ValueError):
    pass


class DimensionMismatch(PlotDataError):
    def __init__(self, x_len: int, y_len: int) -> None:
        super().__init__(f"x and y length mismatch: {x_len} != {y_len}")
        self.x_len = x_len
        self.y_len = y_len
