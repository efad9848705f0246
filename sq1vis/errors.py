from __future__ import annotations


class ScrambleError(ValueError):
    """Base class for every rejection raised while compiling a scramble."""


class MalformedStateError(ScrambleError):
    pass


class UnrecognizedTokenError(ScrambleError):
    def __init__(self, token: str, position: int) -> None:
        super().__init__(f"Unrecognized move '{token}' at token {position}")
        self.token = token
        self.position = position


class UnknownMacroError(ScrambleError):
    def __init__(self, macro: str, alignment: str) -> None:
        super().__init__(f"Unknown shorthand '{macro}' for alignment {alignment}")
        self.macro = macro
        self.alignment = alignment
