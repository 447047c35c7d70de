"""Root of the colorconv exception hierarchy.

Every error raised on purpose by colorconv derives from ColorConvError, so
the CLI and TUI can catch one type and still show something readable. Each
error carries two texts: one for the person at the keyboard and one for the
log file.
"""

from typing import Optional


class ColorConvError(Exception):
    """
    Base exception for colorconv.

    Attributes:
        user_message: Short text shown next to the field or on stderr
        technical_message: What went into the log (defaults to user_message)
        recoverable: True when the user can just type something else
        recovery_hint: What to type or change instead, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message if technical_message else user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
