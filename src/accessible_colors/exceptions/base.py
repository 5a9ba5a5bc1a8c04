"""Root of the accessible-colors exception hierarchy."""

from typing import Optional


class AccessibleColorsError(Exception):
    """
    Something the user can act on went wrong.

    `str(error)` is the message meant for people. `technical_message` adds
    whatever detail belongs in a log file, and `recovery_hint` says how to
    fix the problem. Subclasses set `recoverable` when retrying with
    corrected input is expected to work.
    """

    recoverable = False

    def __init__(
        self, user_message: str, *, hint: Optional[str] = None, detail: Optional[str] = None
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.recovery_hint = hint
        self.technical_message = detail if detail is not None else user_message

    def get_full_message(self) -> str:
        """The message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
