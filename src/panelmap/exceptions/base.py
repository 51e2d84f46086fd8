"""Root of the panelmap exception tree.

Every error raised by panelmap derives from PanelMapError, so the CLI can
report any of them with a single handler. Each error carries two messages:
a short one for the person wiring the panels and a detailed one for the log.
"""

from typing import Optional


class PanelMapError(Exception):
    """
    Base exception for all panelmap errors.

    Attributes:
        user_message: Short description shown on the command line
        technical_message: Detail written to the log (defaults to user_message)
        recoverable: False for geometry errors, True for fixable config files
        recovery_hint: What to change, if there is something obvious
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
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
