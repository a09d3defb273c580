"""
Wizard (multi-turn input collection) exceptions.

Exception Hierarchy:
    WizardError (base)
    ├── StepParseError       - Recoverable, the step is prompted again
    ├── WizardCancelledError - User cancelled or the conversation expired
    └── WizardBusyError      - User already has a conversation in progress
"""

from courtbot.domain.shared_kernel import DomainException

BUSY_MESSAGE = "Finish or cancel your current action first (/cancel)."


class WizardError(DomainException):
    """Base exception for wizard errors."""


class StepParseError(WizardError):
    """Raised by a step's parse function when the user's input is invalid.

    The message is shown to the user verbatim.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class WizardCancelledError(WizardError):
    """Raised from a pending collect() when the conversation is cancelled."""

    def __init__(self, message: str = "Wizard cancelled") -> None:
        super().__init__(message)


class WizardBusyError(WizardError):
    """Raised when collection starts for a user who is already being prompted."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(BUSY_MESSAGE)
