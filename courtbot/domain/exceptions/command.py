"""
Command exceptions.

Exception Hierarchy:
    CommandError (base)
    ├── CommandAlreadyRegisteredError - Key registered twice
    └── MissingWizardStepError        - Parser reported a field no step collects
"""

from courtbot.domain.shared_kernel import DomainException


class CommandError(DomainException):
    """Base exception for command registration and dispatch errors."""


class CommandAlreadyRegisteredError(CommandError, ValueError):
    """Raised when registering a command key that is already taken."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f'Command "{key}" is already registered')


class MissingWizardStepError(CommandError):
    """Raised when a command has no wizard step for a field its parser reports missing.

    This is a configuration defect, never a user-facing condition.
    """

    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(f'No wizard step defined for param "{param}"')
