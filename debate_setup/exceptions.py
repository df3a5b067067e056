"""Exceptions for the debate setup engine."""

from .models import ValidationResult


class SetupError(Exception):
    """Base exception for debate setup faults."""

    pass


class InvalidConfigurationError(SetupError):
    """Raised when a configuration that fails validation is assembled or started."""

    def __init__(self, validation: ValidationResult):
        super().__init__(
            f"Invalid debate configuration: {', '.join(validation.errors)}"
        )
        self.validation = validation


class DebateNotReadyError(SetupError):
    """Raised when a debate is started while the readiness gate is closed."""

    def __init__(self, next_action: str | None):
        super().__init__(f"Cannot start debate: {next_action}")
        self.next_action = next_action


class CatalogIntegrityError(SetupError):
    """Raised when a static catalog is missing a required entry."""

    def __init__(self, message: str = "Catalog is missing a required entry"):
        super().__init__(message)
