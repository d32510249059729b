"""Module: errors."""


class MedicationValidationError(ValueError):
    """
    Raised when a medication form fails validation.

    ``errors`` maps each offending field to a user-facing message. Every field
    is checked before the error is raised, so callers can show all problems at
    once and nothing is written.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{field}: {msg}" for field, msg in self.errors.items()))
