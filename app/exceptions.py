"""Errors raised by the permit rules and the compliance workflow."""


class ComplianceError(Exception):
    """Base error for the compliance core."""


class NotFound(ComplianceError):
    """Referenced boarding house does not exist."""

    def __init__(self, boarding_house_id: int):
        self.boarding_house_id = boarding_house_id
        super().__init__(f"Boarding house {boarding_house_id} not found")


class StorageError(ComplianceError):
    """Persistence failed; the update was not applied."""


class NotificationError(ComplianceError):
    """A notification could not be stored."""


class InvalidPermitDate(ComplianceError, ValueError):
    """Permit date missing, malformed, or outside registration policy."""
