"""Error taxonomy for billing computations and exports."""


class BillingError(Exception):
    """Base class for billing failures."""


class InvalidBillingPeriodError(BillingError, ValueError):
    """Raised when year or month does not describe a calendar month."""

    def __init__(self, year, month) -> None:
        super().__init__(f"Invalid billing period: year={year!r}, month={month!r}")
        self.year = year
        self.month = month


class DataIntegrityError(BillingError):
    """Raised when person data is missing or unusable for billing."""

    def __init__(
        self,
        person_id,
        source: str = "order",
        reason: str | None = None,
    ) -> None:
        super().__init__(
            reason
            or f"Person data missing for person_id {person_id} referenced by "
            f"{source}. This indicates a data integrity issue."
        )
        self.person_id = person_id
        self.source = source


class BillingCancelledError(BillingError):
    """Raised when a computation observes its cancellation signal."""


class StoreUnavailableError(BillingError):
    """Raised when a backing store cannot be read."""


class ExportError(BillingError):
    """Base class for failures writing an exported document.

    Attributes:
        destination: Destination the export was written to.
        user_message: Message suitable for showing to the user.
    """

    user_message_template = "Export failed: {destination}"

    def __init__(self, destination, detail: str = "") -> None:
        self.destination = destination
        self.user_message = self.user_message_template.format(
            destination=destination,
        )
        message = self.user_message
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ExportPermissionError(ExportError):
    """The destination exists but may not be written."""

    user_message_template = "No permission to write the invoice to {destination}."


class ExportPathNotFoundError(ExportError):
    """The destination directory does not exist."""

    user_message_template = "The invoice path {destination} was not found."


class ExportFailedError(ExportError):
    """Any other failure while writing the document."""

    user_message_template = (
        "An unexpected error occurred while writing the invoice to {destination}."
    )


__all__ = [
    "BillingError",
    "InvalidBillingPeriodError",
    "DataIntegrityError",
    "BillingCancelledError",
    "StoreUnavailableError",
    "ExportError",
    "ExportPermissionError",
    "ExportPathNotFoundError",
    "ExportFailedError",
]
