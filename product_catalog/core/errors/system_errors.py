"""Raised (exception) error types.

Unlike DomainError, these are not request outcomes:

- ConfigurationError: wiring defect (duplicate or missing registration).
  Expected only at startup; never converted into a ``Failure``.
- StorageError: the persistence collaborator failed. Repository adapters
  raise it, the dispatcher logs and re-raises it unchanged.
"""


class ConfigurationError(Exception):
    """Handler/validator wiring is invalid (programming defect)."""


class StorageError(Exception):
    """Repository operation failed.

    Attributes:
        operation: Repository operation name (add, get_by_id, ...).
        cause: Underlying driver exception, if any.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize storage error.

        Args:
            operation: Repository operation that failed.
            message: Human-readable message.
            cause: Original exception raised by the storage driver.
        """
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message
        self.cause = cause
