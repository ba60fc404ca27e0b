# PATH: apps/api/common/exceptions.py
from __future__ import annotations


class DomainError(Exception):
    """
    Domain failures are explicit & caller-friendly.

    Every subclass carries:
      - code: stable machine code (frontend branches on it)
      - message: human readable detail
      - http_status: status the API layer responds with
    """

    default_code = "ERROR"
    default_status = 400

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        http_status: int | None = None,
    ):
        super().__init__(message)
        self.code = str(code or self.default_code)
        self.message = str(message)
        self.http_status = int(http_status or self.default_status)


class NotFoundError(DomainError):
    """Referenced exam / submission / appeal / question does not exist."""

    default_code = "NOT_FOUND"
    default_status = 404


class ValidationError(DomainError):
    """Bad input (e.g. empty appeal reason)."""

    default_code = "INVALID"
    default_status = 400


class InvalidStateError(DomainError):
    """Operation targets an appeal that already left `pending`."""

    default_code = "INVALID_STATE"
    default_status = 409


class TransactionConflictError(DomainError):
    """
    The atomic unit could not complete (lock timeout, serialization failure ...).
    Nothing was written; the caller may retry from scratch.
    """

    default_code = "CONFLICT"
    default_status = 409
