"""Outcome models returned by the operation handlers."""

from typing import Literal

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Outcome of one operation.

    `payload` holds raw JSON bytes (a record or the stored collection) and is
    empty when there is nothing to show. `message` is a human readable note for
    outcomes that are not failures but did not change anything.
    """
    status: Literal["ok", "not_found", "already_exists"]
    payload: bytes = b""
    message: str | None = None

    @classmethod
    def ok(cls, payload: bytes = b"") -> "OperationResult":
        return cls(status="ok", payload=payload)

    @classmethod
    def not_found(cls, message: str | None = None) -> "OperationResult":
        return cls(status="not_found", message=message)

    @classmethod
    def already_exists(cls, message: str) -> "OperationResult":
        return cls(status="already_exists", message=message)
