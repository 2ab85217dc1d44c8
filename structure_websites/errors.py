# structure_websites/errors.py
from __future__ import annotations

from typing import List, Optional


class StructureWebsitesError(RuntimeError):
    """Base for every error surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation

    def to_detail(self) -> dict:
        return {"detail": str(self), "operation": self.operation}


class InputValidationError(StructureWebsitesError):
    status_code = 400


class InvalidIdentityError(InputValidationError):
    def __init__(self, message: str, *, operation: str = "", value: object = None) -> None:
        super().__init__(message, operation=operation)
        self.value = value


class NotFoundError(StructureWebsitesError):
    status_code = 404


class GuardViolationError(StructureWebsitesError):
    status_code = 403


class StorageError(StructureWebsitesError):
    status_code = 503

    def __init__(self, message: str, *, operation: str = "", cause: Optional[BaseException] = None) -> None:
        super().__init__(message, operation=operation)
        self.cause = cause


class FanOutError(StructureWebsitesError):
    """A tenant's upsert or delete phase failed; later tenants were not attempted."""

    status_code = 502

    def __init__(self, *, tenant: str, phase: str, cause: BaseException, processed: List[str]) -> None:
        super().__init__(f"client {tenant}: failed to {phase}: {cause}", operation="apply_template")
        self.tenant = tenant
        self.phase = phase
        self.cause = cause
        self.processed = list(processed)

    def to_detail(self) -> dict:
        return {**super().to_detail(), "tenant": self.tenant, "processed_clients": self.processed}


class FanOutCancelledError(StructureWebsitesError):
    status_code = 499

    def __init__(self, *, processed: List[str], remaining: List[str]) -> None:
        super().__init__(
            f"fan-out cancelled after {len(processed)} client(s); {len(remaining)} not attempted",
            operation="apply_template",
        )
        self.processed = list(processed)
        self.remaining = list(remaining)

    def to_detail(self) -> dict:
        return {**super().to_detail(), "processed_clients": self.processed, "remaining_clients": self.remaining}
