"""Errors raised while seeding the event store.

All of them derive from SeedError so the entry point can report any seeding
failure with a single except clause. Driver exceptions are always chained
(``raise ... from exc``) so the underlying store error is never lost.
"""

from typing import Optional


class SeedError(Exception):
    """Base class for every seeding failure."""


class StoreConnectionError(SeedError):
    """The store could not be reached. Raised before any write."""


class StoreNotEmptyError(SeedError):
    """The target collections hold documents and a reset was not requested."""

    def __init__(self, counts: dict[str, int]):
        self.counts = counts
        populated = ", ".join(f"{name}={count}" for name, count in counts.items() if count)
        super().__init__(
            f"Event store is not empty ({populated}). "
            "Re-run with --reset to wipe these collections."
        )


class InsertError(SeedError):
    """A write step failed. The remaining steps are not attempted."""

    def __init__(self, step: str, message: str, inserted_count: Optional[int] = None):
        self.step = step
        self.inserted_count = inserted_count
        detail = f"{step} failed: {message}"
        if inserted_count is not None:
            detail += f" ({inserted_count} document(s) written before the failure)"
        super().__init__(detail)


class ReadBackError(SeedError):
    """Verification query failed after the data was committed. Non-fatal."""
