"""Uniform outcome of service operations."""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from app.core.exceptions import OmedetoException

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """Success flag plus either data or the error that stopped the operation."""

    success: bool
    data: Optional[T] = None
    error: Optional[OmedetoException] = None
    count: Optional[int] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, count: Optional[int] = None) -> "ServiceResult[T]":
        return cls(success=True, data=data, count=count)

    @classmethod
    def fail(cls, error: OmedetoException) -> "ServiceResult[T]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Return the data, or raise the captured error."""
        if not self.success:
            raise self.error or OmedetoException("Operation failed")
        return self.data
