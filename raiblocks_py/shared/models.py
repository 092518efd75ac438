from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class RpcResult(ABC, Generic[T]):
    """Base class for the outcome of a single node call.

    Failure variants are falsy, so `if not result:` keeps working for
    callers that only care whether the call went through.
    """

    @property
    @abstractmethod
    def ok(self) -> bool:
        pass

    def __bool__(self) -> bool:
        return self.ok

    def map(self, fn: Callable[[T], U]) -> RpcResult[U]:
        """Apply `fn` to a successful payload; failures pass through untouched."""
        return self

    def unwrap_or(self, default: Any = None) -> Any:
        return default

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary."""
        pass

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> RpcResult:
        """Deserialize any variant from a dictionary produced by `to_dict`."""
        kind = data.get("type")
        if kind == "success":
            return Success(payload=data.get("payload"))
        if kind == "protocol_error":
            return ProtocolError(message=data.get("message", ""), payload=data.get("payload"))
        if kind == "transport_failure":
            return TransportFailure(status=data.get("status"), reason=data.get("reason", ""))
        if kind == "lookup_miss":
            return LookupMiss(key=data.get("key", ""))
        raise ValueError(f"Unknown result type: {kind!r}")


@dataclass(frozen=True)
class Success(RpcResult[T]):
    """The node answered HTTP 200 with a JSON body."""

    payload: T

    @property
    def ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> RpcResult[U]:
        return Success(fn(self.payload))

    def unwrap_or(self, default: Any = None) -> T:
        return self.payload

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "success", "payload": self.payload}


@dataclass(frozen=True)
class ProtocolError(RpcResult[Any]):
    """The node answered HTTP 400 with an `error` message."""

    message: str
    payload: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "protocol_error", "message": self.message, "payload": self.payload}


@dataclass(frozen=True)
class TransportFailure(RpcResult[Any]):
    """No usable answer: unexpected status, malformed body or connection failure.

    `status` is None when no HTTP response was received at all.
    """

    status: Optional[int] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "transport_failure", "status": self.status, "reason": self.reason}


@dataclass(frozen=True)
class LookupMiss(RpcResult[Any]):
    """A client-side lookup found nothing, e.g. an account without a frontier."""

    key: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "lookup_miss", "key": self.key}
