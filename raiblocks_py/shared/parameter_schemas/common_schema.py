from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _to_wire_string(value: Any) -> Any:
    # Node convention: numbers travel as strings so no precision is lost
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal):
        return f"{value:f}"
    if isinstance(value, int):
        return str(value)
    return value


WireString = Annotated[str, BeforeValidator(_to_wire_string)]


class RpcRequest(BaseModel):
    """Base envelope for every node request.

    Subclasses pin `action` to a Literal so the union of all requests can be
    discriminated on it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: str

    def to_json(self) -> str:
        """Serialize to the JSON text body sent to the node."""
        return self.model_dump_json(exclude_none=True)
