from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter, ValidationError

from .account_schema import (
    AccountBalanceRequest,
    AccountRepresentativeRequest,
    AccountWeightRequest,
    FrontiersRequest,
    ValidateAccountNumberRequest,
)
from .block_schema import BlockAccountRequest, BlockRequest, ChainRequest, HistoryRequest
from .common_schema import RpcRequest, WireString
from .node_schema import (
    AvailableSupplyRequest,
    BlockCountRequest,
    FrontierCountRequest,
    KeepaliveRequest,
    PeersRequest,
    VersionRequest,
)
from .wallet_schema import AccountListRequest, SendRequest

AnyRpcRequest = Annotated[
    Union[
        AccountBalanceRequest,
        AccountWeightRequest,
        AccountRepresentativeRequest,
        ValidateAccountNumberRequest,
        FrontiersRequest,
        BlockRequest,
        BlockAccountRequest,
        ChainRequest,
        HistoryRequest,
        AvailableSupplyRequest,
        BlockCountRequest,
        FrontierCountRequest,
        PeersRequest,
        VersionRequest,
        KeepaliveRequest,
        AccountListRequest,
        SendRequest,
    ],
    Field(discriminator="action"),
]

_request_adapter: TypeAdapter = TypeAdapter(AnyRpcRequest)


def format_validation_errors(error: ValidationError) -> str:
    return "; ".join(
        f'Field "{".".join(str(p) for p in err["loc"])}" - {err["msg"]}' for err in error.errors()
    )


def parse_request(envelope: Any) -> RpcRequest:
    """Validate a raw envelope (dict or JSON text) into its typed request.

    Raises:
        ValueError: If the action is unknown or a field is invalid.
    """
    try:
        if isinstance(envelope, (str, bytes)):
            return _request_adapter.validate_json(envelope)
        return _request_adapter.validate_python(envelope)
    except ValidationError as e:
        raise ValueError(f"Invalid request: {format_validation_errors(e)}") from e


__all__ = [
    "RpcRequest",
    "WireString",
    "AnyRpcRequest",
    "parse_request",
    "format_validation_errors",
    "AccountBalanceRequest",
    "AccountWeightRequest",
    "AccountRepresentativeRequest",
    "ValidateAccountNumberRequest",
    "FrontiersRequest",
    "BlockRequest",
    "BlockAccountRequest",
    "ChainRequest",
    "HistoryRequest",
    "AvailableSupplyRequest",
    "BlockCountRequest",
    "FrontierCountRequest",
    "PeersRequest",
    "VersionRequest",
    "KeepaliveRequest",
    "AccountListRequest",
    "SendRequest",
]
