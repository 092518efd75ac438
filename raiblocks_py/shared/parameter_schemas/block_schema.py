from typing import Annotated, Literal

from pydantic import Field

from raiblocks_py.shared.constants.node import DEFAULT_CHAIN_COUNT, DEFAULT_HISTORY_COUNT
from raiblocks_py.shared.parameter_schemas.common_schema import RpcRequest, WireString


class BlockRequest(RpcRequest):
    action: Literal["block"] = "block"
    hash: str = Field(description="Hash of the block to retrieve")


class BlockAccountRequest(RpcRequest):
    action: Literal["block_account"] = "block_account"
    hash: str


class ChainRequest(RpcRequest):
    action: Literal["chain"] = "chain"
    block: str = Field(description="Hash the traversal starts from, usually an account frontier")
    count: Annotated[
        WireString,
        Field(description="Maximum number of hashes returned"),
    ] = str(DEFAULT_CHAIN_COUNT)


class HistoryRequest(RpcRequest):
    action: Literal["history"] = "history"
    hash: str = Field(description="Hash the history walks back from")
    count: Annotated[
        WireString,
        Field(description="Maximum number of entries returned"),
    ] = str(DEFAULT_HISTORY_COUNT)
