from typing import Annotated, Literal

from pydantic import Field

from raiblocks_py.shared.constants.node import DEFAULT_KEEPALIVE_ADDRESS, DEFAULT_KEEPALIVE_PORT
from raiblocks_py.shared.parameter_schemas.common_schema import RpcRequest, WireString


class AvailableSupplyRequest(RpcRequest):
    action: Literal["available_supply"] = "available_supply"


class BlockCountRequest(RpcRequest):
    action: Literal["block_count"] = "block_count"


class FrontierCountRequest(RpcRequest):
    action: Literal["frontier_count"] = "frontier_count"


class PeersRequest(RpcRequest):
    action: Literal["peers"] = "peers"


class VersionRequest(RpcRequest):
    action: Literal["version"] = "version"


class KeepaliveRequest(RpcRequest):
    action: Literal["keepalive"] = "keepalive"
    address: str = DEFAULT_KEEPALIVE_ADDRESS
    port: Annotated[WireString, Field(description="Peer port")] = str(DEFAULT_KEEPALIVE_PORT)
