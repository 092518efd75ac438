from typing import TypedDict


class VersionAPIResponse(TypedDict):
    rpc_version: str
    store_version: str
    node_vendor: str
