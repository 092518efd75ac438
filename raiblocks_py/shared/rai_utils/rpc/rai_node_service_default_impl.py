from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from raiblocks_py.shared.configuration import ClientConfiguration
from raiblocks_py.shared.models import RpcResult, TransportFailure
from raiblocks_py.shared.parameter_schemas import (
    AccountBalanceRequest,
    AccountListRequest,
    AccountRepresentativeRequest,
    AccountWeightRequest,
    AvailableSupplyRequest,
    BlockAccountRequest,
    BlockCountRequest,
    BlockRequest,
    ChainRequest,
    FrontierCountRequest,
    FrontiersRequest,
    HistoryRequest,
    KeepaliveRequest,
    PeersRequest,
    RpcRequest,
    SendRequest,
    ValidateAccountNumberRequest,
    VersionRequest,
)
from raiblocks_py.shared.rai_utils.unit_conversion_utils import AmountLike, Denomination, from_raw, to_raw
from .rai_node_service_interface import IRaiNodeService, Unit
from .rai_rpc_transport import RaiRpcTransport
from .types import BlockAPIResponse, BlockContents, HistoryEntry, VersionAPIResponse

T = TypeVar("T")


def _optional_fields(**fields: Any) -> Dict[str, Any]:
    # Let the request model apply its own defaults for anything left unset
    return {k: v for k, v in fields.items() if v is not None}


def decode_block_contents(payload: BlockAPIResponse) -> BlockContents:
    """The node sends the block as JSON text inside `contents`."""
    contents = payload["contents"]
    if isinstance(contents, str):
        contents = json.loads(contents)
    if not isinstance(contents, dict):
        raise ValueError("block contents is not an object")
    return contents


class RaiNodeServiceDefaultImpl(IRaiNodeService):
    """Node service backed by RaiRpcTransport.

    Empty collections come back from the node as an empty string; they are
    decoded as empty lists/dicts. A payload whose shape cannot be decoded is
    turned into a TransportFailure and reported like any other failure.
    """

    def __init__(
        self,
        transport: Optional[RaiRpcTransport] = None,
        configuration: Optional[ClientConfiguration] = None,
    ):
        self.transport = transport or RaiRpcTransport(configuration)

    async def _run(self, request: RpcRequest, decode: Callable[[Any], T]) -> RpcResult[T]:
        result = await self.transport.acall(request)
        if not result.ok:
            return result
        try:
            return result.map(decode)
        except (KeyError, TypeError, ValueError) as e:
            failure = TransportFailure(
                status=200, reason=f"Unexpected {request.action} response: {e!r}"
            )
            self.transport.configuration.notifier(failure)
            return failure

    async def account_balance(self, account: str, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        return await self._run(
            AccountBalanceRequest(account=account), lambda p: from_raw(p["balance"], unit)
        )

    async def account_weight(self, account: str, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        return await self._run(
            AccountWeightRequest(account=account), lambda p: from_raw(p["weight"], unit)
        )

    async def account_list(self, wallet: str) -> RpcResult[List[str]]:
        return await self._run(AccountListRequest(wallet=wallet), lambda p: list(p["accounts"] or []))

    async def account_representative(self, account: str) -> RpcResult[str]:
        return await self._run(
            AccountRepresentativeRequest(account=account), lambda p: p["representative"]
        )

    async def available_supply(self, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        return await self._run(AvailableSupplyRequest(), lambda p: from_raw(p["available"], unit))

    async def block(self, hash: str) -> RpcResult[BlockContents]:
        return await self._run(BlockRequest(hash=hash), decode_block_contents)

    async def block_account(self, hash: str) -> RpcResult[str]:
        return await self._run(BlockAccountRequest(hash=hash), lambda p: p["account"])

    async def block_count(self) -> RpcResult[str]:
        return await self._run(BlockCountRequest(), lambda p: p["count"])

    async def chain(self, block: str, count: Optional[int] = None) -> RpcResult[List[str]]:
        return await self._run(
            ChainRequest(**_optional_fields(block=block, count=count)),
            lambda p: list(p["blocks"] or []),
        )

    async def frontiers(
        self, account: Optional[str] = None, count: Optional[int] = None
    ) -> RpcResult[Dict[str, str]]:
        return await self._run(
            FrontiersRequest(**_optional_fields(account=account, count=count)),
            lambda p: dict(p["frontiers"] or {}),
        )

    async def frontier_count(self) -> RpcResult[str]:
        return await self._run(FrontierCountRequest(), lambda p: p["count"])

    async def history(self, hash: str, count: Optional[int] = None) -> RpcResult[List[HistoryEntry]]:
        return await self._run(
            HistoryRequest(**_optional_fields(hash=hash, count=count)),
            lambda p: list(p["history"] or []),
        )

    async def peers(self) -> RpcResult[Union[List[str], Dict[str, str]]]:
        return await self._run(PeersRequest(), lambda p: p["peers"] or [])

    async def send(
        self,
        wallet: str,
        source: str,
        destination: str,
        amount: AmountLike,
        unit: Unit = Denomination.RAW,
    ) -> RpcResult[str]:
        request = SendRequest(
            wallet=wallet,
            source=source,
            destination=destination,
            amount=to_raw(amount, unit),
        )
        return await self._run(request, lambda p: p["block"])

    async def validate_account_number(self, account: str) -> RpcResult[bool]:
        return await self._run(
            ValidateAccountNumberRequest(account=account), lambda p: str(p["valid"]) == "1"
        )

    async def version(self) -> RpcResult[VersionAPIResponse]:
        return await self._run(VersionRequest(), lambda p: p)

    async def rpc_version(self) -> RpcResult[str]:
        return await self._run(VersionRequest(), lambda p: p["rpc_version"])

    async def store_version(self) -> RpcResult[str]:
        return await self._run(VersionRequest(), lambda p: p["store_version"])

    async def node_vendor(self) -> RpcResult[str]:
        return await self._run(VersionRequest(), lambda p: p["node_vendor"])

    async def keepalive(self, address: Optional[str] = None, port: Optional[int] = None) -> RpcResult[dict]:
        return await self._run(KeepaliveRequest(**_optional_fields(address=address, port=port)), lambda p: p)
