from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from raiblocks_py.shared.models import RpcResult
from raiblocks_py.shared.rai_utils.unit_conversion_utils import AmountLike, Denomination
from .types import BlockContents, HistoryEntry, VersionAPIResponse

Unit = Union[Denomination, str]


class IRaiNodeService(ABC):
    """Typed convenience methods over the node's RPC actions.

    Every method returns an RpcResult whose Success payload is the decoded value.
    """

    @abstractmethod
    async def account_balance(self, account: str, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        pass

    @abstractmethod
    async def account_weight(self, account: str, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        pass

    @abstractmethod
    async def account_list(self, wallet: str) -> RpcResult[List[str]]:
        pass

    @abstractmethod
    async def account_representative(self, account: str) -> RpcResult[str]:
        pass

    @abstractmethod
    async def available_supply(self, unit: Unit = Denomination.RAW) -> RpcResult[str]:
        pass

    @abstractmethod
    async def block(self, hash: str) -> RpcResult[BlockContents]:
        pass

    @abstractmethod
    async def block_account(self, hash: str) -> RpcResult[str]:
        pass

    @abstractmethod
    async def block_count(self) -> RpcResult[str]:
        pass

    @abstractmethod
    async def chain(self, block: str, count: Optional[int] = None) -> RpcResult[List[str]]:
        pass

    @abstractmethod
    async def frontiers(
        self, account: Optional[str] = None, count: Optional[int] = None
    ) -> RpcResult[Dict[str, str]]:
        pass

    @abstractmethod
    async def frontier_count(self) -> RpcResult[str]:
        pass

    @abstractmethod
    async def history(self, hash: str, count: Optional[int] = None) -> RpcResult[List[HistoryEntry]]:
        pass

    @abstractmethod
    async def peers(self) -> RpcResult[Union[List[str], Dict[str, str]]]:
        pass

    @abstractmethod
    async def send(
        self,
        wallet: str,
        source: str,
        destination: str,
        amount: AmountLike,
        unit: Unit = Denomination.RAW,
    ) -> RpcResult[str]:
        pass

    @abstractmethod
    async def validate_account_number(self, account: str) -> RpcResult[bool]:
        pass

    @abstractmethod
    async def version(self) -> RpcResult[VersionAPIResponse]:
        pass

    @abstractmethod
    async def keepalive(self, address: Optional[str] = None, port: Optional[int] = None) -> RpcResult[dict]:
        pass

    @abstractmethod
    async def rpc_version(self) -> RpcResult[str]:
        pass

    @abstractmethod
    async def store_version(self) -> RpcResult[str]:
        pass

    @abstractmethod
    async def node_vendor(self) -> RpcResult[str]:
        pass
