from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from raiblocks_py.shared.configuration import ClientConfiguration
from raiblocks_py.shared.models import LookupMiss, RpcResult, Success
from raiblocks_py.shared.rai_utils.rpc import IRaiNodeService, get_node_service
from raiblocks_py.shared.rai_utils.rpc.types import HistoryEntry
from raiblocks_py.shared.rai_utils.unit_conversion_utils import Denomination, from_raw
from .history_reconciler import HistoryReconciler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeSnapshot:
    """Node-wide data fetched in one `refresh()`. Never updated in place."""

    available_supply: str
    block_count: str
    frontier_count: str
    frontiers: Dict[str, str] = field(default_factory=dict)
    peers: Union[List[str], Dict[str, str]] = field(default_factory=list)
    fetched_at: float = 0.0


class RaiSession:
    """Client session holding an explicit cache of node data.

    The cache is filled by `initialize()` or `refresh()` only. It goes stale as
    the ledger moves on; `is_stale` reports whether `max_age` seconds have
    passed since the last refresh, and the caller decides when to refresh.
    """

    def __init__(
        self,
        node_service: Optional[IRaiNodeService] = None,
        configuration: Optional[ClientConfiguration] = None,
        max_age: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.node_service = get_node_service(node_service, configuration)
        self.reconciler = HistoryReconciler(self.node_service)
        self.max_age = max_age
        self._clock = clock
        self._snapshot: Optional[NodeSnapshot] = None

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> NodeSnapshot:
        if self._snapshot is None:
            raise RuntimeError("RaiSession is not initialized! Call initialize() first.")
        return self._snapshot

    @property
    def is_stale(self) -> bool:
        if self._snapshot is None:
            return True
        if self.max_age is None:
            return False
        return self._clock() - self._snapshot.fetched_at > self.max_age

    async def initialize(self) -> RpcResult[NodeSnapshot]:
        """Fill the cache unless it is already filled."""
        if self._snapshot is not None:
            return Success(self._snapshot)
        return await self.refresh()

    async def refresh(self) -> RpcResult[NodeSnapshot]:
        """Refetch every cached value. On failure the previous snapshot is kept."""
        values: Dict[str, Any] = {}
        fetches = (
            ("available_supply", self.node_service.available_supply),
            ("block_count", self.node_service.block_count),
            ("frontier_count", self.node_service.frontier_count),
            ("frontiers", self.node_service.frontiers),
            ("peers", self.node_service.peers),
        )
        for name, fetch in fetches:
            result = await fetch()
            if not result.ok:
                return result
            values[name] = result.payload

        self._snapshot = NodeSnapshot(fetched_at=self._clock(), **values)
        return Success(self._snapshot)

    async def account_history(
        self, account: str, count: Optional[int] = None
    ) -> RpcResult[List[HistoryEntry]]:
        """History of `account` including representative changes.

        Uses the cached frontier table; an account missing from it gives a
        LookupMiss rather than a node call.
        """
        frontier = self.snapshot.frontiers.get(account)
        if frontier is None:
            logger.info("[rai_session] Empty account %s", account)
            return LookupMiss(account)
        return await self.reconciler.reconcile(frontier, count)

    async def wallet_accounts_info(
        self, wallet: str, count: Optional[int] = None
    ) -> RpcResult[List[Dict[str, Any]]]:
        """Balance and history for every account in `wallet`.

        Each entry is `{key, raw_balance, balance, history}` with `balance` in rai.
        Accounts without a cached frontier get an empty history.
        """
        accounts_result = await self.node_service.account_list(wallet)
        if not accounts_result.ok:
            return accounts_result

        accounts_info: List[Dict[str, Any]] = []
        for account in accounts_result.payload:
            balance_result = await self.node_service.account_balance(account)
            if not balance_result.ok:
                return balance_result

            history_result = await self.account_history(account, count)
            if isinstance(history_result, LookupMiss):
                history: List[HistoryEntry] = []
            elif not history_result.ok:
                return history_result
            else:
                history = history_result.payload

            raw_balance = balance_result.payload
            accounts_info.append(
                {
                    "key": account,
                    "raw_balance": raw_balance,
                    "balance": from_raw(raw_balance, Denomination.RAI),
                    "history": history,
                }
            )
        return Success(accounts_info)
