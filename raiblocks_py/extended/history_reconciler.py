"""Account history including representative changes.

The node's `history` action leaves out change blocks. `chain` lists every
block hash from the frontier backward, so walking both side by side finds the
positions where a change block belongs.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Optional

from raiblocks_py.shared.constants.node import CHANGE_BLOCK_TYPE
from raiblocks_py.shared.models import RpcResult, Success
from raiblocks_py.shared.rai_utils.rpc import IRaiNodeService
from raiblocks_py.shared.rai_utils.rpc.types import BlockContents, HistoryEntry

logger = logging.getLogger(__name__)

BlockFetcher = Callable[[str], Awaitable[RpcResult[BlockContents]]]


def change_entry(block_hash: str, block: BlockContents) -> HistoryEntry:
    return {
        "account": block.get("representative", ""),
        "amount": "0",
        "hash": block_hash,
        "type": CHANGE_BLOCK_TYPE,
    }


async def splice_change_blocks(
    history: List[HistoryEntry],
    chain: List[str],
    fetch_block: BlockFetcher,
) -> List[HistoryEntry]:
    """Insert change entries into `history` wherever `chain` diverges from it.

    Args:
        history: Entries from the `history` action, frontier first.
        chain: Hashes from the `chain` action, frontier first. Order is kept as given.
        fetch_block: Coroutine returning the block for a hash.

    Returns:
        A new list; the input is not modified. A divergent block that is not a
        change block, or that cannot be fetched, adds nothing.

    Nothing is inserted for a skipped divergence, so every later position stays
    shifted by one and each later chain hash is fetched as well. Only change
    blocks are ever inserted, so the extra lookups cost round trips but never
    alter the result.
    """
    merged = list(history)
    for position, block_hash in enumerate(chain):
        if position < len(merged) and merged[position]["hash"] == block_hash:
            continue

        block_result = await fetch_block(block_hash)
        if not block_result.ok:
            # Already reported by the transport
            continue

        block: BlockContents = block_result.payload
        if block.get("type") == CHANGE_BLOCK_TYPE:
            merged.insert(position, change_entry(block_hash, block))
        else:
            logger.debug(
                "[history_reconciler] block %s missing from history has type %r, not inserted",
                block_hash,
                block.get("type"),
            )
    return merged


class HistoryReconciler:
    """Builds the full history of an account from its frontier hash."""

    def __init__(self, node_service: IRaiNodeService):
        self.node_service = node_service

    async def reconcile(
        self, frontier_hash: str, count: Optional[int] = None
    ) -> RpcResult[List[HistoryEntry]]:
        """Fetch history, then chain, and splice the change blocks in.

        The two fetches are separate round trips, so the ledger may move between
        them; the result is best effort, not a snapshot. A failed fetch is
        returned as is.
        """
        history_result = await self.node_service.history(frontier_hash, count)
        if not history_result.ok:
            return history_result

        chain_result = await self.node_service.chain(frontier_hash, count)
        if not chain_result.ok:
            return chain_result

        merged = await splice_change_blocks(
            history_result.payload, chain_result.payload, self.node_service.block
        )
        return Success(merged)
