from .account import HistoryEntry
from .block import BlockAPIResponse, BlockContents
from .node import VersionAPIResponse

__all__ = [
    "HistoryEntry",
    "BlockAPIResponse",
    "BlockContents",
    "VersionAPIResponse",
]
