from typing import TypedDict


class HistoryEntry(TypedDict):
    account: str
    amount: str
    hash: str
    type: str
