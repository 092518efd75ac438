from typing import TypedDict


class BlockAPIResponse(TypedDict):
    # The node embeds the block as JSON text
    contents: str


class BlockContents(TypedDict, total=False):
    type: str
    previous: str
    representative: str
    account: str
    source: str
    destination: str
    balance: str
    work: str
    signature: str
