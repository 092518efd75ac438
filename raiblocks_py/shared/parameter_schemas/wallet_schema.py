from typing import Annotated, Literal

from pydantic import Field

from raiblocks_py.shared.parameter_schemas.common_schema import RpcRequest, WireString


class AccountListRequest(RpcRequest):
    action: Literal["account_list"] = "account_list"
    wallet: str = Field(description="Wallet whose accounts are listed")


class SendRequest(RpcRequest):
    action: Literal["send"] = "send"
    wallet: str
    source: str = Field(description="Account the funds leave from")
    destination: str = Field(description="Account receiving the funds")
    amount: Annotated[
        WireString,
        Field(pattern=r"^\d+$", description="Amount in raw, as a base-10 integer string"),
    ]
