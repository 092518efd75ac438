from typing import Annotated, Literal

from pydantic import Field

from raiblocks_py.shared.constants.node import ALL_ACCOUNTS, DEFAULT_FRONTIERS_COUNT
from raiblocks_py.shared.parameter_schemas.common_schema import RpcRequest, WireString


class AccountBalanceRequest(RpcRequest):
    action: Literal["account_balance"] = "account_balance"
    account: str = Field(description="Account to query")


class AccountWeightRequest(RpcRequest):
    action: Literal["account_weight"] = "account_weight"
    account: str = Field(description="Account whose voting weight is returned")


class AccountRepresentativeRequest(RpcRequest):
    action: Literal["account_representative"] = "account_representative"
    account: str


class ValidateAccountNumberRequest(RpcRequest):
    action: Literal["validate_account_number"] = "validate_account_number"
    account: str


class FrontiersRequest(RpcRequest):
    action: Literal["frontiers"] = "frontiers"
    account: Annotated[
        str,
        Field(description="Starting account; the all-ones account lists every account"),
    ] = ALL_ACCOUNTS
    count: Annotated[
        WireString,
        Field(description="Maximum number of frontiers returned"),
    ] = str(DEFAULT_FRONTIERS_COUNT)
