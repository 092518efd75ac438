from decimal import Decimal

import pytest
from pydantic import ValidationError

from raiblocks_py.shared.constants.node import ALL_ACCOUNTS
from raiblocks_py.shared.parameter_schemas import (
    AccountBalanceRequest,
    BlockCountRequest,
    ChainRequest,
    FrontiersRequest,
    HistoryRequest,
    KeepaliveRequest,
    SendRequest,
    parse_request,
)


def test_action_comes_first_and_counts_travel_as_strings():
    assert ChainRequest(block="ABC", count=10).to_json() == '{"action":"chain","block":"ABC","count":"10"}'


def test_defaults_match_node_conventions():
    assert HistoryRequest(hash="H").count == "4096"
    assert ChainRequest(block="H").count == "4096"

    frontiers = FrontiersRequest()
    assert frontiers.account == ALL_ACCOUNTS
    assert frontiers.count == "1048576"

    keepalive = KeepaliveRequest()
    assert keepalive.address == "::ffff:192.168.1.1"
    assert keepalive.port == "7075"


def test_request_without_fields_serializes_only_action():
    assert BlockCountRequest().to_json() == '{"action":"block_count"}'


def test_requests_are_immutable():
    request = AccountBalanceRequest(account="xrb_1")
    with pytest.raises(ValidationError):
        request.account = "xrb_2"


def test_send_amount_accepts_big_integers_and_decimals():
    big = 10**39
    assert SendRequest(wallet="W", source="S", destination="D", amount=big).amount == str(big)
    assert SendRequest(wallet="W", source="S", destination="D", amount=Decimal("1000")).amount == "1000"


def test_send_amount_must_be_a_raw_integer_string():
    with pytest.raises(ValidationError):
        SendRequest(wallet="W", source="S", destination="D", amount="1.5")


def test_parse_request_picks_the_model_from_action():
    request = parse_request({"action": "history", "hash": "H", "count": 5})
    assert isinstance(request, HistoryRequest)
    assert request.count == "5"

    from_text = parse_request('{"action":"block_count"}')
    assert isinstance(from_text, BlockCountRequest)


def test_parse_request_rejects_unknown_actions_and_fields():
    with pytest.raises(ValueError, match="Invalid request"):
        parse_request({"action": "wallet_destroy", "wallet": "W"})
    with pytest.raises(ValueError, match="Invalid request"):
        parse_request({"action": "block_count", "extra": "1"})
    with pytest.raises(ValueError, match=r'Field "block\.hash"'):
        parse_request({"action": "block"})
