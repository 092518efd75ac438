import asyncio
import json
import logging
from unittest.mock import MagicMock

import httpx
import pytest

from raiblocks_py.shared.configuration import ClientConfiguration
from raiblocks_py.shared.models import ProtocolError, Success, TransportFailure
from raiblocks_py.shared.parameter_schemas import BlockCountRequest, ChainRequest
from raiblocks_py.shared.rai_utils.rpc import RaiRpcTransport
from raiblocks_py.shared.utils.notifier import log_notifier
from test.utils import MockNode


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def node():
    return MockNode(
        {
            "block_count": (200, {"count": "1000", "unchecked": "10"}),
            "chain": (400, {"error": "Invalid block hash"}),
            "peers": (500, "Internal Server Error"),
            "frontier_count": (200, "not json"),
            "version": (0, httpx.ConnectError("Connection refused")),
        }
    )


@pytest.fixture
def transport(node, notifier):
    return RaiRpcTransport(node.configuration(notifier=notifier))


def test_sync_success_returns_payload(transport, node, notifier):
    result = transport.call(BlockCountRequest())

    assert result == Success({"count": "1000", "unchecked": "10"})
    assert node.envelopes == [{"action": "block_count"}]
    notifier.assert_not_called()


def test_sync_posts_the_exact_envelope_to_the_resolved_endpoint(transport, node):
    transport.call(ChainRequest(block="ABC", count=16))

    request = node.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://node.test:7076/"
    assert request.headers["content-type"] == "application/json"
    assert request.content == b'{"action":"chain","block":"ABC","count":"16"}'


def test_sync_sends_pre_serialized_text_verbatim(transport, node):
    body = '{"action": "block_count"}'
    transport.call(body)

    assert node.requests[0].content == body.encode()


def test_sync_protocol_error_is_falsy_and_notified(transport, notifier):
    result = transport.call(ChainRequest(block="bad"))

    assert isinstance(result, ProtocolError)
    assert result.message == "Invalid block hash"
    assert not result
    notifier.assert_called_once_with(result)


def test_sync_unexpected_status_is_transport_failure(transport, notifier):
    result = transport.call('{"action": "peers"}')

    assert result == TransportFailure(status=500, reason="Unexpected HTTP status 500")
    notifier.assert_called_once_with(result)


def test_sync_malformed_json_is_transport_failure(transport, notifier):
    result = transport.call('{"action": "frontier_count"}')

    assert isinstance(result, TransportFailure)
    assert result.status == 200
    notifier.assert_called_once_with(result)


def test_sync_connection_failure_has_no_payload(transport, notifier):
    result = transport.call('{"action": "version"}')

    assert isinstance(result, TransportFailure)
    assert result.status is None
    assert "Connection refused" in result.reason
    notifier.assert_called_once_with(result)


def test_endpoint_is_resolved_from_configuration():
    transport = RaiRpcTransport(ClientConfiguration())
    assert str(transport.endpoint) == "http://localhost:7076/"


def test_default_notifier_logs_failures(caplog):
    with caplog.at_level(logging.ERROR):
        log_notifier(ProtocolError(message="Account not found"))
        log_notifier(TransportFailure(status=502, reason="Bad gateway"))
        log_notifier(TransportFailure(reason="Connection refused"))

    assert "Account not found" in caplog.text
    assert "HTTP 502" in caplog.text
    assert "Connection refused" in caplog.text


@pytest.mark.asyncio
async def test_acall_classifies_like_sync(transport, notifier):
    assert await transport.acall(BlockCountRequest()) == Success({"count": "1000", "unchecked": "10"})

    error = await transport.acall(ChainRequest(block="bad"))
    assert isinstance(error, ProtocolError)

    failure = await transport.acall('{"action": "version"}')
    assert isinstance(failure, TransportFailure)
    assert notifier.call_count == 2


@pytest.mark.asyncio
async def test_call_async_invokes_continuation_once_after_returning(transport):
    on_result = MagicMock()

    task = transport.call_async(BlockCountRequest(), on_result)
    on_result.assert_not_called()

    result = await task
    on_result.assert_called_once_with(Success({"count": "1000", "unchecked": "10"}))
    assert result.ok


@pytest.mark.asyncio
async def test_call_async_delivers_protocol_errors(transport, notifier):
    on_result = MagicMock()

    await transport.call_async(ChainRequest(block="bad"), on_result)

    on_result.assert_called_once()
    delivered = on_result.call_args.args[0]
    assert isinstance(delivered, ProtocolError)
    assert delivered.message == "Invalid block hash"
    notifier.assert_called_once_with(delivered)


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["peers", "version", "frontier_count"])
async def test_call_async_never_delivers_transport_failures(transport, notifier, action):
    on_result = MagicMock()

    result = await transport.call_async(json.dumps({"action": action}), on_result)

    assert isinstance(result, TransportFailure)
    on_result.assert_not_called()
    notifier.assert_called_once_with(result)


def test_call_async_requires_running_loop(transport):
    with pytest.raises(RuntimeError):
        transport.call_async(BlockCountRequest(), MagicMock())


@pytest.mark.asyncio
async def test_call_async_does_not_block_the_loop(transport):
    on_result = MagicMock()
    task = transport.call_async(BlockCountRequest(), on_result)

    # Control is back with the caller before any response is handled
    assert not task.done()
    await asyncio.wait_for(task, timeout=5)
    on_result.assert_called_once()


def test_sync_unparseable_url_base_is_transport_failure(node, notifier):
    transport = RaiRpcTransport(node.configuration(url_base="node.example.org:abc", notifier=notifier))

    result = transport.call(BlockCountRequest())

    assert isinstance(result, TransportFailure)
    assert result.status is None
    assert node.requests == []
    notifier.assert_called_once_with(result)


@pytest.mark.asyncio
async def test_async_unparseable_url_base_is_transport_failure(node, notifier):
    transport = RaiRpcTransport(node.configuration(url_base="node.example.org:abc", notifier=notifier))
    on_result = MagicMock()

    result = await transport.call_async(BlockCountRequest(), on_result)

    assert isinstance(result, TransportFailure)
    on_result.assert_not_called()
    notifier.assert_called_once_with(result)


@pytest.mark.asyncio
async def test_failing_continuation_is_logged_and_task_keeps_result(transport, caplog):
    on_result = MagicMock(side_effect=ValueError("boom"))

    with caplog.at_level(logging.ERROR, logger="raiblocks_py.shared.rai_utils.rpc.rai_rpc_transport"):
        task = transport.call_async(BlockCountRequest(), on_result)
        assert task in transport._pending
        result = await task

    assert result == Success({"count": "1000", "unchecked": "10"})
    on_result.assert_called_once_with(result)
    assert "result callback failed" in caplog.text
    assert "boom" in caplog.text
    assert task not in transport._pending
