"""HTTP transport for the node's JSON RPC interface.

This module exposes:
- RaiRpcTransport: dispatches one POST per request in blocking, awaitable or
  continuation style, classifies the answer and reports failures to the
  configured notifier.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Set, Union

import httpx

from raiblocks_py.shared.configuration import ClientConfiguration
from raiblocks_py.shared.models import ProtocolError, RpcResult, Success, TransportFailure
from raiblocks_py.shared.parameter_schemas import RpcRequest
from raiblocks_py.shared.rai_utils.rpc.endpoint import resolve_endpoint
from raiblocks_py.shared.rai_utils.rpc.response_classifier import classify_response

RequestLike = Union[RpcRequest, str]
ResultCallback = Callable[[RpcResult], None]

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


def encode_request(request: RequestLike) -> str:
    """Return the JSON text body for a request; pre-serialized text is sent as is."""
    if isinstance(request, RpcRequest):
        return request.to_json()
    return request


class RaiRpcTransport:
    """Sends request envelopes to a single node endpoint.

    No retries, no pooling and no coalescing: every call opens its own client
    and issues exactly one POST.
    """

    def __init__(self, configuration: Optional[ClientConfiguration] = None):
        self.configuration = configuration or ClientConfiguration()
        self._pending: Set[asyncio.Task] = set()

    @property
    def endpoint(self) -> httpx.URL:
        return resolve_endpoint(self.configuration.url_base)

    def _finish(self, result: RpcResult) -> RpcResult:
        if not result.ok:
            self.configuration.notifier(result)
        return result

    def call(self, request: RequestLike) -> RpcResult:
        """Blocking call. Returns once the full response has been received."""
        body = encode_request(request)
        try:
            url = self.endpoint
            with httpx.Client(
                transport=self.configuration.transport,
                timeout=self.configuration.timeout,
            ) as client:
                response = client.post(url, content=body, headers=_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._finish(TransportFailure(status=None, reason=str(e) or type(e).__name__))
        return self._finish(classify_response(response.status_code, response.text))

    async def acall(self, request: RequestLike) -> RpcResult:
        """Non-blocking call for use inside a running event loop."""
        body = encode_request(request)
        try:
            url = self.endpoint
            async with httpx.AsyncClient(
                transport=self.configuration.async_transport,
                timeout=self.configuration.timeout,
            ) as client:
                response = await client.post(url, content=body, headers=_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._finish(TransportFailure(status=None, reason=str(e) or type(e).__name__))
        return self._finish(classify_response(response.status_code, response.text))

    def call_async(self, request: RequestLike, on_result: ResultCallback) -> asyncio.Task:
        """Fire a request and return immediately.

        `on_result` runs later on the event loop, once, and only when the node
        answered (Success or ProtocolError). Transport failures are reported to
        the notifier and never reach `on_result`; callers that need liveness
        must apply their own timeout to the returned task. An exception raised
        by `on_result` is logged and the task still resolves to the result.

        Must be called from a running event loop.
        """

        async def _dispatch() -> RpcResult:
            result = await self.acall(request)
            if isinstance(result, (Success, ProtocolError)):
                try:
                    on_result(result)
                except Exception:
                    logger.exception("[rai_rpc] result callback failed for %s", type(result).__name__)
            return result

        task = asyncio.get_running_loop().create_task(_dispatch())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
