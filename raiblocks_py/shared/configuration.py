from typing import Optional

import httpx

from .utils.notifier import Notifier, log_notifier


class ClientConfiguration:
    def __init__(
            self,
            url_base: Optional[str] = None,
            timeout: Optional[float] = None,
            notifier: Optional[Notifier] = None,
            transport: Optional[httpx.BaseTransport] = None,
            async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # Node address as "host", "host:port" or "scheme://host:port/path". None means localhost.
        self.url_base = url_base

        # None leaves the request unbounded; callers needing bounded latency set a value
        self.timeout = timeout

        # Receives every failed result; defaults to logging
        self.notifier = notifier or log_notifier

        # Custom httpx transports (e.g. httpx.MockTransport in tests)
        self.transport = transport
        self.async_transport = async_transport
