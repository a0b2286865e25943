"""
Internet reachability via HTTP HEAD probes.

A probe succeeds on any 2xx or 3xx response. Redirects are not followed;
a redirect already proves the host is reachable.
"""

import logging
import time
from typing import List, Optional, Sequence

import httpx

from hyprpreflight.config import DEFAULT_ENDPOINTS, HTTP_TIMEOUT_SECONDS
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import ConnectivityTest, InternetConnectivity
from hyprpreflight.interfaces.detector import ConnectivityChecker


class HTTPConnectivityChecker(ConnectivityChecker):
    """
    Probe each endpoint in order with a HEAD request.

    Args:
        endpoints: URLs to probe.
        timeout: Per-probe timeout in seconds, further bounded by the context deadline.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    name = "connectivity"

    def __init__(self, endpoints: Optional[Sequence[str]] = None,
                 timeout: float = HTTP_TIMEOUT_SECONDS,
                 transport: Optional[httpx.BaseTransport] = None,
                 logger=None):
        self.endpoints = list(endpoints) if endpoints else list(DEFAULT_ENDPOINTS)
        self.timeout = timeout
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    def _probe(self, client: httpx.Client, endpoint: str, timeout: Optional[float]) -> ConnectivityTest:
        start = time.monotonic()
        try:
            response = client.head(endpoint, timeout=timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.debug(f"HEAD {endpoint} failed: {e}")
            return ConnectivityTest(endpoint, False, time.monotonic() - start, str(e) or type(e).__name__)

        latency = time.monotonic() - start
        if 200 <= response.status_code < 400:
            return ConnectivityTest(endpoint, True, latency)
        return ConnectivityTest(endpoint, False, latency, f"HTTP {response.status_code}")

    def check_internet_connectivity(self, ctx: ValidationContext) -> InternetConnectivity:
        ctx.raise_if_done(self.name)
        tests: List[ConnectivityTest] = []
        with httpx.Client(transport=self.transport, follow_redirects=False) as client:
            for endpoint in self.endpoints:
                ctx.raise_if_done(self.name)
                test = self._probe(client, endpoint, ctx.bounded_timeout(self.timeout))
                self.logger.debug(
                    f"{endpoint}: {'ok' if test.success else test.error_message} "
                    f"({test.latency * 1000:.0f}ms)"
                )
                tests.append(test)

        return InternetConnectivity(is_connected=any(t.success for t in tests), tested_endpoints=tests)
