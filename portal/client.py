"""BPUT results portal client.

Every portal endpoint is a form-encoded call answering with JSON. Failures
of any kind come back as an error-tagged UpstreamResult rather than an
exception, so route handlers decide how to present them.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from resultproxy.logging_config import TRACE
from resultproxy.models import UpstreamResult

logger = logging.getLogger(__name__)

# The portal really spells it "detsils"
DETAILS_PATH = "/student-detsils-results"
SUBJECTS_PATH = "/student-results-subjects-list"
EXAM_LIST_PATH = "/student-results-list"
SGPA_PATH = "/student-results-sgpa"

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}

HttpMethod = Literal["GET", "POST"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite number {text}")
    return value


def decode_json(content: bytes) -> Any:
    """Decode a JSON body, rejecting NaN and Infinity which responses cannot re-encode."""
    return json.loads(content, parse_constant=_reject_constant, parse_float=_parse_finite_float)


class PortalClient:
    """Async client for the results portal and the pages the proxy serves."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        client_kwargs: dict[str, Any] = {"transport": transport}
        # None keeps httpx's default timeout rather than disabling it
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(**client_kwargs)

    async def call(
        self,
        path: str,
        params: Mapping[str, str],
        method: HttpMethod = "POST",
    ) -> UpstreamResult:
        """Issue one form-encoded call to the portal and decode its JSON body.

        POST sends ``params`` as the request body; GET sends them as the
        query string.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"Portal {method} {url}")
        logger.log(TRACE, f"Portal {method} {url} params={dict(params)}")

        try:
            if method == "POST":
                response = await self._client.post(url, data=dict(params), headers=FORM_HEADERS)
            else:
                response = await self._client.get(url, params=dict(params), headers=FORM_HEADERS)
            response.raise_for_status()
            return UpstreamResult.success(decode_json(response.content))
        except httpx.HTTPStatusError as e:
            reason = f"upstream returned HTTP {e.response.status_code}"
        except httpx.HTTPError as e:
            reason = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
        except ValueError as e:
            reason = f"invalid JSON in response ({e})"

        logger.warning(f"Portal call to {path} failed: {reason}")
        return UpstreamResult.failure(f"Failed to retrieve data: {reason}")

    async def fetch_text(self, url: str) -> UpstreamResult:
        """GET an absolute URL and return its body as text."""
        logger.debug(f"Fetching page {url}")

        try:
            response = await self._client.get(url)
            response.raise_for_status()
            return UpstreamResult.success(response.text)
        except httpx.HTTPStatusError as e:
            reason = f"HTTP {e.response.status_code}"
        except httpx.HTTPError as e:
            reason = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__

        logger.warning(f"Fetching {url} failed: {reason}")
        return UpstreamResult.failure(f"Failed to fetch {url}: {reason}")

    async def aclose(self) -> None:
        await self._client.aclose()
