"""IEX Cloud batch quote client."""

import json
import socket
from typing import Any, Sequence
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

import structlog

from ..config.defaults import QuoteApiParams
from ..errors import RemoteBatchError

logger = structlog.get_logger(__name__)


class IexQuoteClient:
    """
    Fetches quote records for a batch of symbols in one request.

    The response maps each known symbol to ``{"quote": {...}}``; unknown
    symbols are simply left out. Interpreting the records is the fetcher's job.
    """

    def __init__(self, config: QuoteApiParams):
        self.config = config

    def build_url(self, symbols: Sequence[str]) -> str:
        """Batch endpoint URL for ``symbols``; commas stay unescaped."""
        params = {"types": "quote", "symbols": ",".join(symbols)}
        if self.config.token:
            params["token"] = self.config.token
        return f"{self.config.base_url.rstrip('/')}/stock/market/batch?{urlencode(params, safe=',')}"

    def fetch_batch(self, symbols: Sequence[str]) -> dict[str, Any]:
        """
        Request quotes for one batch.

        Raises:
            RemoteBatchError: transport failure, non-2xx status or a body that
                is not a JSON object
        """
        req = Request(
            self.build_url(symbols),
            headers={
                'Accept': 'application/json',
                'User-Agent': 'hqdelta/0.1'
            },
            method="GET"
        )
        kwargs = {}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds

        try:
            with urlopen(req, **kwargs) as response:
                response_code = response.getcode()
                body = response.read().decode('utf-8')

        except HTTPError as e:
            raise RemoteBatchError(
                f"HTTP {e.code}: {e.reason}",
                symbols=symbols,
                context={"status": e.code}
            ) from e

        except (URLError, socket.timeout, OSError) as e:
            raise RemoteBatchError(f"Network error: {e}", symbols=symbols) from e

        if not 200 <= response_code < 300:
            raise RemoteBatchError(
                f"HTTP {response_code}: {body[:200]}",
                symbols=symbols,
                context={"status": response_code}
            )

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise RemoteBatchError(f"Malformed quote response: {e}", symbols=symbols) from e

        if not isinstance(payload, dict):
            raise RemoteBatchError(
                f"Malformed quote response: expected an object, got {type(payload).__name__}",
                symbols=symbols
            )

        logger.debug("Quote batch received", symbols=len(symbols), records=len(payload))
        return payload
