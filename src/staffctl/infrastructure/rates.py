"""HTTP client for the currency rates API.

One GET per invocation. The API key travels in an ``apikey`` header and
the response must carry a ``rates`` mapping keyed by currency code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError

from staffctl.domain.rates import RateTable
from staffctl.errors import RateFetchError

if TYPE_CHECKING:
    from staffctl.config.models import RatesConfig

logger = logging.getLogger(__name__)

BASE_CURRENCY = "USD"


class RatesClient:
    """Fetches the USD-based rate table."""

    def __init__(self, config: RatesConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": config.api_key.get_secret_value(),
                "Accept": "application/json",
            }
        )

    def _handle_response(self, resp: requests.Response) -> dict[str, Any]:
        """Check status and decode the JSON body.

        Raises:
            RateFetchError: For 4xx/5xx responses or a non-JSON body.
        """
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            logger.error("HTTP %s error for %s", resp.status_code, resp.url)
            msg = f"Failed to fetch API: {resp.status_code}"
            raise RateFetchError(msg) from exc

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("Invalid JSON response from %s: %s", resp.url, resp.text[:200])
            msg = "Failed to fetch API: response is not JSON"
            raise RateFetchError(msg) from exc

        if not isinstance(body, dict):
            msg = "Failed to fetch API: unexpected response shape"
            raise RateFetchError(msg)
        return body

    def fetch(self) -> RateTable:
        """GET the latest rates.

        Raises:
            RateFetchError: On transport failure, non-2xx status, or a body
                without a usable USD-based ``rates`` mapping.
        """
        params = {"base": BASE_CURRENCY}
        try:
            resp = self.session.get(
                self._config.endpoint,
                params=params,
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Rates request to %s failed: %s", self._config.endpoint, exc)
            msg = f"Failed to fetch API: {exc}"
            raise RateFetchError(msg) from exc

        body = self._handle_response(resp)
        if "rates" not in body:
            msg = "Failed to fetch API: response has no 'rates'"
            raise RateFetchError(msg)

        base = body.get("base") or BASE_CURRENCY
        if base != BASE_CURRENCY:
            logger.error("Rates from %s are quoted against %s", resp.url, base)
            msg = f"Failed to fetch API: rates quoted against {base}, expected {BASE_CURRENCY}"
            raise RateFetchError(msg)

        try:
            table = RateTable.model_validate(
                {
                    "base": base,
                    "date": body.get("date"),
                    "rates": body["rates"],
                }
            )
        except ValidationError as exc:
            logger.error("Malformed rates from %s", resp.url)
            msg = f"Failed to fetch API: malformed rates ({exc.error_count()} error(s))"
            raise RateFetchError(msg) from exc

        logger.debug("Fetched %d rates (base %s, date %s)", len(table.rates), table.base, table.date)
        return table
