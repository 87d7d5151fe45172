"""
Amber Electric API client - sites, current prices and general-channel forecasts.
Every public operation goes through a single request/response helper.
"""

import operator
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from amber_api.config import settings
from amber_api.exceptions import APIError, DecodeError, RequestConstructionError
from amber_api.logging_config import get_logger
from amber_api.models.price import CHANNEL_GENERAL, FORECAST_INTERVAL, ErrorResponse, Price
from amber_api.models.site import Site
from amber_api.utils.time_utils import forecast_date_window

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
# Interval length in minutes requested from the price endpoints
PRICE_RESOLUTION = 30

SITE_LIST = TypeAdapter(List[Site])
PRICE_LIST = TypeAdapter(List[Price])
# A JSON null error body decodes to an empty message
ERROR_BODY = TypeAdapter(Optional[ErrorResponse])


class AmberClient:
    """
    Async client for the Amber Electric v1 API.

    Holds only immutable configuration, so one instance can serve
    concurrent calls. Use it as an async context manager, or call
    ``aclose()`` when done, to release a transport the client created.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.base_url = base_url or settings.base_url
        self._api_key = api_key
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.clock = clock or datetime.now

        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        self.http_client = http_client

    async def __aenter__(self) -> "AmberClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def get_sites(self) -> List[Site]:
        """
        Return sites available to this API key. Typically there is only one.

        The site is what the price methods take to select which site to query.
        """
        sites = await self._send_request("/sites", SITE_LIST)
        logger.debug("Fetched sites", count=len(sites))
        return sites

    async def get_current_prices(self, site: Site) -> List[Price]:
        """Return current prices - one for the general channel, one for feedIn."""
        prices = await self._send_request(
            f"/sites/{site.id}/prices/current",
            PRICE_LIST,
            params={"resolution": PRICE_RESOLUTION},
        )
        logger.debug("Fetched current prices", site_id=site.id, count=len(prices))
        return prices

    async def get_forecast_general_prices(self, site: Site) -> List[Price]:
        """
        Return up to 24 hours of forecast prices for the general channel.

        The server response also carries actual and current intervals and
        other channels; only general-channel forecast intervals are kept,
        sorted by start time. An empty list is a valid result.
        """
        start_date, end_date = forecast_date_window(self.clock())

        prices = await self._send_request(
            f"/sites/{site.id}/prices",
            PRICE_LIST,
            params={
                "resolution": PRICE_RESOLUTION,
                "startDate": start_date,
                "endDate": end_date,
            },
        )

        general_forecast = [
            price for price in prices
            if price.type == FORECAST_INTERVAL and price.channel_type == CHANNEL_GENERAL
        ]
        # list.sort is stable: equal start times keep server order
        general_forecast.sort(key=operator.attrgetter("start_time"))

        logger.debug("Fetched forecast prices",
                    site_id=site.id,
                    start_date=start_date,
                    end_date=end_date,
                    received=len(prices),
                    kept=len(general_forecast))
        return general_forecast

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            "Authorization": f"Bearer {self._api_key}",
        }

    async def _send_request(
        self,
        path: str,
        adapter: TypeAdapter,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a GET request and decode the JSON body with ``adapter``.

        Transport errors (connection, DNS, timeout) and cancellation
        propagate unchanged. Statuses outside [200, 400) raise APIError;
        a success body that does not match raises DecodeError.
        """
        url = f"{self.base_url}{path}"
        try:
            request = self.http_client.build_request(
                "GET", url, params=params, headers=self._headers()
            )
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Invalid request URL {url!r}: {e}") from e

        logger.debug("Sending request", method=request.method, url=str(request.url))
        response = await self.http_client.send(request, stream=True)

        try:
            body = await response.aread()

            # 3xx responses that reach this point count as success
            if response.status_code < 200 or response.status_code >= 400:
                error = self._error_from_body(response.status_code, body)
                logger.warning("API request failed",
                              url=str(request.url),
                              status_code=response.status_code,
                              error=error.message)
                raise error

            try:
                return adapter.validate_json(body)
            except ValidationError as e:
                raise DecodeError(f"Failed to decode response from {request.url.path}: {e}") from e
        finally:
            await response.aclose()

    @staticmethod
    def _error_from_body(status_code: int, body: bytes) -> APIError:
        """Build an APIError from the server's {message} body, else from the status."""
        try:
            error_response = ERROR_BODY.validate_json(body)
        except ValidationError:
            return APIError(f"unknown error, status code: {status_code}", status_code)
        if error_response is None:
            return APIError("", status_code)
        return APIError(error_response.message, status_code)


def new_client(api_key: str) -> AmberClient:
    """Return a client bound to the default base URL and a one-minute timeout."""
    return AmberClient(api_key)
