"""Base HTTP client with bounded concurrency and failure classification."""

import asyncio

import httpx
from loguru import logger

import settings
from congress_client.errors import FailureCause, UpstreamError

# Default settings
API_BASE_URL = settings.CONGRESS_API_BASE_URL
API_KEY = settings.CONGRESS_API_KEY
API_TIMEOUT = settings.UPSTREAM_TIMEOUT
REQUEST_DELAY = settings.REQUEST_DELAY


def set_api_config(
    base_url: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
    request_delay: float | None = None,
) -> None:
    """Override API configuration. Takes effect for clients opened afterwards."""
    global API_BASE_URL, API_KEY, API_TIMEOUT, REQUEST_DELAY
    if base_url is not None:
        API_BASE_URL = base_url
    if api_key is not None:
        API_KEY = api_key
    if timeout is not None:
        API_TIMEOUT = timeout
    if request_delay is not None:
        REQUEST_DELAY = request_delay


class BaseClient:
    """Base async HTTP client. No retries: every failure surfaces as UpstreamError."""

    def __init__(
        self,
        max_concurrent: int = settings.MAX_CONCURRENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._max_concurrent = max_concurrent
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    def open(self) -> None:
        """Create the underlying connection pool if it is not open yet.

        The semaphore is recreated with the pool: both belong to the event loop
        that opened them.
        """
        if self._client is None:
            self._sem = asyncio.Semaphore(self._max_concurrent)
            self._client = httpx.AsyncClient(
                timeout=API_TIMEOUT,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )

    async def aclose(self) -> None:
        if self._client:
            logger.info("{}: total API requests: {}", self.__class__.__name__, self._request_count)
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, resource: str, params: dict | None = None, required: str | None = None) -> dict:
        """GET a Congress.gov path, authenticated with the API key."""
        query = {"api_key": API_KEY, "format": "json"}
        if params:
            query.update(params)
        return await self._get_url(f"{API_BASE_URL}/{path}", resource, query, required)

    async def _get_url(
        self,
        url: str,
        resource: str,
        params: dict | None = None,
        required: str | None = None,
    ) -> dict:
        """GET any URL and return its JSON object body.

        `required` names a top-level key the payload must carry; without it the
        payload counts as malformed.
        """
        self.open()
        # API_TIMEOUT bounds the whole call: queueing, delay and the request itself
        try:
            async with asyncio.timeout(API_TIMEOUT):
                async with self._sem:
                    if REQUEST_DELAY:
                        await asyncio.sleep(REQUEST_DELAY)
                    self._request_count += 1
                    try:
                        resp = await self._client.get(url, params=params)
                    except httpx.TimeoutException as e:
                        raise UpstreamError(resource, FailureCause.TIMEOUT, detail=str(e)) from e
                    except httpx.TransportError as e:
                        raise UpstreamError(resource, FailureCause.NETWORK, detail=str(e)) from e
        except TimeoutError as e:
            raise UpstreamError(resource, FailureCause.TIMEOUT, detail=f"no response within {API_TIMEOUT}s") from e

        if not resp.is_success:
            raise UpstreamError(resource, FailureCause.STATUS, status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamError(resource, FailureCause.MALFORMED, resp.status_code, "body is not JSON") from e

        if not isinstance(payload, dict):
            raise UpstreamError(resource, FailureCause.MALFORMED, resp.status_code, "expected a JSON object")
        if required and required not in payload:
            raise UpstreamError(resource, FailureCause.MALFORMED, resp.status_code, f"missing '{required}'")
        return payload
