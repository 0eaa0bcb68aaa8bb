import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError as PayloadError
from tenacity import (
    retry, wait_exponential, stop_after_attempt, retry_if_exception_type,
    before_sleep_log,
)

from starboard_comps.config import get_settings
from starboard_comps.errors import SearchFailedError
from starboard_comps.models import ComparableRequest, ComparableResult

logger = logging.getLogger(__name__)


class ComparableSearchClient:
    """
    Client for the remote comparable-search service.

    POST {api_url}/comparable?n=<count> with the subject property as JSON;
    the service answers with a ranked array of comparables. The scoring model
    lives entirely on the server, so results are returned in server order and
    never re-ranked here.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        backoff_seconds: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout_seconds
        self.max_attempts = max_attempts if max_attempts is not None else settings.max_attempts
        self.backoff_seconds = backoff_seconds
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/comparable"

    async def find_comparables(self, request: ComparableRequest, n: int) -> List[ComparableResult]:
        """
        Fetch up to n comparables for the subject property.
        Raises SearchFailedError on any transport error, non-2xx status or
        malformed payload.
        """
        body = request.model_dump(mode="json")
        logger.info(f"Comparable search: n={n} zoning={request.zoning} sqft={request.square_feet}")

        # Retries cover transport errors only; HTTP error statuses fail immediately
        @retry(
            wait=wait_exponential(multiplier=self.backoff_seconds, max=8),
            stop=stop_after_attempt(self.max_attempts),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async def _post() -> httpx.Response:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                return await client.post(self.endpoint, params={"n": n}, json=body)

        try:
            response = await _post()
        except httpx.HTTPError as e:
            logger.error(f"Comparable search transport error: {e}")
            raise SearchFailedError(f"Unable to reach comparable search service: {e}") from e

        if not response.is_success:
            logger.error(f"Comparable search API error: {response.status_code} {response.text[:200]}")
            raise SearchFailedError(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Comparable search returned non-JSON body: {e}")
            raise SearchFailedError("Comparable search returned an unreadable response",
                                    status_code=response.status_code) from e

        return parse_comparables(payload, status_code=response.status_code)


def parse_comparables(payload, status_code: Optional[int] = None) -> List[ComparableResult]:
    """Validate a response body into ordered ComparableResult records."""
    if not isinstance(payload, list):
        logger.error(f"Comparable search payload is {type(payload).__name__}, expected a list")
        raise SearchFailedError("Comparable search returned an unexpected response", status_code=status_code)

    results = []
    for i, item in enumerate(payload):
        try:
            results.append(ComparableResult.model_validate(item))
        except PayloadError as e:
            logger.error(f"Comparable #{i} failed validation: {e.error_count()} error(s)")
            raise SearchFailedError("Comparable search returned an unexpected response",
                                    status_code=status_code) from e

    logger.info(f"Comparable search returned {len(results)} result(s)")
    return results
