"""RevenueCat request building and the single upstream call per request."""

import logging
from typing import Any, Iterable
from urllib.parse import quote, urljoin

import httpx

from rcframes.core.config import DEFAULT_BASE_URL, Settings
from rcframes.core.errors import DataError, UpstreamError
from rcframes.models.metrics import MetricScope

logger = logging.getLogger(__name__)

# Inbound ``rc.foo=bar`` is forwarded upstream as ``foo=bar``
FORWARD_PREFIX = "rc."

# Forwarded directly for the legacy chart scope, with ``default_<name>`` settings
CHART_PARAMETERS = ("period", "granularity", "start", "end", "app_id")


def ensure_trailing_slash(url: str) -> str:
    """Append ``/`` so relative paths join below the base path."""
    return url if url.endswith("/") else f"{url}/"


def resolve_path(
    override_path: str | None,
    project_id: str,
    scope: MetricScope,
    metric: str,
) -> str:
    """Resolve the upstream path relative to the base URL."""
    if override_path:
        trimmed = override_path[1:] if override_path.startswith("/") else override_path
        if trimmed:
            return trimmed

    project = quote(project_id, safe="")
    if scope is MetricScope.OVERVIEW:
        return f"projects/{project}/metrics/overview"
    return f"projects/{project}/charts/{quote(metric, safe='')}"


def forwarded_params(
    query_items: Iterable[tuple[str, str]],
    scope: MetricScope,
    settings: Settings,
) -> dict[str, str]:
    """Select the inbound query parameters to send upstream."""
    params: dict[str, str] = {}
    first_values: dict[str, str] = {}

    for key, value in query_items:
        first_values.setdefault(key, value)
        if key.startswith(FORWARD_PREFIX) and len(key) > len(FORWARD_PREFIX):
            params[key[len(FORWARD_PREFIX):]] = value

    if scope is MetricScope.CHART:
        for name in CHART_PARAMETERS:
            value = first_values.get(name)
            if value is None:
                value = getattr(settings, f"default_{name}")
            if value:
                params[name] = value

    return params


def build_upstream_url(
    metric: str,
    project_id: str,
    scope: MetricScope,
    query_items: Iterable[tuple[str, str]],
    settings: Settings,
) -> str:
    """Build the full RevenueCat URL for one inbound request."""
    base = (settings.revenuecat_base_url or "").strip() or DEFAULT_BASE_URL
    path = resolve_path(settings.revenuecat_endpoint_path, project_id, scope, metric)

    url = httpx.URL(urljoin(ensure_trailing_slash(base), path))
    params = forwarded_params(query_items, scope, settings)
    if params:
        url = url.copy_merge_params(params)

    return str(url)


class RevenueCatClient:
    """Thin async client for the RevenueCat REST API.

    The caller's token is passed straight through as a bearer credential and
    never appears in the URL or the logs.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    async def fetch_payload(self, url: str, token: str) -> Any:
        """GET ``url`` and return the parsed JSON body.

        Raises:
            UpstreamError: non-2xx status (passed through) or transport failure
            DataError: body is not valid JSON
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"RevenueCat request failed: {type(e).__name__}")
            raise UpstreamError(
                f"Could not reach RevenueCat: {type(e).__name__}", 502
            ) from e

        if not response.is_success:
            logger.warning(f"RevenueCat responded with {response.status_code}")
            raise UpstreamError(
                f"RevenueCat responded with {response.status_code} {response.reason_phrase}".rstrip(),
                response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise DataError("RevenueCat returned a response that is not valid JSON") from e
