"""
DuckDNS provider implementation.

DuckDNS exposes a single GET endpoint. The response body is "OK" on
success and "KO" on failure, regardless of the HTTP status code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from duckdns_updater.providers.base import BaseDNSProvider, ProviderResult

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Final, Self


# DuckDNS update endpoint
DUCKDNS_UPDATE_URL: Final[str] = "https://www.duckdns.org/update"

# Marker in the response body that signals a failed update
FAILURE_MARKER: Final[str] = "KO"


_logger = logging.getLogger(__name__)


def build_update_url(name: str, token: str) -> str:
    """
    Build the update URL for one subdomain.

    An empty "ip" lets DuckDNS use the address the request came from.

    Parameters
    ----------
    name : str
        The subdomain name.
    token : str
        The DuckDNS account token.

    Returns
    -------
    str
        The full update URL.
    """
    return DUCKDNS_UPDATE_URL + "?domains=" + name + "&token=" + token + "&ip="


class DuckDNSProvider(BaseDNSProvider):
    """
    DuckDNS provider.

    Parameters
    ----------
    client : httpx.Client | None, optional
        HTTP client to send requests with. If None, one is created with the
        library default settings and closed by `close()`.
    logger : logging.Logger | None, optional
        Logger to report to.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()
        self._logger = logger if logger is not None else _logger

    @property
    def name(self) -> str:
        """Get the provider name."""
        return "duckdns"

    def update_record(self, name: str, token: str) -> ProviderResult:
        """
        Update one DuckDNS record.

        Parameters
        ----------
        name : str
            The subdomain name.
        token : str
            The DuckDNS account token.

        Returns
        -------
        ProviderResult
            The result of the operation.
        """
        url = build_update_url(name, token)
        self._logger.debug("[duckdns] Update string: %s", url)

        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._logger.error("[duckdns] Error contacting DuckDNS server: '%s'", e)  # noqa: TRY400
            message = f"Error contacting DuckDNS for {name!r}: {e}"
            return ProviderResult(success=False, name=name, message=message)

        body = response.text
        self._logger.debug(
            "[duckdns] GET domains=%s -> %d '%s'",
            name,
            response.status_code,
            body,
        )

        if FAILURE_MARKER in body:
            message = f"Error updating {name!r} with DuckDNS"
            self._logger.error("[duckdns] %s", message)
            return ProviderResult(success=False, name=name, message=message, body=body)

        self._logger.debug("[duckdns] Updated DuckDNS for name %s", name)
        return ProviderResult(
            success=True,
            name=name,
            message=f"Updated {name} with DuckDNS",
            body=body,
        )

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
