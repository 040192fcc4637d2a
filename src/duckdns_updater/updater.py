"""
Update dispatcher for DuckDNS Updater.

Names are updated one at a time. A failure for one name is recorded and
the remaining names are still attempted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from duckdns_updater.providers.duckdns import DuckDNSProvider

if TYPE_CHECKING:
    from duckdns_updater.models import UpdateRequest
    from duckdns_updater.providers.base import BaseDNSProvider


_logger = logging.getLogger(__name__)


class MissingConfigError(Exception):
    """Raised when no source provided both a token and at least one name."""


class UpdateError(Exception):
    """
    Exception raised when one or more names failed to update.

    Attributes
    ----------
    failures : list[str]
        One message per failed name, in update order.
    """

    def __init__(self, failures: list[str]) -> None:
        self.failures = failures
        super().__init__("\n".join(failures))


def make_update(
    request: UpdateRequest,
    provider: BaseDNSProvider | None = None,
    logger: logging.Logger = _logger,
) -> None:
    """
    Update every name in the request.

    Parameters
    ----------
    request : UpdateRequest
        The merged update request.
    provider : BaseDNSProvider | None, optional
        Provider to update through. If None, a DuckDNS provider is created
        for this call and closed afterwards.
    logger : logging.Logger, optional
        Logger to report to.

    Raises
    ------
    MissingConfigError
        If the request has no token or no names.
    UpdateError
        If any name failed to update.
    """
    logger.debug("Dumping update params: names=%s token=%s", request.names, request.token)
    if not request.valid:
        msg = "Arguments not set for update!"
        raise MissingConfigError(msg)

    owned = provider is None
    if provider is None:
        provider = DuckDNSProvider(logger=logger)

    errors: list[str] = []
    try:
        for name in request.names:
            result = provider.update_record(name, request.token)
            if not result.success:
                errors.append(result.message)
    finally:
        if owned:
            provider.close()

    if errors:
        raise UpdateError(errors)
