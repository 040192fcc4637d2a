"""
Base class for DNS providers.

This module defines the abstract base class that DNS provider
implementations must inherit from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProviderResult:
    """
    Result of a provider operation.

    Attributes
    ----------
    success : bool
        Whether the operation was successful.
    name : str
        The subdomain name the operation was for.
    message : str
        Human-readable message.
    body : str | None
        The raw response body, if one was read.
    """

    def __init__(
        self,
        *,
        success: bool,
        name: str,
        message: str,
        body: str | None = None,
    ) -> None:
        self.success = success
        self.name = name
        self.message = message
        self.body = body


class BaseDNSProvider(ABC):
    """
    Abstract base class for DNS providers.

    All DNS provider implementations must inherit from this class
    and implement the `update_record` method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Get the provider name.

        Returns
        -------
        str
            Provider name identifier.
        """
        ...

    @abstractmethod
    def update_record(self, name: str, token: str) -> ProviderResult:
        """
        Point a record at the caller's current address.

        Parameters
        ----------
        name : str
            The subdomain name (without the provider's domain).
        token : str
            The account token.

        Returns
        -------
        ProviderResult
            The result of the operation.
        """
        ...

    def close(self) -> None:  # noqa: B027
        """Release any resources held by the provider."""
