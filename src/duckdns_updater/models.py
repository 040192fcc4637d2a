"""
Data models for DuckDNS Updater.

This module defines the update request assembled from the configuration
sources and the shape of the YAML configuration file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UpdateRequest(BaseModel):
    """
    DuckDNS update request.

    Built once per run and filled in place from the configuration sources
    in priority order.

    Attributes
    ----------
    token : str
        The DuckDNS account token.
    names : list[str]
        Subdomain names to update, in the order they were given.
    """

    token: str = ""
    names: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        """
        Check that all parameters are set for an update.

        Returns
        -------
        bool
            True if the token and at least one name are set.
        """
        return bool(self.names) and self.token != ""


class FileConfig(BaseModel):
    """
    Contents of the YAML configuration file.

    Attributes
    ----------
    token : str
        The DuckDNS account token.
    domains : list[str]
        Subdomain names to update.
    """

    token: str = ""
    domains: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
