"""
DuckDNS Updater - A command-line client for DuckDNS record updates.

This package resolves a token and a list of subdomain names from the command
line, the environment or a YAML file, and updates each DuckDNS record.
"""

__version__ = "0.1.0"
__author__ = "DuckDNS Updater Contributors"
