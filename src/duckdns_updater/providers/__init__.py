"""DNS providers for DuckDNS Updater."""
