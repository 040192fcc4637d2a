from duckdns_updater.cli import main

main()
