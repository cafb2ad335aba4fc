"""Identity infrastructure: persistence, HTTP and mapping adapters."""
