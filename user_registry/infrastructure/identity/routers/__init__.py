"""Identity HTTP routers."""
