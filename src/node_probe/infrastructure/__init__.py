"""Network clients for the node's RPC and metrics endpoints."""
