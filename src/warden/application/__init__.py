"""Application layer: use cases built on warden_auth."""
