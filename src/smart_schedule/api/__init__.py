"""HTTP API for Smart Schedule."""
