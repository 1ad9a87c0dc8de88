"""Interface layer (HTTP)."""
