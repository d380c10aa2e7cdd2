"""HTTP API for chessmoves."""
