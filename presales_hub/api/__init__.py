"""HTTP API for Presales Hub."""
