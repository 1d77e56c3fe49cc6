"""HTTP API for markview."""
