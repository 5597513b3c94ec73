"""HTML rendering for the status page."""
