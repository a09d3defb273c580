"""Chat domain model - invocation sources and inline keyboards."""
