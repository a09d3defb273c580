"""courtbot - chat assistant for scheduling court sessions."""

__version__ = "0.1.0"
