"""Build Meta Conversions API requests from page, track and user events."""

__version__ = "1.0.0"
__all__ = ["component", "events", "payload"]