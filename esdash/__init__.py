"""ESDash: a read-only terminal dashboard for search clusters."""

__version__ = "0.1.0"
