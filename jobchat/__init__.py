"""jobchat - conversation and messaging core for a two-sided job marketplace."""

__version__ = "1.0.0"
