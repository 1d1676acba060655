"""Runtime configuration for the transfer Lambda."""

from config.settings import Settings  # noqa: F401
