"""Exceptions shared across services."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}"
        )
