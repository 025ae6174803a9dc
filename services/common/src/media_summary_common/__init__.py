from media_summary_common.exceptions import ConfigurationError
from media_summary_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "ConfigurationError",
]
