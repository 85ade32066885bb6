"""
B-Minor Lexer Configuration
===========================

Run settings for a tokenization run. Configuration can come from:
- Default values (defined here)
- Environment variables (``LexerConfig.from_env``)
- Command-line options (applied by the CLI on top of the environment)

Environment variables:
    BMINOR_MAX_IDENTIFIERS: Identifier table capacity (integer)
    BMINOR_FILENAME: Name shown in diagnostics for unnamed input
"""

from dataclasses import dataclass
import logging
import os

# Default identifier table capacity
DEFAULT_MAX_IDENTIFIERS = 1000

logger = logging.getLogger(__name__)


@dataclass
class LexerConfig:
    """
    Configuration for a tokenization run.

    Attributes:
        max_identifiers: Maximum number of distinct identifiers (default: 1000)
        filename: Source name used in error messages (default: "<input>")
    """

    max_identifiers: int = DEFAULT_MAX_IDENTIFIERS
    filename: str = "<input>"

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Invalid values are ignored and the default is kept.

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if max_identifiers := os.environ.get("BMINOR_MAX_IDENTIFIERS"):
            try:
                value = int(max_identifiers)
            except ValueError:
                logger.warning(f"Ignoring invalid BMINOR_MAX_IDENTIFIERS={max_identifiers!r}")
            else:
                if value > 0:
                    config.max_identifiers = value
                else:
                    logger.warning(f"Ignoring non-positive BMINOR_MAX_IDENTIFIERS={value}")

        if filename := os.environ.get("BMINOR_FILENAME"):
            config.filename = filename

        return config
