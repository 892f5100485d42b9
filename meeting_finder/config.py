"""Configuration for the meeting finder."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class FinderConfig:
    """Defaults used by the command-line interface."""

    default_duration: int = 30  # Minutes
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "FinderConfig":
        """Load configuration from environment variables."""
        return cls(
            default_duration=int(os.getenv("MEETING_FINDER_DEFAULT_DURATION", "30")),
            verbose=os.getenv("MEETING_FINDER_VERBOSE", "false").lower() == "true",
        )
