"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config, CredentialsConfig, TriageConfig


def load_config(token: Optional[str] = None) -> Config:
    """
    Load and validate configuration from environment variables.

    Reads from .env file in the project root and validates credentials
    and triage settings using Pydantic models.

    Args:
        token: GitHub token given on the command line. Takes precedence
               over GITHUB_TOKEN from the environment.

    Returns:
        Config: Validated configuration object

    Raises:
        SystemExit: If configuration is invalid or no token is available
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    try:
        config = Config(
            credentials=CredentialsConfig(
                github_token=token or os.getenv("GITHUB_TOKEN"),
            ),
            triage=TriageConfig(
                maintainers=os.getenv("TRIAGE_MAINTAINERS", ""),
                per_page=os.getenv("GITHUB_PER_PAGE", "100"),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Missing or invalid fields:", file=sys.stderr)

        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)

        print("\nHint: Copy .env.example to .env and fill in your credentials.", file=sys.stderr)
        sys.exit(1)

    if not config.credentials.github_token:
        print("❌ No GitHub token: pass --token or set GITHUB_TOKEN in .env", file=sys.stderr)
        sys.exit(1)

    return config
