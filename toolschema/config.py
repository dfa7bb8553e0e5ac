"""Load and validate configuration from environment."""
import os

from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CLI output
TOOLSCHEMA_JSON_INDENT = int(os.getenv("TOOLSCHEMA_JSON_INDENT", "2"))
# Optional "package.module:ClassName" used when the CLI is given no target
TOOLSCHEMA_DEFAULT_TARGET = os.getenv("TOOLSCHEMA_DEFAULT_TARGET")


def validate_for_cli(target: str | None) -> str:
    """Return the CLI target (argument or TOOLSCHEMA_DEFAULT_TARGET), or raise if missing/malformed."""
    target = target or TOOLSCHEMA_DEFAULT_TARGET
    if not target:
        raise ValueError("A target is required: pass module:Class or set TOOLSCHEMA_DEFAULT_TARGET in .env.")
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Invalid target {target!r}. Expected the form package.module:ClassName.")
    return target
