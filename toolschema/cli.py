"""CLI: build tool specifications for a class and print them as OpenAI tool JSON."""
import importlib
import json
import sys
from typing import Any

from toolschema.config import TOOLSCHEMA_JSON_INDENT, validate_for_cli
from toolschema.logging_utils import get_logger
from toolschema.tools.registry import ToolRegistry

logger = get_logger(__name__)


def load_target(target: str) -> Any:
    """Import "package.module:Attribute" (dotted attributes allowed) and return the attribute."""
    module_name, _, attribute = target.partition(":")
    obj: Any = importlib.import_module(module_name)
    for part in attribute.split("."):
        obj = getattr(obj, part)
    return obj


def run_cli(argv: list[str] | None = None) -> None:
    """Entry for CLI: target from argv (after 'schema') or TOOLSCHEMA_DEFAULT_TARGET."""
    # When invoked as "python main.py schema <target>", argv is [main.py, schema, target]
    argv = sys.argv if argv is None else argv
    target = validate_for_cli(argv[2] if len(argv) > 2 else None)
    logger.info("cli_target", target=target)
    registry = ToolRegistry()
    registry.register(load_target(target))
    if not len(registry):
        print(f"No @tool members found on {target}.", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(registry.get_openai_tools(), indent=TOOLSCHEMA_JSON_INDENT))
