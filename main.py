"""Entry: print tool specifications for a class via the CLI."""
import sys

from toolschema.config import LOG_LEVEL
from toolschema.logging_utils import configure_logging


def main() -> None:
    configure_logging(LOG_LEVEL)
    if len(sys.argv) < 2:
        print("Usage: python main.py schema package.module:ClassName", file=sys.stderr)
        sys.exit(1)
    cmd = sys.argv[1].lower()
    if cmd == "schema":
        from toolschema.cli import run_cli
        run_cli()
    else:
        print("Unknown command. Use: schema", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
