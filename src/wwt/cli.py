"""
CLI for wwt.

Minimal CLI using stdlib for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    wwt remember <name> <description>   # alias: set
    wwt find <description>              # alias: get
    wwt forget <name>                   # alias: delete
    wwt --help                          # Show help
"""

import sys

HELP = """wwt - what was that? A memory aid for the things you keep forgetting.

Usage:
    wwt [--store-path PATH] <command> [args]

Commands:
    wwt remember <name> <description>   Remember a thing and its description (alias: set)
    wwt find [description]              Find things by fuzzy description (alias: get)
    wwt forget <name>                   Forget a thing (alias: delete)

Options:
    wwt --help, -h                      Show this help
    wwt --version, -v                   Show version
    --store-path PATH                   Custom path to the store file

Environment:
    WWT_STORE_PATH                      Custom path to the store file
    WWT_LOG_LEVEL                       Log level (default: WARNING)

Examples:
    wwt remember "ls" "list files"
    wwt remember "ls -l" "list files with longer format"
    wwt find "list files"
    wwt forget "ls"

find prints each match as "<name> -> <description>" and exits 1
if nothing matches. Running find with no description lists everything."""

COMMAND_HELP = {
    "remember": """Usage: wwt remember <name> <description>

Remember a thing and its description. Remembering an existing name
replaces its description.

Example:
    wwt remember "ls" "list files\"""",
    "find": """Usage: wwt find [description]

Find the thing using a description. The description is fuzzy-matched:
its characters must appear in order in the stored description.

Examples:
    $ wwt find "list files"
    ls -> list files
    ls -l -> list files with longer format""",
    "forget": """Usage: wwt forget <name>

Forget a thing. The exact name is required; use `wwt find` to look it up.

Example:
    wwt forget "ls\"""",
}

ALIASES = {
    "remember": "remember",
    "set": "remember",
    "find": "find",
    "get": "find",
    "forget": "forget",
    "delete": "forget",
}


def print_help() -> None:
    """Print help message."""
    print(HELP)


def print_version() -> None:
    """Print version."""
    from wwt import __version__
    print(f"wwt {__version__}")


def usage_error(command: str) -> int:
    """Print the usage line for a command to stderr."""
    usage = COMMAND_HELP[command].splitlines()[0]
    print(f"Error: wrong number of arguments. {usage}", file=sys.stderr)
    return 1


def configure_logging(config: dict) -> None:
    """Send log records to stderr at the configured level."""
    import logging

    from wwt.config import get_log_level

    level = logging.getLevelName(get_log_level(config))
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
        stream=sys.stderr,
        force=True,
    )


def open_store(store_path: str | None):
    """
    Load config, set up logging and open the store.

    A broken config.toml is only fatal when the store path has to come
    from it; with --store-path or WWT_STORE_PATH it is reported and the
    defaults are used.
    """
    import logging
    import os

    from wwt.config import STORE_PATH_ENV, get_default_config, get_store_path, load_config
    from wwt.errors import ConfigError
    from wwt.store import Store

    config_error = None
    try:
        config = load_config()
    except ConfigError as e:
        if not (store_path or os.environ.get(STORE_PATH_ENV)):
            raise
        config = get_default_config()
        config_error = e

    configure_logging(config)
    if config_error:
        logging.getLogger(__name__).warning("Ignoring config.toml: %s", config_error)

    return Store(get_store_path(store_path, config))


def cmd_remember(args: list[str], store_path: str | None) -> int:
    """Remember a thing and its description."""
    if len(args) != 2:
        return usage_error("remember")

    name, description = args
    store = open_store(store_path)
    store.set(name, description)
    return 0


def cmd_find(args: list[str], store_path: str | None) -> int:
    """Find things whose description fuzzy-matches the query."""
    query = " ".join(args)

    store = open_store(store_path)
    matches = store.find(query)

    if not matches:
        print("No matches found.", file=sys.stderr)
        return 1

    for name, description in matches:
        print(f"{name} -> {description}")
    return 0


def cmd_forget(args: list[str], store_path: str | None) -> int:
    """Forget a thing."""
    if len(args) != 1:
        return usage_error("forget")

    store = open_store(store_path)
    store.delete(args[0])
    return 0


COMMANDS = {
    "remember": cmd_remember,
    "find": cmd_find,
    "forget": cmd_forget,
}


def split_store_path(args: list[str]) -> tuple[str | None, list[str]]:
    """
    Pull --store-path out of the leading options.

    Raises ValueError if the flag has no value.
    """
    store_path = None
    rest = list(args)

    while rest and rest[0].startswith("--store-path"):
        flag = rest.pop(0)
        if flag.startswith("--store-path="):
            store_path = flag.split("=", 1)[1]
        elif flag == "--store-path":
            if not rest:
                raise ValueError("--store-path requires a value")
            store_path = rest.pop(0)
        else:
            rest.insert(0, flag)
            break

    return store_path, rest


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    from wwt.errors import StoreError

    args = sys.argv[1:] if argv is None else list(argv)

    try:
        store_path, args = split_store_path(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args:
        print_help()
        return 1

    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    command = ALIASES.get(first_arg)
    if command is None:
        print(f"Error: unknown command '{first_arg}'. See 'wwt --help'.", file=sys.stderr)
        return 1

    rest = args[1:]
    if rest and rest[0] in ("--help", "-h"):
        print(COMMAND_HELP[command])
        return 0

    try:
        return COMMANDS[command](rest, store_path)
    except StoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
