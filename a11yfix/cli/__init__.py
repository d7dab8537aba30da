"""Command line interface: ``a11yfix`` console script."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting."""
    from a11yfix.api.config.get_package_version import get_package_version
    from a11yfix.cli._create_app import _create_app

    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-v"):
        print(f"a11yfix {get_package_version()}")
        return 0

    try:
        _create_app()(args)
    except SystemExit as exit_:
        if exit_.code is None:
            return 0
        return exit_.code if isinstance(exit_.code, int) else 1
    return 0
