from __future__ import annotations

import sys

from conkycal_core.logging_setup import install_crash_hooks

try:
    # Normal package import path.
    from .cli import main as _cli_main
except ImportError:
    # Script entrypoint path.
    from conkycal_app.cli import main as _cli_main


def main(argv: list[str] | None = None) -> int:
    install_crash_hooks()
    args = sys.argv[1:] if argv is None else argv
    return int(_cli_main(args))


if __name__ == "__main__":
    raise SystemExit(main())
