# SPDX-License-Identifier: MIT
"""Package entry point — run the scanner via `python -m mcp_secure`."""

from mcp_secure.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
