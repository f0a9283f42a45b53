# topmark:header:start
#
#   project      : API Surface
#   file         : __main__.py
#   file_relpath : src/apisurface/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m apisurface``."""

from __future__ import annotations

from apisurface.cli.main import cli

if __name__ == "__main__":
    cli()
