# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __main__.py
#   file_relpath : src/headercomment/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Allow ``python -m headercomment``."""

from __future__ import annotations

from headercomment.cli.main import cli

if __name__ == "__main__":
    cli()
