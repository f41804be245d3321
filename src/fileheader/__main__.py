# topmark:header:start
#
#   project      : fileheader
#   file         : __main__.py
#   file_relpath : src/fileheader/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m fileheader``."""

from fileheader.cli.main import cli

if __name__ == "__main__":
    cli()
