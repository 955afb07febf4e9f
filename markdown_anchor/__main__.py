"""Allow ``python -m markdown_anchor``."""

from markdown_anchor.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
