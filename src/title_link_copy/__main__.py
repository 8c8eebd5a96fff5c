"""Allow `python -m title_link_copy`."""

from title_link_copy.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
