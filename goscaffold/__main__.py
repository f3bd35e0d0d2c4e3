"""Allow ``python -m goscaffold``."""

from goscaffold.cli import main

if __name__ == "__main__":
    main()
