"""Allow running gitmsglint via ``python -m gitmsglint``."""
from gitmsglint.cli import main

if __name__ == "__main__":
    main()
