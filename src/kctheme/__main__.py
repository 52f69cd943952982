"""Allow ``python -m kctheme``."""

from kctheme.cli import main

if __name__ == "__main__":
    main()
