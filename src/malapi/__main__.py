"""Allow ``python -m malapi``."""

from malapi.cli import main

if __name__ == "__main__":
    main()
