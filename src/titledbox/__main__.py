"""Allow ``python -m titledbox``."""

from .cli.commands import main

if __name__ == "__main__":
    main()
