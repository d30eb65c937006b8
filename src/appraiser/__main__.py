"""Allow ``python -m appraiser``."""

from appraiser.cli.main import main

if __name__ == "__main__":
    main()
