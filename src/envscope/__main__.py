"""Allow ``python -m envscope``."""

from envscope.cli.main import main

if __name__ == "__main__":
    main()
