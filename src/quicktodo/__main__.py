"""Allow ``python -m quicktodo``."""

from quicktodo.cli import main

if __name__ == "__main__":
    main()
