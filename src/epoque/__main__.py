"""Allow `python -m epoque`."""

from epoque.cli import main

if __name__ == "__main__":
    main()
