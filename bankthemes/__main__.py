"""Entry point for `python -m bankthemes`."""

from bankthemes.app import main

if __name__ == "__main__":
    main()
