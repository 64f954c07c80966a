"""Command-line interface."""
from strategycalc.main import main

if __name__ == "__main__":
    main()
