"""Entry point for running the demo as a module."""

from .demo import main

if __name__ == "__main__":
    main()
