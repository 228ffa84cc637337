"""Main entry point for running algolens as a module."""

from .cli import main

if __name__ == "__main__":
    main()
