"""CLI entry point: python -m bookshelf"""

from bookshelf.cli import main

if __name__ == "__main__":
    main(prog_name="bookshelf")
