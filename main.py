"""Main entry point for File Architect."""

from filearchitect.cli import main


if __name__ == "__main__":
    main()
