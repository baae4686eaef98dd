"""Allow running convit as `python -m convit`."""

from convit.cli import main

if __name__ == "__main__":
    main()
