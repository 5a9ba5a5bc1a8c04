"""Allow running as ``python -m accessible_colors``."""

from accessible_colors.cli import main

if __name__ == "__main__":
    main()
