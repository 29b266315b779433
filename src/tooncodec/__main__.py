"""
Entry point for running tooncodec as a module.

Allows running the command line via:
    python -m tooncodec
"""

from tooncodec.cli import main

if __name__ == "__main__":
    main()
