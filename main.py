#!/usr/bin/env python3
"""
ttyline - Main entry point.
"""

from ttyline.main import main


if __name__ == "__main__":
    main()
