#!/usr/bin/env python3
"""
GitHub contribution "text writer" via backdated commits.

What it does:
- Renders a message into a 7-row pixel grid from a fixed glyph table.
- Centers it in the rolling 53-week window the contribution graph shows.
- Creates commits dated on the lit days, oldest first, in your repo.

Usage (inside your repo):
  python main.py preview "AWS HERO"
  python main.py create AI --intensity=ultra --dry-run
  python main.py create AI --intensity=ultra
  python main.py replace "NEW MESSAGE"
  python main.py status

Same as the installed `contribwriter` command.
"""

import sys

from contribwriter.cli import main

if __name__ == "__main__":
    sys.exit(main())
