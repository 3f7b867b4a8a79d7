from __future__ import annotations

"""
Module execution entry point ('python -m ooxmltree').
"""

import sys

from ooxmltree.main import main

if __name__ == "__main__":
    sys.exit(main())
