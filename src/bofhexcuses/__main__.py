"""
Run with: python -m bofhexcuses
"""
import sys

from bofhexcuses.main import main

if __name__ == "__main__":
    sys.exit(main())
