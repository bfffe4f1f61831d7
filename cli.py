#!/usr/bin/env python3
"""
CLI entry point for the code similarity checker
"""

import sys
import os

# Add the current directory to the path so we can import code_similarity
sys.path.insert(0, os.path.dirname(__file__))

from code_similarity.checker import main

if __name__ == "__main__":
    sys.exit(main())
