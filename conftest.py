"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import os
import sys

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Make the in-tree package importable without an install
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
