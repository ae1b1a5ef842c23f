"""Pytest configuration: make the linmath package importable uninstalled."""

import sys
import os

repo_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, repo_dir)
