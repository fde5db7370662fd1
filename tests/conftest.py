"""Pytest configuration.

Adds the repository root to sys.path so `commissioning`, `field_schemas` and
`terminal` import without installing the project.
"""

import os
import sys


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
