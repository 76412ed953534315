"""Pytest configuration.

The repository uses a flat layout without requiring an installed package. This conftest ensures tests
can import `querymeta` when running `pytest` from a checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure `import querymeta` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
