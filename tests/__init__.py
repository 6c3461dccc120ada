"""Test package initialisation.

The application packages (``modules`` and ``utils``) live one directory above
this package and are namespace packages, so they are not importable when the
tests run from an uninstalled checkout.  Append the repository root to
``sys.path`` once here instead of in every test module.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
