"""Make ``pytest`` from the repo root import ``kanban`` from ``src/``.

An installed copy of the package elsewhere on the interpreter's path would
otherwise shadow the working tree.
"""

import importlib
import sys
from pathlib import Path

_src = str(Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
    # Drop any kanban modules imported before src/ was on the path.
    for mod_name in [m for m in sys.modules if m == "kanban" or m.startswith("kanban.")]:
        del sys.modules[mod_name]
    importlib.invalidate_caches()
