"""
MiniScript source formatter.

The package rewrites MiniScript text into a canonical layout without a
parser: operator, bracket and comma spacing is normalized, redundant call
and ``if`` parentheses are removed, and indentation is recomputed from the
block keywords and multiline continuations found on each line.

The code is organised into several modules:

* ``formatting`` - the formatting pipeline.  ``format_code`` is a pure
  function from document text to formatted text.
* ``config`` - workspace configuration read from ``msfmt.toml``.
* ``cli`` - the ``msfmt`` command line (``format`` and ``lsp``).
* ``lsp`` - a language server exposing document formatting to editors.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("msfmt")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = ["__version__"]
