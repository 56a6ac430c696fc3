from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from cadr.errors import CadrConfigError


# Resolve installation dir (cadr package directory)
_CADR_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _CADR_DIR / 'prelude' / 'core.scm'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var, '').strip()
    return Path(raw) if raw else default


def get_prelude_path() -> Path:
    return path_from_env('CADR_PRELUDE_PATH', _DEFAULT_PRELUDE)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('CADR_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise CadrConfigError(f"CADR_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    return limit if limit > 0 else None
