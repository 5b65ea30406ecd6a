from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (qlisp package directory)
_QLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _QLISP_DIR / 'prelude'
_DEFAULT_PRELUDE_FILE = _DEFAULT_PRELUDE_DIR / 'std.lisp'

# Extension appended to module names given to `import`
MODULE_SUFFIX = '.lisp'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_module_roots() -> List[Path]:
    return paths_from_env('QLISP_PATH', [Path.cwd(), _DEFAULT_PRELUDE_DIR])


def get_prelude_file() -> Path:
    roots = paths_from_env('QLISP_PRELUDE_PATH', [_DEFAULT_PRELUDE_FILE])
    # treat as a single file; if a directory is set, look for std.lisp inside it
    p = roots[0]
    return p / _DEFAULT_PRELUDE_FILE.name if p.is_dir() else p
