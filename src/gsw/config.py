"""Configuration helpers for gsw scans.

Combines CLI arguments with environment defaults and validates the result
with the ``ScanConfig`` Pydantic model.

Environment:
    ``GSW_JOBS``: default worker-pool size for ``--parallel`` scans.
    ``GSW_GIT``: git executable to invoke (default ``git``).
"""

import os
from pathlib import Path

from pydantic import ValidationError

from .io import die
from .models import ScanConfig
from .scan import default_jobs

JOBS_ENV_VAR = "GSW_JOBS"
GIT_ENV_VAR = "GSW_GIT"


def read_arg(args: object | None, name: str) -> object | None:
    """Return an attribute from an argument namespace, or ``None``.

    Example:
        >>> from types import SimpleNamespace
        >>> read_arg(SimpleNamespace(dir="."), "dir")
        '.'
        >>> read_arg(None, "dir") is None
        True
    """
    if args is None:
        return None
    return getattr(args, name, None)


def env_jobs() -> int | None:
    """Return ``GSW_JOBS`` as an int when set."""
    raw = os.environ.get(JOBS_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        die(f"invalid {JOBS_ENV_VAR} value: {raw!r}")


def resolve_root(value: object | None) -> Path:
    """Resolve the scan root to an absolute existing directory."""
    raw = str(value) if value not in (None, "") else "."
    try:
        root = Path(raw).expanduser().resolve()
    except (OSError, RuntimeError) as exc:
        die(f"cannot resolve path {raw}: {exc}")
    if not root.exists():
        die(f"scan root does not exist: {root}")
    if not root.is_dir():
        die(f"scan root is not a directory: {root}")
    return root


def resolve_scan_config(args: object) -> ScanConfig:
    """Build a validated ``ScanConfig`` from CLI arguments.

    Args:
        args: Namespace with ``dir``, ``show_clean``, ``verbose``,
            ``max_depth``, ``parallel``, ``jobs`` and ``json_output``.

    Returns:
        Validated configuration. Exits on invalid input.
    """
    root = resolve_root(read_arg(args, "dir"))
    jobs = read_arg(args, "jobs")
    if jobs is None:
        jobs = env_jobs() or default_jobs()
    max_depth = read_arg(args, "max_depth")
    payload = {
        "root": root,
        "show_clean": bool(read_arg(args, "show_clean")),
        "verbose": bool(read_arg(args, "verbose")),
        "max_depth": 10 if max_depth is None else max_depth,
        "parallel": bool(read_arg(args, "parallel")),
        "jobs": jobs,
        "json_output": bool(read_arg(args, "json_output")),
        "git_path": read_arg(args, "git_path") or os.environ.get(GIT_ENV_VAR),
    }
    try:
        return ScanConfig.model_validate(payload)
    except ValidationError as exc:
        die(f"invalid scan options:\n{exc}")
