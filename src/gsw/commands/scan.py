"""Implementation for the ``gsw`` scan command."""

from __future__ import annotations

from .. import config, discovery, log, render
from ..io import say
from ..scan import scan_repositories


def scan(args: object) -> None:
    """Scan a directory tree and report branch status for each repository.

    Args:
        args: CLI argument object (see ``config.resolve_scan_config``).

    Returns:
        None. Repository failures are reported in the output; the command
        exits non-zero only when the scan root cannot be resolved.

    Example:
        $ gsw --dir ~/src --parallel --show-clean
    """
    scan_config = config.resolve_scan_config(args)

    log.info(f"Scanning directory: {scan_config.root}")
    log.info(f"Show clean branches: {scan_config.show_clean}")
    log.info(f"Parallel processing: {scan_config.parallel}")

    repos = discovery.find_repositories(scan_config.root, scan_config.max_depth)
    statuses = scan_repositories(
        repos,
        include_clean=scan_config.show_clean,
        parallel=scan_config.parallel,
        jobs=scan_config.jobs,
        git_path=scan_config.git_path,
    )

    if scan_config.json_output:
        say(render.to_json(statuses))
        return

    render.render_text(
        statuses,
        show_clean=scan_config.show_clean,
        repo_count=len(repos),
        console=log.console(stderr=False),
    )
