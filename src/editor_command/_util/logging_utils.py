# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""

import time

from ..core.paths import state_root


def _log_debug(message: str) -> None:
    """Append a simple debug line to the editor-command log.

    Best-effort: writes timestamped lines to ``state_root()/editor-command.log``
    and ignores any IO error so it never raises or affects callers.
    """
    try:
        log_path = state_root() / "editor-command.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        pass
