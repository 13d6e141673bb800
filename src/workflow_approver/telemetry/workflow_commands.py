"""GitHub Actions workflow commands.

See https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
"""

from __future__ import annotations

import os
import sys


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Emit an error annotation; the caller is responsible for the exit status."""
    print(f"::error::{_escape(message)}", file=sys.stdout, flush=True)


def set_output(name: str, value: str) -> bool:
    """Append ``name=value`` to ``$GITHUB_OUTPUT``.

    Returns ``False`` when not running inside a workflow.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return False
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")
    return True
