"""Top‑level package for Workflow Approver.

This package decides which GitHub Actions runs that are waiting in the
``action_required`` state can be approved automatically, and approves them.
See `README.md` for more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
