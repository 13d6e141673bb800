"""Path classification for pull request file lists.

Matching is substring containment, not glob or exact equality: an entry
such as ``docs/`` matches any path containing ``docs/``, including
``not-docs/x``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..config import Config
from ..constants import WORKFLOWS_DIR
from ..models import SkipReason


def matching_fragment(path: str, fragments: Iterable[str]) -> str | None:
    """Return the first fragment contained in ``path``, or ``None``."""
    for fragment in fragments:
        if fragment in path:
            return fragment
    return None


@dataclass(frozen=True)
class PathPolicy:
    """Dangerous and safe path fragments for one pass."""

    dangerous: tuple[str, ...] = (WORKFLOWS_DIR,)
    safe: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if WORKFLOWS_DIR not in self.dangerous:
            object.__setattr__(self, "dangerous", (*self.dangerous, WORKFLOWS_DIR))

    @classmethod
    def from_config(cls, config: Config) -> PathPolicy:
        return cls(dangerous=tuple(config.dangerous_files), safe=tuple(config.safe_files))

    def dangerous_path(self, paths: Iterable[str]) -> str | None:
        """Return the first path that contains a dangerous fragment."""
        for path in paths:
            if matching_fragment(path, self.dangerous) is not None:
                return path
        return None

    def unsafe_path(self, paths: Iterable[str]) -> str | None:
        """Return the first path outside every safe fragment.

        Always ``None`` when no safe fragments are configured.
        """
        if not self.safe:
            return None
        for path in paths:
            if matching_fragment(path, self.safe) is None:
                return path
        return None

    def classify(self, paths: Iterable[str]) -> tuple[SkipReason | None, str | None]:
        """Return the rejection reason and offending path, or ``(None, None)``.

        Dangerous paths take precedence over unsafe ones.
        """
        paths = list(paths)
        offending = self.dangerous_path(paths)
        if offending is not None:
            return SkipReason.DANGEROUS_PATH, offending
        offending = self.unsafe_path(paths)
        if offending is not None:
            return SkipReason.UNSAFE_PATH, offending
        return None, None
