"""Secret redaction utilities.

Failure messages can echo response bodies or request details back to the
workflow log.  This module removes the configured token and common GitHub
token patterns from such text, substituting ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub tokens: ghp_, gho_, ghu_, ghs_, ghr_ and fine-grained PATs
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    # Authorization header values
    re.compile(r"(?:Bearer|token)\s+[A-Za-z0-9\-\._~\+/]{20,}=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Return ``text`` with secrets and token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: iterable of secret strings to redact
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
