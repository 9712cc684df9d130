"""
GitHub webhook signature verification.
"""

import hashlib
import hmac
from typing import Optional

SIGNATURE_PREFIX = "sha256="


def compute_signature(body: bytes, secret: str) -> str:
    """``sha256=<hex>`` signature GitHub would send for ``body``."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(body: bytes, signature_header: Optional[str], secret: str) -> bool:
    """Check an ``X-Hub-Signature-256`` header against the raw body.

    An empty ``secret`` disables verification and every request is accepted.
    Never raises; malformed headers simply fail verification.
    """
    if not secret:
        return True

    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False

    try:
        received = bytes.fromhex(signature_header[len(SIGNATURE_PREFIX):])
    except ValueError:
        return False

    expected = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
    return hmac.compare_digest(expected, received)
