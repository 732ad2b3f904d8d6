"""Short random identifiers for upload and download file names."""

from __future__ import annotations

import random
import string

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

UPLOAD_ID_LENGTH = 21
DOWNLOAD_ID_LENGTH = 8


def generate_id(length: int = UPLOAD_ID_LENGTH) -> str:
    """Return ``length`` alphanumeric characters (not cryptographically secure)."""

    return "".join(random.choice(ALPHABET) for _ in range(length))


__all__ = ["ALPHABET", "DOWNLOAD_ID_LENGTH", "UPLOAD_ID_LENGTH", "generate_id"]
