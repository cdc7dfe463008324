"""Content digests used to detect edits made directly inside Anki."""

from __future__ import annotations

import hashlib
import logging

LOGGER = logging.getLogger(__name__)

# Stored inside every synced field; must stay stable across releases.
DIGEST_ALGORITHM = "sha256"


async def hash_content(content: str) -> str:
    """Return the hex digest of ``content`` (UTF-8 encoded)."""
    digest = hashlib.new(DIGEST_ALGORITHM, content.encode("utf-8")).hexdigest()
    LOGGER.debug("field.hash len=%d digest=%s", len(content), digest[:12])
    return digest
