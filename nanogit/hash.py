"""Content-addressable hashing utilities."""

import hashlib
import json
from typing import Any

# Length of every commit id handed out by nanogit.
ID_LENGTH = 12


def compute_hash(data: dict[str, Any], length: int = ID_LENGTH) -> str:
    """
    Compute SHA256 hash of a dictionary.
    
    The dictionary is serialized to JSON with sorted keys for deterministic hashing.
    
    Args:
        data: Dictionary to hash.
        length: Number of leading hex characters to keep.
    
    Returns:
        Hexadecimal SHA256 hash prefix.
    """
    serialized = json.dumps(data, sort_keys=True, ensure_ascii=False, default=str)
    full_hash = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return full_hash[:length]
