"""
Fingerprint — deterministic 64-bit code from text
"""

import hashlib

def derive_code(text) -> int:
    if isinstance(text, str):
        text = text.encode("utf-8")
    digest = hashlib.sha512(text or b"").digest()
    return int.from_bytes(digest[56:], "big")
