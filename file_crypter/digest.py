"""
File Digest — SHA-224
=====================
Streaming file hash used to confirm that a decrypted file matches its
source byte for byte, without holding either file in memory.

Dependencies: cryptography >= 41.0
"""

from cryptography.hazmat.primitives import hashes


def file_digest(path: str, chunk_size: int = 1024) -> str:
    """Hex SHA-224 of the file at `path`."""
    h = hashes.Hash(hashes.SHA224())
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.finalize().hex()


def files_match(a: str, b: str) -> bool:
    return file_digest(a) == file_digest(b)
