"""
file_crypter
============
File encryption with a persisted byte substitution table.

Components:
    SBox          — random permutation of 0..255, stored in a 256-byte key file
    StreamCipher  — S-box substitution XOR a rotating counter keystream,
                    for buffers and for files in 1024-byte chunks
    file_digest   — streaming SHA-224, for checking file round trips

Not a secure cipher. The keystream repeats every 256 bytes.

License: GPL-3.0-or-later
"""

__version__  = "0.1.0"

from .errors  import FileCrypterError, InvalidSBoxError
from .sbox    import SBox, SBoxLoad
from .stream  import StreamCipher, encrypt_file, decrypt_file
from .digest  import file_digest, files_match

__all__ = [
    "FileCrypterError",
    "InvalidSBoxError",
    "SBox",
    "SBoxLoad",
    "StreamCipher",
    "encrypt_file",
    "decrypt_file",
    "file_digest",
    "files_match",
]
