"""
Stream Cipher — S-Box Substitution + Counter Keystream
=======================================================
Each plaintext byte is substituted through the S-box, then XORed with
the substitution of a one-byte position counter:

    encrypt:  c = S[p] ^ S[ctr]
    decrypt:  p = S⁻¹[c ^ S[ctr]]

The counter starts at a caller-chosen value and advances by one per
byte, wrapping 255 → 0. Calls return the final counter so a stream can
be split across several buffers and still produce the same output as a
single call.

Files are processed in 1024-byte chunks with the counter carried across
chunk boundaries, starting at 0. The output is exactly as long as the
input; there is no header and no padding.

This is a toy construction. The keystream repeats every 256 bytes and
depends only on the table, not on any secret per-message state.
"""

import logging
import os
import random
from typing import Callable, Optional, Tuple, Union

from .sbox import SBox

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class StreamCipher:
    """Counter-keyed XOR stream over a shared S-box."""

    CHUNK_SIZE = 1024   # file read size in bytes

    def __init__(self, sbox: SBox):
        self._sbox = sbox
        self.persisted = True

    @classmethod
    def from_key_file(cls, path: str = SBox.DEFAULT_KEY_FILE,
                      rng: Optional[random.Random] = None) -> "StreamCipher":
        """Load the S-box stored at `path`, creating and saving one if needed."""
        loaded = SBox.load_or_create(path, rng)
        cipher = cls(loaded.sbox)
        cipher.persisted = loaded.persisted
        return cipher

    @property
    def sbox(self) -> SBox:
        return self._sbox

    # ── buffers ──────────────────────────────────────────────────────────────

    def encrypt(self, data: Union[str, BytesLike], cur: int = 0) -> Tuple[bytes, int]:
        """
        Encrypt `data` starting at counter `cur`.

        A str is taken as one byte per code point (latin-1).
        Returns (ciphertext, next counter).
        """
        if isinstance(data, str):
            try:
                data = data.encode("latin-1")
            except UnicodeEncodeError as e:
                raise ValueError("Text must only contain code points below 256.") from e
        out = bytearray(len(data))
        cur = self._encrypt_into(data, out, self._check_counter(cur))
        return bytes(out), cur

    def decrypt(self, data: BytesLike, cur: int = 0) -> Tuple[bytes, int]:
        """Decrypt `data` starting at counter `cur`. Returns (plaintext, next counter)."""
        out = bytearray(len(data))
        cur = self._decrypt_into(data, out, self._check_counter(cur))
        return bytes(out), cur

    def decrypt_text(self, data: BytesLike, cur: int = 0) -> Tuple[str, int]:
        """Decrypt and decode one byte per character."""
        plain, cur = self.decrypt(data, cur)
        return plain.decode("latin-1"), cur

    # ── files ────────────────────────────────────────────────────────────────

    def encrypt_file(self, src: str, dest: str,
                     progress_cb: Optional[Callable[[int, int], None]] = None) -> int:
        """Encrypt `src` into `dest` (created or truncated). Returns bytes written."""
        total = self._transform_file(src, dest, self._encrypt_into, progress_cb)
        logger.info(f"Encrypted {src} -> {dest} ({total} bytes)")
        return total

    def decrypt_file(self, src: str, dest: str,
                     progress_cb: Optional[Callable[[int, int], None]] = None) -> int:
        """Decrypt `src` into `dest` (created or truncated). Returns bytes written."""
        total = self._transform_file(src, dest, self._decrypt_into, progress_cb)
        logger.info(f"Decrypted {src} -> {dest} ({total} bytes)")
        return total

    def _transform_file(self, src, dest, step, progress_cb) -> int:
        buf = bytearray(self.CHUNK_SIZE)
        out = bytearray(self.CHUNK_SIZE)
        cur = 0
        done = 0
        with open(src, "rb") as fin, open(dest, "wb") as fout:
            size = os.fstat(fin.fileno()).st_size
            while True:
                n = fin.readinto(buf)
                if not n:
                    break
                view = memoryview(buf)[:n]
                cur = step(view, out, cur)
                fout.write(memoryview(out)[:n])
                done += n
                logger.debug(f"{src}: chunk of {n} bytes, counter now {cur}")
                if progress_cb:
                    progress_cb(done, size)
        return done

    # ── core ─────────────────────────────────────────────────────────────────

    def _encrypt_into(self, data: BytesLike, out: bytearray, cur: int) -> int:
        table = self._sbox.table
        for i, p in enumerate(data):
            out[i] = table[p] ^ table[cur]
            cur = (cur + 1) & 0xFF
        return cur

    def _decrypt_into(self, data: BytesLike, out: bytearray, cur: int) -> int:
        table   = self._sbox.table
        inverse = self._sbox.inverse_table
        for i, e in enumerate(data):
            out[i] = inverse[e ^ table[cur]]
            cur = (cur + 1) & 0xFF
        return cur

    @staticmethod
    def _check_counter(cur: int) -> int:
        if not 0 <= cur <= 0xFF:
            raise ValueError(f"Counter must be in 0..255, got {cur}.")
        return cur


def encrypt_file(src: str, dest: str, key_file: str = SBox.DEFAULT_KEY_FILE) -> int:
    """Encrypt `src` into `dest` with the S-box stored at `key_file`."""
    return StreamCipher.from_key_file(key_file).encrypt_file(src, dest)


def decrypt_file(src: str, dest: str, key_file: str = SBox.DEFAULT_KEY_FILE) -> int:
    """Decrypt `src` into `dest` with the S-box stored at `key_file`."""
    return StreamCipher.from_key_file(key_file).decrypt_file(src, dest)
