"""
S-Box — Byte Substitution Table
================================
A permutation of the 256 byte values, persisted as a flat key file.

The table is the only key material in the system. It is generated once
with rejection sampling, written to disk, and read back on every later
run. Every byte value appears exactly once, so forward substitution has
an exact inverse; a reverse map is built alongside the table so the
inverse lookup is a single index operation.

Key file format: 256 raw bytes, table slot order. No header, no checksum.

A key file that is missing, short, unreadable or not a permutation is
replaced with a freshly generated table.
"""

import logging
import random
from typing import NamedTuple, Optional, Union

from .errors import InvalidSBoxError

logger = logging.getLogger(__name__)


class SBox:
    """Invertible 8-bit substitution table."""

    SIZE             = 256
    DEFAULT_KEY_FILE = "sbox.key"

    def __init__(self, table: Union[bytes, bytearray, list]):
        table = bytes(table)
        if len(table) != self.SIZE:
            raise InvalidSBoxError(
                f"S-box must hold exactly {self.SIZE} bytes, got {len(table)}."
            )
        inverse = [-1] * self.SIZE
        for idx, value in enumerate(table):
            if inverse[value] != -1:
                raise InvalidSBoxError(
                    f"S-box is not a permutation: 0x{value:02x} appears at "
                    f"{inverse[value]} and {idx}."
                )
            inverse[value] = idx
        self._table   = table
        self._inverse = bytes(inverse)

    # ── construction ─────────────────────────────────────────────────────────

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "SBox":
        """
        Build a random permutation by rejection sampling.

        Each slot draws uniform bytes until one not already used turns up.
        `rng` needs only `randrange(n)`; pass `random.Random(seed)` for a
        reproducible table.
        """
        if rng is None:
            rng = random.SystemRandom()
        table = bytearray(cls.SIZE)
        used  = set()
        for i in range(cls.SIZE):
            while True:
                r = rng.randrange(cls.SIZE)
                if r not in used:
                    break
            table[i] = r
            used.add(r)
        return cls(table)

    @classmethod
    def load_or_create(cls, path: str = DEFAULT_KEY_FILE,
                       rng: Optional[random.Random] = None) -> "SBoxLoad":
        """
        Load the table stored at `path`, or generate one if there is none.

        The table is written back to `path` on both paths. A failed write
        is logged and reported as `persisted=False`; the table is still
        usable for this session.
        """
        sbox = cls._read(path)
        created = sbox is None
        if created:
            sbox = cls.generate(rng)
            logger.info(f"Generated new S-box for {path}")
        else:
            logger.info(f"Loaded S-box from {path}")
        persisted = sbox.save(path)
        return SBoxLoad(sbox, created, persisted)

    @classmethod
    def _read(cls, path: str) -> Optional["SBox"]:
        try:
            with open(path, "rb") as f:
                raw = f.read(cls.SIZE)
        except OSError as e:
            logger.debug(f"Key file {path} not readable: {e}")
            return None
        try:
            return cls(raw)
        except InvalidSBoxError as e:
            logger.warning(f"Discarding key file {path}: {e}")
            return None

    def save(self, path: str) -> bool:
        """Write the table to `path`. Returns False if the write failed."""
        try:
            with open(path, "wb") as f:
                f.write(self._table)
        except OSError as e:
            logger.warning(f"Could not persist S-box to {path}: {e}")
            return False
        return True

    # ── lookup ───────────────────────────────────────────────────────────────

    def substitute(self, index: int) -> int:
        """Forward lookup; only the low 8 bits of `index` are used."""
        if index < 0:
            raise ValueError("S-box index must be non-negative.")
        return self._table[index & 0xFF]

    def inverse_substitute(self, value: int) -> int:
        """Index whose substitution is `value`."""
        if not 0 <= value < self.SIZE:
            raise ValueError(f"Byte value out of range: {value}")
        return self._inverse[value]

    # ── helpers ──────────────────────────────────────────────────────────────

    @property
    def table(self) -> bytes:
        return self._table

    @property
    def inverse_table(self) -> bytes:
        return self._inverse

    def to_bytes(self) -> bytes:
        return self._table

    def __len__(self):
        return self.SIZE

    def __eq__(self, other):
        if not isinstance(other, SBox):
            return NotImplemented
        return self._table == other._table

    def __hash__(self):
        return hash(self._table)

    def __repr__(self):
        return f"SBox({self._table[:8].hex()}...)"


class SBoxLoad(NamedTuple):
    """Result of `SBox.load_or_create`."""
    sbox: SBox
    created: bool
    persisted: bool
