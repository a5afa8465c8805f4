"""
file_crypter — S-box tests
==========================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random

import pytest
from file_crypter.sbox   import SBox, SBoxLoad
from file_crypter.errors import InvalidSBoxError

IDENTITY = bytes(range(256))

# ── generation ───────────────────────────────────────────────────────────────
def test_generate_is_permutation():
    sb = SBox.generate(random.Random(1))
    assert sorted(sb.table) == list(range(256))

def test_generate_seeded_is_deterministic():
    assert SBox.generate(random.Random(42)) == SBox.generate(random.Random(42))

def test_generate_default_rng():
    sb = SBox.generate()
    assert len(set(sb.table)) == 256

# ── lookup ───────────────────────────────────────────────────────────────────
def test_bijection_all_values():
    sb = SBox.generate(random.Random(7))
    for v in range(256):
        assert sb.inverse_substitute(sb.substitute(v)) == v

def test_inverse_covers_last_slot():
    # value stored at index 255 must map back to 255
    sb = SBox(IDENTITY)
    assert sb.inverse_substitute(sb.substitute(255)) == 255
    sb = SBox.generate(random.Random(3))
    assert sb.inverse_substitute(sb.table[255]) == 255

def test_substitute_masks_low_byte():
    sb = SBox.generate(random.Random(5))
    assert sb.substitute(256 + 17) == sb.substitute(17)
    assert sb.substitute(0x1234) == sb.substitute(0x34)

def test_substitute_negative_rejected():
    with pytest.raises(ValueError):
        SBox(IDENTITY).substitute(-1)

@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_inverse_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        SBox(IDENTITY).inverse_substitute(value)

# ── validation ───────────────────────────────────────────────────────────────
def test_duplicate_values_rejected():
    with pytest.raises(InvalidSBoxError):
        SBox(bytes(256))

@pytest.mark.parametrize("size", [0, 100, 255, 257])
def test_wrong_length_rejected(size):
    with pytest.raises(ValueError):
        SBox(bytes(i & 0xFF for i in range(size)))

# ── persistence ──────────────────────────────────────────────────────────────
def test_load_or_create_creates_and_persists(tmp_path):
    key = tmp_path / "sbox.key"
    loaded = SBox.load_or_create(str(key), random.Random(9))
    assert isinstance(loaded, SBoxLoad)
    assert loaded.created is True
    assert loaded.persisted is True
    assert key.read_bytes() == loaded.sbox.to_bytes()

def test_load_or_create_is_idempotent(tmp_path):
    key = tmp_path / "sbox.key"
    first = SBox.load_or_create(str(key)).sbox
    before = key.read_bytes()
    second = SBox.load_or_create(str(key))
    assert second.created is False
    assert second.sbox == first
    assert key.read_bytes() == before

def test_existing_key_file_used_verbatim(tmp_path):
    key = tmp_path / "sbox.key"
    table = bytes(reversed(IDENTITY))
    key.write_bytes(table)
    loaded = SBox.load_or_create(str(key))
    assert loaded.created is False
    assert loaded.sbox.table == table

@pytest.mark.parametrize("content", [bytes(256), IDENTITY[:100], b""])
def test_corrupt_key_file_regenerated(tmp_path, content):
    key = tmp_path / "sbox.key"
    key.write_bytes(content)
    loaded = SBox.load_or_create(str(key))
    assert loaded.created is True
    assert sorted(key.read_bytes()) == list(range(256))

def test_unwritable_key_path_not_persisted(tmp_path):
    key = tmp_path / "no_such_dir" / "sbox.key"
    loaded = SBox.load_or_create(str(key), random.Random(11))
    assert loaded.created is True
    assert loaded.persisted is False
    assert sorted(loaded.sbox.table) == list(range(256))
    assert not key.exists()

def test_save_reports_failure(tmp_path):
    sb = SBox(IDENTITY)
    assert sb.save(str(tmp_path / "ok.key")) is True
    assert sb.save(str(tmp_path / "missing" / "bad.key")) is False


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
