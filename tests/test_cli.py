"""
file_crypter — command line tests
=================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from file_crypter.__main__ import main, sub_and_print
from file_crypter.sbox     import SBox


def test_demo_prints_substitutions(tmp_path, capsys):
    key = tmp_path / "sbox.key"
    assert main(["--key", str(key), "demo", "abc"]) == 0
    out = capsys.readouterr().out
    assert out.count("sub 0x") == len("Hello, world!") + 3
    assert "Original:  Hello, world!" in out
    assert "Decrypted: Hello, world!" in out
    assert "Decrypted: abc" in out
    assert key.exists()

def test_sub_and_print_identity(capsys):
    assert sub_and_print(SBox(bytes(range(256))), "AB") == "AB"
    out = capsys.readouterr().out
    assert "sub 0x41" in out and "sub 0x42" in out

def test_encrypt_decrypt_verify(tmp_path, capsys):
    key = tmp_path / "sbox.key"
    src = tmp_path / "notes.txt"
    src.write_bytes(b"systems" * 500)
    assert main(["--key", str(key), "encrypt", str(src)]) == 0
    enc = tmp_path / "notes.txt.enc"
    assert enc.exists()
    dec = tmp_path / "notes.out"
    assert main(["--key", str(key), "decrypt", str(enc), "--out", str(dec)]) == 0
    assert dec.read_bytes() == src.read_bytes()
    assert main(["verify", str(src), str(dec)]) == 0
    assert main(["verify", str(src), str(enc)]) == 1

def test_missing_input(tmp_path, capsys):
    rc = main(["--key", str(tmp_path / "k"), "encrypt", str(tmp_path / "nope")])
    assert rc == 2
    assert "Input file not found" in capsys.readouterr().err

def test_verify_missing_file_is_error(tmp_path, capsys):
    assert main(["verify", str(tmp_path / "a"), str(tmp_path / "b")]) == 2
    assert "Error:" in capsys.readouterr().err

def test_unsaved_key_warns(tmp_path, capsys):
    key = tmp_path / "missing" / "sbox.key"
    assert main(["--key", str(key), "demo"]) == 0
    assert "could not be saved" in capsys.readouterr().err


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
