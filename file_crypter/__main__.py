"""
file_crypter command line.

    python -m file_crypter demo "some text"
    python -m file_crypter encrypt notes.txt --out notes.enc
    python -m file_crypter decrypt notes.enc --out notes.txt
    python -m file_crypter verify notes.txt notes.dec
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .digest import file_digest
from .sbox import SBox
from .stream import StreamCipher

logger = logging.getLogger(__name__)

SAMPLE = "Hello, world!"


def sub_and_print(sbox: SBox, text: str) -> str:
    """Substitute every byte of `text`, print it, then map it back."""
    restored = []
    for k in text.encode("latin-1", errors="replace"):
        sub = sbox.substitute(k)
        restored.append(chr(sbox.inverse_substitute(sub)))
        print(f"sub 0x{sub:02x}")
    restored = "".join(restored)
    print(f"Original:  {text}")
    print(f"Decrypted: {restored}")
    return restored


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="file_crypter",
        description="S-box stream cipher file encrypt/decrypt",
    )
    ap.add_argument("--key", default=SBox.DEFAULT_KEY_FILE,
                    help=f"S-box key file (default: {SBox.DEFAULT_KEY_FILE})")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p_demo = sub.add_parser("demo", help="Show substitution of sample strings")
    p_demo.add_argument("strings", nargs="*")

    p_enc = sub.add_parser("encrypt", help="Encrypt a file")
    p_enc.add_argument("infile")
    p_enc.add_argument("--out", default=None, help="Output path (default: <in>.enc)")

    p_dec = sub.add_parser("decrypt", help="Decrypt a file")
    p_dec.add_argument("infile")
    p_dec.add_argument("--out", default=None, help="Output path (default: <in>.dec)")

    p_ver = sub.add_parser("verify", help="Compare two files by SHA-224")
    p_ver.add_argument("a")
    p_ver.add_argument("b")

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format=" %(message)s")

    try:
        if args.cmd in ("encrypt", "decrypt") and not os.path.exists(args.infile):
            print(f"Input file not found: {args.infile}", file=sys.stderr)
            return 2

        if args.cmd == "verify":
            da, db = file_digest(args.a), file_digest(args.b)
            print(f"{da}  {args.a}")
            print(f"{db}  {args.b}")
            return 0 if da == db else 1

        cipher = StreamCipher.from_key_file(args.key)
        if not cipher.persisted:
            print(f"Warning: S-box could not be saved to {args.key}", file=sys.stderr)

        if args.cmd == "demo":
            for text in [SAMPLE] + args.strings:
                sub_and_print(cipher.sbox, text)
            return 0

        if args.cmd == "encrypt":
            out = args.out or args.infile + ".enc"
            cipher.encrypt_file(args.infile, out)
        else:
            out = args.out or args.infile + ".dec"
            cipher.decrypt_file(args.infile, out)
        print("Wrote:", out)
        return 0

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 2
    except Exception as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
