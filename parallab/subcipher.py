"""Keyword substitution cipher over the lowercase Latin alphabet."""

from __future__ import annotations

import argparse
import string
import sys
import time
from concurrent.futures import ThreadPoolExecutor

ALPHABET = string.ascii_lowercase
KEY_LIMIT = 8
TEXT_LIMIT = 200
ROUNDS = 10


def substitution_alphabet(key):
    """Return the substitution table: the key followed by the whole alphabet."""
    return key + ALPHABET


def cipher(text, key):
    """Replace each letter of ``text`` by the entry at its alphabet position
    in the substitution table built from ``key``."""
    table = substitution_alphabet(key)
    out = []
    for ch in text:
        index = ALPHABET.find(ch)
        if index < 0:
            raise ValueError(f"cannot encipher {ch!r}: not a lowercase letter")
        out.append(table[index])
    return "".join(out)


def decipher(text, key):
    """Map each character back through its first position in the
    substitution table built from ``key``."""
    table = substitution_alphabet(key)
    out = []
    for ch in text:
        index = table.find(ch)
        if not 0 <= index < len(ALPHABET):
            raise ValueError(f"cannot decipher {ch!r} with key {key!r}")
        out.append(ALPHABET[index])
    return "".join(out)


def read_limited(stream, limit):
    """Read at most ``limit`` characters from ``stream``, stopping at a newline
    (which is consumed) or at end of input."""
    chars = []
    while len(chars) < limit:
        ch = stream.read(1)
        if ch in ("", "\n"):
            break
        chars.append(ch)
    return "".join(chars)


def _session_lines(text, key):
    first = cipher(text, key)
    lines = [
        "A kodolt uzenet:",
        first,
        "A visszakodolt uzenet:",
        decipher(first, key),
        # the second round deciphers the first round's result again
        "A visszakodolt uzenet:",
        decipher(first, key),
    ]
    for _ in range(ROUNDS - 2):
        lines.append("A visszakodolt uzenet:")
        lines.append(decipher(cipher(text, key), key))
    return lines


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv=None):
    """Read a key and a message from standard input, then encipher and
    decipher the message repeatedly, reporting the time taken."""
    parser = argparse.ArgumentParser(
        description="Encipher and decipher a message with a keyword substitution cipher."
    )
    parser.add_argument(
        "--threads",
        type=_positive_int,
        default=1,
        help="number of workers that each run every round (default: 1)",
    )
    args = parser.parse_args(argv)

    print("Add meg a kulcsot!")
    key = read_limited(sys.stdin, KEY_LIMIT)
    print("Add meg a kodolando szoveget!")
    text = read_limited(sys.stdin, TEXT_LIMIT)

    start = time.process_time()
    try:
        with ThreadPoolExecutor(max_workers=args.threads) as pool:
            futures = [pool.submit(_session_lines, text, key) for _ in range(args.threads)]
            results = [future.result() for future in futures]
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for lines in results:
        print("\n".join(lines))
    elapsed = time.process_time() - start

    print(f"A szamitashoz felhasznalt ido: {elapsed:.12f} msp")
    return 0


if __name__ == "__main__":
    sys.exit(main())