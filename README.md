# parallab

The package holds two small exercises. Each one runs as a command and can
also be imported as a module.

- `parallab.secant` finds a root of `10x³ − 3x² − 11x − 11` with the
  secant method. It starts from three intervals: `[-50, 50]`,
  `[-100, 100]` and `[-200, 200]`.
- `parallab.subcipher` is a keyed substitution cipher. It builds its
  alphabet by putting a key in front of `a`–`z`.

Both commands can run their work on several threads. They report the
processor time used.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Commands

The commands print their messages in Hungarian. Each one prints its
time figure in seconds, although the label reads `msp`.

### `parallab-secant`

```
parallab-secant [--threads N]
```

Each of the `N` workers runs the secant method once per interval. `N`
defaults to 1. The command prints every root it finds to nine decimal
places, and after them the total processor time.

If the iteration reaches a non-finite value or a horizontal secant, the
command writes `error: ...` to standard error and exits with status 1.

### `parallab-subcipher`

```
parallab-subcipher [--threads N]
```

The command reads two lines from standard input:

1. The key. At most the first 8 characters are used.
2. The text to encipher. At most the first 200 characters are used. It
   must hold only the lowercase letters `a`–`z`.

Each worker does the following:

1. It enciphers the text and prints the enciphered text.
2. It prints the deciphered text.
3. It repeats the decipher step until there are ten rounds in all.

After that the command prints the processor time. If a character cannot
be enciphered or deciphered, it writes `error: ...` to standard error and
exits with status 1.

Example:

```
$ printf 'vas\nhello\n' | parallab-subcipher
```

## Library use

```python
from parallab.secant import function_value, secant_method
from parallab.subcipher import substitution_alphabet, cipher, decipher, read_limited

root = secant_method(-50, 50, 1e-8)
print(function_value(root))  # close to zero

print(substitution_alphabet("vas"))  # "vasabcdefghijklmnopqrstuvwxyz"
secret = cipher("hello", "vas")      # "ebiil"
assert decipher(secret, "vas") == "hello"
```

### `secant_method(sec1, sec2, tolerance=1e-8)`

This function iterates until two successive points are at most
`tolerance` apart. It returns the latest point.

It raises an error in these cases:

- `ValueError` for a negative or NaN tolerance.
- `ValueError` when the iteration reaches a non-finite value.
- `ZeroDivisionError` when the secant becomes horizontal.

### `cipher(text, key)`

This function looks up each letter's position in `a`–`z`. It then
replaces the letter with the character at that position in the
substitution alphabet. Any character outside `a`–`z` raises `ValueError`.

### `decipher(text, key)`

This function finds the first position of each character in the
substitution alphabet and maps it back to the letter at that position in
`a`–`z`. It raises `ValueError` if that position is past the 26th, or if
the character does not appear at all.

The lookup uses the first position. For this reason, a key that places a
letter earlier than its later use in the table does not always round-trip.
For example, with the key `vas` the letter `d` enciphers to `a` but
deciphers back to `b`.

### `read_limited(stream, limit)`

This function reads up to `limit` characters. It stops at a newline,
which it consumes, or at the end of input.