"""
Base58 encoding of arbitrary byte strings.

The data bytes are treated as a big-endian base-256 number and converted to
base-58 digits by repeated long division. Leading zero bytes carry no numeric
weight, so each one is written explicitly as ``ALPHABET[0]``.

Encoding and decoding run in O(n^2) time; not meant for large payloads.
"""

from typing import Union

from .exceptions import InvalidCharacterError

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_BASE = len(ALPHABET)
_ZERO_CHAR = ALPHABET[0]


def _build_indexes() -> tuple:
    indexes = [-1] * 128
    for index, char in enumerate(ALPHABET):
        indexes[ord(char)] = index
    return tuple(indexes)


_B58_INDEXES = _build_indexes()

BytesLike = Union[bytes, bytearray, memoryview]


def b58encode(data: BytesLike) -> str:
    if not data:
        return ""

    # Scratch copy, divided in place.
    number = bytearray(data)

    # Count leading zeros.
    zeros = 0
    while zeros < len(number) and number[zeros] == 0:
        zeros += 1

    # Convert base-256 digits to base-58 characters, lowest digit first.
    encoded = [""] * (len(number) * 2)
    output_start = len(encoded)
    input_start = zeros
    while input_start < len(number):
        output_start -= 1
        encoded[output_start] = ALPHABET[_divmod(number, input_start, 256, _B58_BASE)]
        if number[input_start] == 0:
            input_start += 1

    # Drop zero digits produced by the conversion, then restore the real ones.
    while output_start < len(encoded) and encoded[output_start] == _ZERO_CHAR:
        output_start += 1

    return _ZERO_CHAR * zeros + "".join(encoded[output_start:])


def b58decode(value: str) -> bytes:
    if not value:
        return b""

    # Convert the characters to base-58 digits.
    digits = bytearray(len(value))
    for position, char in enumerate(value):
        code = ord(char)
        digit = _B58_INDEXES[code] if code < 128 else -1
        if digit < 0:
            raise InvalidCharacterError(char, position)
        digits[position] = digit

    # Count leading zeros.
    zeros = 0
    while zeros < len(digits) and digits[zeros] == 0:
        zeros += 1

    # Convert base-58 digits to base-256 digits.
    decoded = bytearray(len(value))
    output_start = len(decoded)
    input_start = zeros
    while input_start < len(digits):
        output_start -= 1
        decoded[output_start] = _divmod(digits, input_start, _B58_BASE, 256)
        if digits[input_start] == 0:
            input_start += 1

    # Ignore extra leading zeros added during the calculation.
    while output_start < len(decoded) and decoded[output_start] == 0:
        output_start += 1

    return bytes(decoded[output_start - zeros:])


def b58decode_int(value: str) -> int:
    """Decode ``value`` and read the bytes as a big-endian unsigned integer."""
    return int.from_bytes(b58decode(value), "big")


def _divmod(number: bytearray, first_digit: int, base: int, divisor: int) -> int:
    """
    Divide ``number[first_digit:]``, a big-endian run of digits in ``base``,
    by ``divisor``. Each digit is replaced by its quotient digit and the
    remainder is returned.
    """
    remainder = 0
    for i in range(first_digit, len(number)):
        temp = remainder * base + number[i]
        number[i] = temp // divisor
        remainder = temp % divisor
    return remainder
