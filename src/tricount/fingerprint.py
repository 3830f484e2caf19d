"""

    Tricount: Top triplet counter

    fingerprint.py

    Copyright (C) 2020 Miðeind ehf.

    This software is licensed under the MIT License:

        Permission is hereby granted, free of charge, to any person
        obtaining a copy of this software and associated documentation
        files (the "Software"), to deal in the Software without restriction,
        including without limitation the rights to use, copy, modify, merge,
        publish, distribute, sublicense, and/or sell copies of the Software,
        and to permit persons to whom the Software is furnished to do so,
        subject to the following conditions:

        The above copyright notice and this permission notice shall be
        included in all copies or substantial portions of the Software.

        THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
        EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
        MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
        IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
        CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
        TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
        SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.


    This module wraps the composite triplet hash, which is implemented
    in fingerprint.c and compiled into the _fingerprint CFFI module at
    installation time (see fingerprint_build.py).

    The hash is a three-part variant of MurmurHash. It is seeded with
    seed ^ ((len(a) + len(b) + len(c)) * MURMUR_M), mixes the bytes of
    a, b and c in that order, four bytes at a time plus a tail of one
    to three bytes, and finishes with two multiply/shift rounds. The
    result is an unsigned 32-bit integer.

"""

from typing import Union

# Import the CFFI wrapper for the fingerprint.c C module
from ._fingerprint import lib as fingerprint_cffi  # type: ignore  # pylint: disable=import-error,no-name-in-module


# Multiplier of the mixing function
MURMUR_M = 0xC6A4A793

# Seed used for all fingerprints within the index
SEED = 0

UINT32_MASK = 0xFFFFFFFF

Part = Union[bytes, str]


def _to_bytes(s: Part) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def triplet_hash(a: Part, b: Part, c: Part, seed: int = SEED) -> int:
    """ Return the 32-bit fingerprint of the triplet (a, b, c).
        The parts may be bytes or str; str is encoded as UTF-8. """
    ba, bb, bc = _to_bytes(a), _to_bytes(b), _to_bytes(c)
    return fingerprint_cffi.tripletHash(
        ba, len(ba), bb, len(bb), bc, len(bc), seed & UINT32_MASK
    )
