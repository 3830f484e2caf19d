"""

    Tricount: Top triplet counter

    scanner.py

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


    This module loads input text into a writable buffer and cuts
    it into a stream of normalized words, and the word stream into
    a stream of triplets.

    A word is a maximal run of ASCII letters and apostrophes. Everything
    else separates words. Scanning normalizes the buffer in place:
    each word is lowercased where it lies, and the separator character
    that ends it is overwritten with a NUL byte. The buffer is therefore
    no longer the original text once it has been scanned.

"""

from typing import Iterator, Iterable, Tuple, Optional, Union, Any
import os
import re
import stat
import mmap
from itertools import islice, tee

from .errors import InputError


# A writable byte buffer: either a bytearray or a copy-on-write memory map
Buffer = Union[bytearray, mmap.mmap]

# Characters that make up words
VALID = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'"

_WORD = re.compile(b"[" + re.escape(VALID) + b"]+")

# Overwrites the character that ends a word
TERMINATOR = 0


class Cursor:

    """ A read position within a text buffer. The cursor is shared
        by successive calls to next_word() and only moves forward. """

    __slots__ = ("buf", "pos")

    def __init__(self, buf: Buffer, pos: int = 0) -> None:
        self.buf = buf
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.buf)


def next_word(cursor: Cursor) -> Optional[bytes]:
    """ Return the next word at or after the cursor position, lowercased,
        and advance the cursor past it. Returns None if no word remains. """
    buf = cursor.buf
    m = _WORD.search(buf, cursor.pos)
    if m is None:
        cursor.pos = len(buf)
        return None
    start, end = m.span()
    word = bytes(buf[start:end]).lower()
    # Case folding is done in place in the shared buffer
    buf[start:end] = word
    if end < len(buf):
        # Mark the end of the word and step over the marker
        buf[end] = TERMINATOR
        end += 1
    cursor.pos = end
    return word


def words(buf: Buffer) -> Iterator[bytes]:
    """ Generate the normalized words of the text in buf """
    cursor = Cursor(buf)
    while True:
        word = next_word(cursor)
        if word is None:
            return
        yield word


def triplets_from_words(iterable: Iterable[bytes]) -> Iterator[Tuple[Any, ...]]:
    """ Generate triplets (tuples of three words) from the given iterable """
    return zip(
        *((islice(seq, i, None) for i, seq in enumerate(tee(iterable, 3))))
    )


def load_text(path: str) -> Buffer:
    """ Load the entire file at path into one writable buffer.
        Regular files are memory mapped copy-on-write, so that
        normalization never reaches the file itself. Empty files
        and other file types (pipes, devices) are read into a
        bytearray. """
    try:
        with open(path, "rb") as stream:
            st = os.fstat(stream.fileno())
            if stat.S_ISREG(st.st_mode) and st.st_size > 0:
                return mmap.mmap(stream.fileno(), 0, access=mmap.ACCESS_COPY)
            return bytearray(stream.read())
    except OSError as e:
        raise InputError(path, e.strerror or str(e)) from e
    except ValueError as e:
        # mmap refuses some files that stat() reports as regular
        raise InputError(path, str(e)) from e


def close_text(buf: Buffer) -> None:
    """ Release a buffer obtained from load_text() """
    if isinstance(buf, mmap.mmap):
        buf.close()
