"""

    Tricount: Top triplet counter

    arena.py

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


    This module contains the triplet record type and the arena that
    hands out records in bulk.

    Records are created a chunk at a time, CHUNK_SIZE slots per chunk,
    instead of one by one as triplets are discovered. Within a chunk,
    slots are handed out from the last one down to the first. Records
    are never freed individually; the arena only grows, and the whole
    lot goes away with the arena itself.

"""

from typing import Iterator, List, Optional, Tuple

from .errors import ArenaExhaustedError


# Default number of record slots per chunk
CHUNK_SIZE = 4096


class TripletRecord:

    """ A distinct triplet (a, b, c), its fingerprint and its
        occurrence count, plus the links that place it within
        the binary search tree of the index """

    __slots__ = ("a", "b", "c", "fingerprint", "count", "left", "right", "serial")

    def __init__(self) -> None:
        self.a = b""
        self.b = b""
        self.c = b""
        self.fingerprint = 0
        self.count = 0
        # Child records, ordered by fingerprint
        self.left = None  # type: Optional[TripletRecord]
        self.right = None  # type: Optional[TripletRecord]
        # Allocation ordinal, i.e. the order in which triplets were first seen
        self.serial = -1

    @property
    def key(self) -> Tuple[bytes, bytes, bytes]:
        return (self.a, self.b, self.c)

    @property
    def words(self) -> Tuple[str, str, str]:
        """ The three words as normal Python strings """
        return (
            self.a.decode("ascii"), self.b.decode("ascii"), self.c.decode("ascii")
        )

    def __str__(self) -> str:
        return "{0} {1} {2} - {3}".format(*self.words, self.count)

    def __repr__(self) -> str:
        return "<TripletRecord {0!r} fingerprint={1:#010x} count={2}>".format(
            self.key, self.fingerprint, self.count
        )


class Arena:

    """ A bump allocator for TripletRecords. Chunks of pre-created
        record slots are appended as needed; a cursor marks the next
        free slot in the current chunk and moves downwards. """

    def __init__(
        self, chunk_size: int = CHUNK_SIZE, max_chunks: Optional[int] = None
    ) -> None:
        if chunk_size < 1:
            raise ValueError("Chunk size must be at least 1")
        if max_chunks is not None and max_chunks < 1:
            raise ValueError("Maximum chunk count must be at least 1")
        self.chunk_size = chunk_size
        self.max_chunks = max_chunks
        self._chunks = []  # type: List[List[TripletRecord]]
        self._chunk = None  # type: Optional[List[TripletRecord]]
        # Index of the next free slot in the current chunk;
        # -1 means that a new chunk is needed
        self._cursor = -1
        self._allocated = 0

    def _new_chunk(self) -> None:
        """ Append a fresh chunk of empty record slots and point
            the cursor at its last slot """
        if self.max_chunks is not None and len(self._chunks) >= self.max_chunks:
            raise ArenaExhaustedError(
                "Arena is limited to {0:,} chunks of {1:,} records".format(
                    self.max_chunks, self.chunk_size
                )
            )
        try:
            chunk = [TripletRecord() for _ in range(self.chunk_size)]
        except MemoryError as e:
            raise ArenaExhaustedError(
                "Unable to allocate a chunk of {0:,} records after {1:,} records".format(
                    self.chunk_size, self._allocated
                )
            ) from e
        self._chunks.append(chunk)
        self._chunk = chunk
        self._cursor = self.chunk_size - 1

    def allocate(self, a: bytes, b: bytes, c: bytes, fingerprint: int) -> TripletRecord:
        """ Return a new record for the given triplet, with a zero count """
        if self._cursor < 0:
            self._new_chunk()
        assert self._chunk is not None
        record = self._chunk[self._cursor]
        self._cursor -= 1
        record.a = a
        record.b = b
        record.c = c
        record.fingerprint = fingerprint
        record.serial = self._allocated
        self._allocated += 1
        return record

    @property
    def num_chunks(self) -> int:
        return len(self._chunks)

    def __len__(self) -> int:
        """ Return the number of records allocated so far """
        return self._allocated

    def __iter__(self) -> Iterator[TripletRecord]:
        """ Iterate over the allocated records, in allocation order """
        last = len(self._chunks) - 1
        for ix, chunk in enumerate(self._chunks):
            # Only the last chunk can be partially used
            low = self._cursor + 1 if ix == last else 0
            for slot in range(self.chunk_size - 1, low - 1, -1):
                yield chunk[slot]
