"""

    Tricount: Top triplet counter

    triplets.py

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


    This module ties the scanner, the arena, the index and the
    ranking together into a counting session.

    A TripletCounter owns all state of one run: the record arena and
    the triplet index hanging off it. Any number of counters can exist
    side by side. Text is fed to a counter, which counts every triplet
    of consecutive words in it; the ranking is read out once all text
    has been fed.

"""

from typing import Iterable, List, Optional
import sys
import time

from .arena import Arena, CHUNK_SIZE, TripletRecord
from .errors import TooFewWordsError
from .index import TripletIndex
from .ranking import select_top, TOP_K
from .scanner import Buffer, words, triplets_from_words, load_text, close_text


class TripletCounter:

    """ Counts word triplets over one or more texts """

    def __init__(
        self,
        *,
        chunk_size: int = CHUNK_SIZE,
        max_chunks: Optional[int] = None,
        verify_keys: bool = True
    ) -> None:
        self.arena = Arena(chunk_size, max_chunks)
        self.index = TripletIndex(self.arena, verify_keys=verify_keys)
        # Total number of words and triplets seen
        self.words = 0
        self.triplets = 0

    def feed_words(self, iterable: Iterable[bytes]) -> int:
        """ Count the triplets in a stream of normalized words and
            return the number of triplets counted, which is the number
            of words minus two, or zero if there are fewer than
            three words """
        nwords = 0

        def counted(it: Iterable[bytes]) -> Iterable[bytes]:
            nonlocal nwords
            for w in it:
                nwords += 1
                yield w

        inc = self.index.inc
        cnt = 0
        for a, b, c in triplets_from_words(counted(iterable)):
            inc(a, b, c)
            cnt += 1
        self.words += nwords
        self.triplets += cnt
        return cnt

    def feed(self, buf: Buffer) -> int:
        """ Scan the text in buf, which is normalized in place,
            and count its triplets """
        return self.feed_words(words(buf))

    def count_file(self, path: str, *, verbose: bool = False) -> int:
        """ Load the file at path and count its triplets """
        t0 = time.time()
        buf = load_text(path)
        try:
            if verbose:
                print(
                    "Reading {0} ({1:,} bytes)".format(path, len(buf)),
                    file=sys.stderr, flush=True
                )
            cnt = self.feed(buf)
        finally:
            close_text(buf)
        if verbose:
            t1 = time.time()
            print(
                "Counted {0:,} triplets in {1:.2f} seconds".format(cnt, t1 - t0),
                file=sys.stderr, flush=True
            )
        return cnt

    def top(self, k: int = TOP_K) -> List[TripletRecord]:
        """ Return the k most frequent triplets, most frequent first """
        return select_top(self.index, k)

    @property
    def distinct(self) -> int:
        """ Return the number of distinct triplets seen """
        return len(self.index)

    @property
    def num_chunks(self) -> int:
        return self.arena.num_chunks

    def depth(self) -> int:
        return self.index.depth()

    def report(self) -> None:
        """ Print statistics about the counter to stderr """
        print(
            "Words: {0:,}\nTriplets: {1:,}\nDistinct triplets: {2:,}\n"
            "Arena chunks: {3:,} of {4:,} records\nTree depth: {5:,}"
            .format(
                self.words, self.triplets, self.distinct,
                self.num_chunks, self.arena.chunk_size, self.depth()
            ),
            file=sys.stderr, flush=True
        )


def top_triplets(
    path: str, k: int = TOP_K, *, verbose: bool = False, **kwargs
) -> List[TripletRecord]:
    """ Count the triplets in the file at path and return the k most
        frequent ones. Keyword arguments are passed on to the
        TripletCounter constructor. """
    counter = TripletCounter(**kwargs)
    if counter.count_file(path, verbose=verbose) == 0:
        raise TooFewWordsError(counter.words)
    if verbose:
        counter.report()
    return counter.top(k)
