"""

    Tricount: Top triplet counter

    ranking.py

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


    This module selects the k most frequent triplets in a single
    pass over all records.

    A buffer of k slots is kept in rank order. Each record is placed
    at the first slot that is empty or holds a lower ranked record;
    the records from that slot onwards move one slot down, and the
    one in the last slot falls off.

    Records rank by descending count. Records with equal counts rank
    in the order their triplets were first seen in the text, so the
    result does not depend on the order in which records are visited.

"""

from typing import Iterable, List, Optional

from .arena import TripletRecord


# Number of triplets reported by default
TOP_K = 3


def _outranks(record: TripletRecord, other: TripletRecord) -> bool:
    """ Return True if record ranks strictly above other """
    if record.count != other.count:
        return record.count > other.count
    return record.serial < other.serial


def select_top(records: Iterable[TripletRecord], k: int = TOP_K) -> List[TripletRecord]:
    """ Return a list of at most k records, most frequent first """
    if not isinstance(k, int) or k < 1:
        raise TypeError("Expected positive integer for parameter k")
    top = [None] * k  # type: List[Optional[TripletRecord]]
    for record in records:
        for i in range(k):
            held = top[i]
            if held is None or _outranks(record, held):
                # Open up slot i, dropping whatever was in the last slot
                top[i + 1:] = top[i:-1]
                top[i] = record
                break
    return [record for record in top if record is not None]
