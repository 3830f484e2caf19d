"""

    Tricount: Top triplet counter

    index.py

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


    This module implements the triplet index: an unbalanced binary
    search tree of TripletRecords, ordered by triplet fingerprint.

    The tree is anchored by a sentinel root record with empty words
    and fingerprint 0. The sentinel never matches a real triplet and
    is not reported by iteration.

    Two triplets may share a fingerprint. By default the index then
    compares the words themselves and keeps colliding triplets apart,
    ordering them by (a, b, c) below the fingerprint level. With
    verify_keys=False the fingerprint is trusted as the identity of
    a triplet, and the counts of colliding triplets are merged.

    All tree walks are iterative, since the tree is not rebalanced
    and can become arbitrarily deep on skewed input.

"""

from typing import Iterator, List, Optional, Tuple

from .arena import Arena, TripletRecord
from .fingerprint import triplet_hash, SEED


class TripletIndex:

    """ Find-or-insert store of triplet records, keyed by fingerprint """

    def __init__(self, arena: Optional[Arena] = None, *, verify_keys: bool = True) -> None:
        self.arena = Arena() if arena is None else arena
        self.verify_keys = verify_keys
        self._root = self.arena.allocate(b"", b"", b"", 0)
        self._len = 0

    @property
    def root(self) -> TripletRecord:
        """ Return the sentinel root record of the tree """
        return self._root

    def find_or_insert(
        self, a: bytes, b: bytes, c: bytes, fingerprint: int
    ) -> TripletRecord:
        """ Return the record of the triplet (a, b, c), with the given
            fingerprint, inserting a new record if it is not found """
        node = self._root
        key = None  # type: Optional[Tuple[bytes, bytes, bytes]]
        while True:
            if fingerprint < node.fingerprint:
                go_left = True
            elif fingerprint > node.fingerprint:
                go_left = False
            elif node is self._root:
                # The sentinel does not match anything
                go_left = False
            elif not self.verify_keys:
                return node
            else:
                if key is None:
                    key = (a, b, c)
                node_key = node.key
                if key == node_key:
                    return node
                # Fingerprint collision: order by the words themselves
                go_left = key < node_key
            child = node.left if go_left else node.right
            if child is None:
                child = self.arena.allocate(a, b, c, fingerprint)
                if go_left:
                    node.left = child
                else:
                    node.right = child
                self._len += 1
                return child
            node = child

    def inc(self, a: bytes, b: bytes, c: bytes) -> TripletRecord:
        """ Count one occurrence of the triplet (a, b, c) """
        record = self.find_or_insert(a, b, c, triplet_hash(a, b, c, SEED))
        record.count += 1
        return record

    def __iter__(self) -> Iterator[TripletRecord]:
        """ Visit every real record in the tree, in pre-order """
        root = self._root
        stack = [root]  # type: List[TripletRecord]
        while stack:
            node = stack.pop()
            if node is not root:
                yield node
            # Push right first so that the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        """ Return the number of distinct triplets in the index """
        return self._len

    def depth(self) -> int:
        """ Return the height of the tree, counting the sentinel root
            as level 1 """
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            if level > deepest:
                deepest = level
            if node.left is not None:
                stack.append((node.left, level + 1))
            if node.right is not None:
                stack.append((node.right, level + 1))
        return deepest
