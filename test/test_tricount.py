
from random import randint, seed, shuffle
import mmap

import pytest

from tricount import (
    Arena, TripletIndex, TripletCounter, TripletRecord,
    triplet_hash, select_top, top_triplets,
    ArenaExhaustedError, InputError, TooFewWordsError,
)
from tricount.fingerprint import MURMUR_M
from tricount.scanner import (
    Cursor, next_word, words, triplets_from_words, load_text, close_text
)


def reference_hash(a: bytes, b: bytes, c: bytes, seed: int = 0) -> int:
    """ Straightforward Python rendition of the triplet hash """
    mask = 0xFFFFFFFF
    h = (seed ^ ((len(a) + len(b) + len(c)) * MURMUR_M)) & mask
    for data in (a, b, c):
        i = 0
        while len(data) - i >= 4:
            h = (h + int.from_bytes(data[i:i + 4], "little")) & mask
            h = (h * MURMUR_M) & mask
            h ^= h >> 16
            i += 4
        rest = len(data) - i
        if rest == 3:
            h = (h + (data[i + 2] << 16)) & mask
        if rest >= 2:
            h = (h + (data[i + 1] << 8)) & mask
        if rest >= 1:
            h = (h + data[i]) & mask
            h = (h * MURMUR_M) & mask
            h ^= h >> 16
    h = (h * MURMUR_M) & mask
    h ^= h >> 10
    h = (h * MURMUR_M) & mask
    h ^= h >> 17
    return h


def make_word(n: int) -> bytes:
    """ Return a distinct lowercase word for each n >= 0 """
    s = ""
    n += 1
    while n:
        n, r = divmod(n - 1, 26)
        s = chr(ord("a") + r) + s
    return s.encode("ascii")


def test_scanner():
    buf = bytearray(b"  Cat! cat, CAT.")
    assert list(words(buf)) == [b"cat", b"cat", b"cat"]
    # Scanning lowercases words and terminates them in place
    assert buf == bytearray(b"  cat\x00 cat\x00 cat\x00")

    assert list(words(bytearray(b"ABC def"))) == list(words(bytearray(b"abc def")))
    assert list(words(bytearray(b"Don't 42 rock'n'roll--X"))) == [
        b"don't", b"rock'n'roll", b"x"
    ]
    assert list(words(bytearray(b""))) == []
    assert list(words(bytearray(b"123 ... !!\n"))) == []

    cursor = Cursor(bytearray(b"one Two"))
    assert next_word(cursor) == b"one"
    assert cursor.pos == 4
    assert next_word(cursor) == b"two"
    assert cursor.at_end()
    assert next_word(cursor) is None
    assert next_word(cursor) is None


def test_triplets_from_words():
    ws = [b"a", b"b", b"c", b"d"]
    assert list(triplets_from_words(ws)) == [(b"a", b"b", b"c"), (b"b", b"c", b"d")]
    assert list(triplets_from_words(ws[0:2])) == []
    assert list(triplets_from_words([])) == []
    assert len(list(triplets_from_words(make_word(i) for i in range(100)))) == 98


def test_hash():
    h = triplet_hash(b"the", b"cat", b"sat")
    assert h == triplet_hash(b"the", b"cat", b"sat", 0)
    assert 0 <= h < 2 ** 32
    assert triplet_hash("a", "b", "c") == triplet_hash(b"a", b"b", b"c")
    assert triplet_hash(b"a", b"b", b"c") != triplet_hash(b"c", b"b", b"a")
    assert triplet_hash(b"the", b"cat", b"sat", 17) != h

    # Compare against the Python rendition, covering all tail lengths
    seed(42)
    samples = [(b"", b"", b""), (b"abcd", b"efgh", b"ijkl"), (b"'", b"", b"x")]
    for _ in range(500):
        samples.append(tuple(
            bytes(randint(32, 126) for _ in range(randint(0, 13)))
            for _ in range(3)
        ))
    for a, b, c in samples:
        assert triplet_hash(a, b, c) == reference_hash(a, b, c)
        assert triplet_hash(a, b, c, 0xDEADBEEF) == reference_hash(a, b, c, 0xDEADBEEF)
    # Bytes above 0x7F are mixed as unsigned values
    hi = bytes([0xC3, 0xB0, 0xFF])
    assert triplet_hash(hi, hi, hi) == reference_hash(hi, hi, hi)


def test_arena():
    with pytest.raises(ValueError):
        Arena(0)

    arena = Arena(4)
    assert len(arena) == 0
    assert arena.num_chunks == 0
    records = [
        arena.allocate(make_word(i), b"b", b"c", i * 1000) for i in range(10)
    ]
    assert len(arena) == 10
    assert arena.num_chunks == 3
    assert len(set(id(r) for r in records)) == 10
    for i, r in enumerate(records):
        assert r.a == make_word(i)
        assert r.fingerprint == i * 1000
        assert r.count == 0
        assert r.serial == i
    assert list(arena) == records

    small = Arena(2, max_chunks=1)
    small.allocate(b"a", b"b", b"c", 1)
    small.allocate(b"b", b"c", b"d", 2)
    with pytest.raises(ArenaExhaustedError):
        small.allocate(b"c", b"d", b"e", 3)
    try:
        small.allocate(b"c", b"d", b"e", 3)
        assert False, "Should have raised MemoryError"
    except MemoryError:
        pass


def test_record():
    arena = Arena()
    r = arena.allocate(b"the", b"cat", b"sat", 7)
    r.count = 2
    assert r.key == (b"the", b"cat", b"sat")
    assert r.words == ("the", "cat", "sat")
    assert str(r) == "the cat sat - 2"
    assert "count=2" in repr(r)
    assert isinstance(r, TripletRecord)


def test_find_or_insert():
    index = TripletIndex()
    assert len(index) == 0
    assert list(index) == []

    fp = triplet_hash(b"the", b"cat", b"sat")
    r1 = index.find_or_insert(b"the", b"cat", b"sat", fp)
    r2 = index.find_or_insert(b"the", b"cat", b"sat", fp)
    assert r1 is r2
    assert len(index) == 1

    index.inc(b"the", b"cat", b"sat")
    index.inc(b"the", b"cat", b"sat")
    assert index.find_or_insert(b"the", b"cat", b"sat", fp).count == 2
    assert index.inc(b"cat", b"sat", b"on").count == 1
    assert len(index) == 2
    assert set(r.key for r in index) == {
        (b"the", b"cat", b"sat"), (b"cat", b"sat", b"on")
    }


def test_collisions():
    # Forced fingerprint collisions are kept apart by default
    index = TripletIndex()
    x = index.find_or_insert(b"x", b"y", b"z", 123)
    p = index.find_or_insert(b"p", b"q", b"r", 123)
    m = index.find_or_insert(b"m", b"n", b"o", 123)
    assert len(set(id(r) for r in (x, p, m))) == 3
    assert index.find_or_insert(b"p", b"q", b"r", 123) is p
    assert index.find_or_insert(b"x", b"y", b"z", 123) is x
    assert index.find_or_insert(b"m", b"n", b"o", 123) is m
    assert len(index) == 3

    # ...but merged when fingerprints are trusted as identities
    trusting = TripletIndex(verify_keys=False)
    x = trusting.find_or_insert(b"x", b"y", b"z", 123)
    assert trusting.find_or_insert(b"p", b"q", b"r", 123) is x
    assert len(trusting) == 1

    # The sentinel root never matches, not even on fingerprint 0
    for verify in (True, False):
        index = TripletIndex(verify_keys=verify)
        r = index.find_or_insert(b"a", b"b", b"c", 0)
        assert r is not index.root
        assert index.find_or_insert(b"a", b"b", b"c", 0) is r
        assert list(index) == [r]


def test_skewed_tree():
    # Ascending fingerprints degenerate the tree into a list
    index = TripletIndex()
    n = 2000
    for i in range(1, n + 1):
        index.find_or_insert(make_word(i), b"b", b"c", i).count += 1
    assert len(index) == n
    assert index.depth() == n + 1
    assert len(list(index)) == n
    assert index.find_or_insert(make_word(n), b"b", b"c", n).count == 1


def test_select_top():
    arena = Arena()
    counts = [3, 1, 5, 3, 0, 5, 2]
    records = []
    for i, cnt in enumerate(counts):
        r = arena.allocate(make_word(i), b"b", b"c", i)
        r.count = cnt
        records.append(r)

    top = select_top(records, 3)
    assert [r.count for r in top] == [5, 5, 3]
    # Equal counts rank in first-seen order
    assert top[0] is records[2]
    assert top[1] is records[5]
    assert top[2] is records[0]

    # Visiting order does not matter
    shuffled = records[:]
    for _ in range(10):
        shuffle(shuffled)
        assert select_top(shuffled, 3) == top

    assert select_top(records, 1) == [records[2]]
    assert len(select_top(records, 100)) == len(records)
    assert select_top([], 3) == []

    for k in (0, -1, 1.5, "3"):
        with pytest.raises(TypeError):
            select_top(records, k)  # type: ignore

    seed(7)
    for _ in range(50):
        arena = Arena(16)
        recs = []
        for i in range(randint(0, 60)):
            r = arena.allocate(make_word(i), b"b", b"c", i)
            r.count = randint(1, 6)
            recs.append(r)
        shuffle(recs)
        k = randint(1, 8)
        top = select_top(recs, k)
        assert len(top) == min(k, len(recs))
        assert all(top[i].count >= top[i + 1].count for i in range(len(top) - 1))
        assert top == sorted(recs, key=lambda r: (-r.count, r.serial))[0:k]


def test_counter():
    counter = TripletCounter()
    assert counter.feed(bytearray(b"the cat sat on the mat the cat sat")) == 7
    assert counter.words == 9
    assert counter.triplets == 7
    assert counter.distinct == 6
    assert str(counter.top(1)[0]) == "the cat sat - 2"
    assert [str(r) for r in counter.top()] == [
        "the cat sat - 2",
        "cat sat on - 1",
        "sat on the - 1",
    ]
    assert len(counter.top(10)) == 6

    counter = TripletCounter()
    assert counter.feed(bytearray(b"Hello, world!")) == 0
    assert counter.words == 2
    assert counter.top() == []

    # The window does not span separate texts
    counter = TripletCounter()
    assert counter.feed(bytearray(b"one two")) == 0
    assert counter.feed(bytearray(b"three four five")) == 1
    assert counter.feed_words([b"six", b"seven", b"eight", b"nine"]) == 2
    assert counter.triplets == 3
    assert counter.words == 9

    counter = TripletCounter()
    assert counter.feed(bytearray(b"Cat! cat, CAT. cat")) == 2
    top = counter.top()
    assert len(top) == 1
    assert str(top[0]) == "cat cat cat - 2"


def test_arena_growth():
    # More distinct triplets than fit in one chunk
    counter = TripletCounter(chunk_size=16)
    n = 200
    text = b" ".join(make_word(i) for i in range(n))
    assert counter.feed(bytearray(text)) == n - 2
    assert counter.distinct == n - 2
    # One slot is taken by the sentinel root
    assert counter.num_chunks == (n - 2 + 1 + 15) // 16
    records = list(counter.index)
    assert len(records) == n - 2
    seen = set()
    for r in records:
        assert r.count == 1
        assert r.fingerprint == triplet_hash(r.a, r.b, r.c)
        assert r.key not in seen
        seen.add(r.key)
    for i in range(n - 2):
        key = (make_word(i), make_word(i + 1), make_word(i + 2))
        assert key in seen
    assert counter.depth() <= len(counter.index) + 1

    counter = TripletCounter(chunk_size=2, max_chunks=1)
    with pytest.raises(ArenaExhaustedError):
        counter.feed(bytearray(b"a b c d e"))


def test_files(tmp_path):
    path = tmp_path / "text.txt"
    path.write_bytes(b"The cat sat on the mat.\nThe cat sat!\n")
    top = top_triplets(str(path))
    assert str(top[0]) == "the cat sat - 2"
    assert len(top) == 3
    # The file itself is not normalized
    assert path.read_bytes() == b"The cat sat on the mat.\nThe cat sat!\n"

    buf = load_text(str(path))
    assert isinstance(buf, mmap.mmap)
    assert list(words(buf))[0] == b"the"
    close_text(buf)

    empty = tmp_path / "empty.txt"
    empty.write_bytes(b"")
    buf = load_text(str(empty))
    assert buf == bytearray()
    close_text(buf)
    with pytest.raises(TooFewWordsError):
        top_triplets(str(empty))

    short = tmp_path / "short.txt"
    short.write_bytes(b"two words")
    with pytest.raises(TooFewWordsError):
        top_triplets(str(short))

    with pytest.raises(InputError) as e:
        top_triplets(str(tmp_path / "missing.txt"))
    assert isinstance(e.value, OSError)
    assert "missing.txt" in str(e.value)

    with pytest.raises(InputError):
        load_text(str(tmp_path))

    counter = TripletCounter()
    assert counter.count_file(str(path)) == 7
    assert counter.count_file(str(path)) == 7
    assert counter.top(1)[0].count == 4
