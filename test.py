
import time
from random import randrange, seed
import tricount

# Number of words in the synthetic corpus
WORDS = 200000
# Size of the vocabulary the words are drawn from
VOCABULARY = 50

seed(1)
vocab = [
    bytes(97 + randrange(26) for _ in range(1 + randrange(8)))
    for _ in range(VOCABULARY)
]
text = b" ".join(vocab[randrange(VOCABULARY)] for _ in range(WORDS))

counter = tricount.TripletCounter()
t0 = time.time()
cnt = counter.feed(bytearray(text))
t1 = time.time()
top = counter.top()
t2 = time.time()

if cnt != WORDS - 2:
    print("Counted {0} triplets but expected {1}".format(cnt, WORDS - 2))
for record in top:
    print(record)
print(
    "{2:,} triplets ({3:,} distinct) counted in {0:.2f} seconds, "
    "{1:.1f} microseconds per triplet"
    .format(t1 - t0, 1e6 * (t1 - t0) / cnt, cnt, counter.distinct)
)
print("Ranking took {0:.3f} seconds".format(t2 - t1))
