"""

    Tricount: Top triplet counter

    main.py

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


    This is the command line program. It reads a text file, counts
    the triplets of consecutive words in it and prints the most
    frequent ones, one per line, as '<a> <b> <c> - <count>'.

    The exit status is 0 on success and 1 if the file name is
    missing, the file cannot be loaded, the text has fewer than
    three words or memory runs out. Error messages go to stderr.

"""

from typing import List, Optional, NoReturn
import sys
import argparse
import time

from .arena import CHUNK_SIZE
from .errors import InputError, TooFewWordsError, ArenaExhaustedError
from .ranking import TOP_K
from .triplets import top_triplets


# Define the command line arguments

parser = argparse.ArgumentParser(
    prog="tricount",
    description=(
        "This program prints the most frequent triplets "
        "of consecutive words in a text file"
    )
)

parser.add_argument(
    "path",
    nargs="?",
    type=str,
    help="path of the text file to read",
)

parser.add_argument(
    "-k",
    "--top",
    type=int,
    default=TOP_K,
    help="number of triplets to print (default={0})".format(TOP_K),
)

parser.add_argument(
    "--chunk-size",
    type=int,
    default=CHUNK_SIZE,
    help="number of records per arena chunk (default={0})".format(CHUNK_SIZE),
)

parser.add_argument(
    "--trust-fingerprints",
    default=False,
    action="store_true",
    help="treat triplets with equal fingerprints as the same triplet",
)

parser.add_argument(
    "-v",
    "--verbose",
    default=False,
    action="store_true",
    help="print statistics to stderr",
)


def fail(message: str) -> NoReturn:
    print(message, file=sys.stderr, flush=True)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    args = parser.parse_args(argv)
    if not args.path:
        fail("Filename expected")
    if args.top < 1:
        parser.error("the number of triplets must be positive")
    if args.chunk_size < 1:
        parser.error("the chunk size must be positive")

    start = time.time()
    try:
        ranking = top_triplets(
            args.path,
            args.top,
            verbose=args.verbose,
            chunk_size=args.chunk_size,
            verify_keys=not args.trust_fingerprints,
        )
    except InputError as e:
        fail(str(e))
    except TooFewWordsError:
        fail("Too few words")
    except ArenaExhaustedError as e:
        fail("Out of memory: {0}".format(e))

    for record in ranking:
        print(record)

    if args.verbose:
        print(
            "Duration: {0:.2f} seconds".format(time.time() - start),
            file=sys.stderr, flush=True
        )


if __name__ == "__main__":
    main()
