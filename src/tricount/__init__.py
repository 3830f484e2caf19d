"""

    Tricount: Top triplet counter

    __init__.py

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

    This module exposes the tricount API, i.e. the identifiers that are
    directly accessible via the tricount module object after importing it.

"""

# Expose the tricount API

from .arena import Arena, TripletRecord, CHUNK_SIZE
from .errors import (
    TricountError, InputError, TooFewWordsError, ArenaExhaustedError
)
from .fingerprint import triplet_hash
from .index import TripletIndex
from .ranking import select_top, TOP_K
from .triplets import TripletCounter, top_triplets

__author__ = "Miðeind ehf."
__copyright__ = "(C) 2020 Miðeind ehf."
__version__ = "1.0.0"
