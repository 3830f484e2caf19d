"""

    Tricount: Top triplet counter

    errors.py

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


    Exceptions raised by Tricount. Each one also derives from the
    built-in exception that best describes it, so callers can catch
    either the Tricount type or the built-in one.

"""


class TricountError(Exception):

    """ Base class of all Tricount errors """


class InputError(TricountError, OSError):

    """ The input text could not be opened, read or mapped """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__("Error loading '{0}': {1}".format(path, reason))
        self.path = path
        self.reason = reason


class TooFewWordsError(TricountError, ValueError):

    """ The input holds fewer than three words, so no triplet
        can be formed """

    def __init__(self, words: int = 0) -> None:
        super().__init__("Too few words")
        self.words = words


class ArenaExhaustedError(TricountError, MemoryError):

    """ The record arena cannot grow any further """
