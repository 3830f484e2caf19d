"""

    Tricount: Top triplet counter

    CFFI builder for _fingerprint module

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


    This module only runs at setup/installation time. It is invoked
    from setup.py as requested by the cffi_modules=[] parameter of the
    setup() function. It causes the _fingerprint.*.so CFFI wrapper library
    to be built from its source in fingerprint.c.

"""

import platform
import cffi

# Don't change the name of this variable unless you
# change it in setup.py as well
ffibuilder = cffi.FFI()

WINDOWS = platform.system() == "Windows"

# What follows is the actual Python-wrapped C interface to _fingerprint.*.so
# It must be kept in sync with fingerprint.h

declarations = """

    typedef unsigned int UINT;
    typedef uint32_t UINT32;

    UINT32 tripletHash(const char* pA, UINT nLenA,
        const char* pB, UINT nLenB,
        const char* pC, UINT nLenC,
        UINT32 nSeed);

"""

if WINDOWS:
    extra_compile_args = []
else:
    extra_compile_args = ["-std=c99"]

ffibuilder.set_source(
    "tricount._fingerprint",
    "#include <stdint.h>\n" + declarations,
    sources=["src/tricount/fingerprint.c"],
    extra_compile_args=extra_compile_args,
)

ffibuilder.cdef(declarations)

if __name__ == "__main__":
    ffibuilder.compile(verbose=False)
