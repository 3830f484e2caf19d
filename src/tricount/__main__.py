"""

    Tricount: Top triplet counter

    __main__.py

    Copyright (C) 2020 Miðeind ehf.

    Allows the command line program to be invoked
    as 'python -m tricount <path>'.

"""

from .main import main

main()
