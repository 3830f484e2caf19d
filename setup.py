#!/usr/bin/env python3

from setuptools import find_packages, setup

setup(
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={"tricount": ["py.typed", "fingerprint.h"]},
    include_package_data=True,
    zip_safe=False,
    cffi_modules=["src/tricount/fingerprint_build.py:ffibuilder"],
)
