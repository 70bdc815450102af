# Copyright 2026 The pyrados Authors. See LICENSE file for details.

from setuptools import setup, find_packages

setup(
    name="pyrados",
    version="0.1.0",
    description="Wrapper for a subset of librados",
    license="Apache License, Version 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: System :: Distributed Computing",
        "Topic :: Software Development :: Libraries",
    ],
    keywords=[
        "Ceph",
        "RADOS",
        "librados",
    ],

    packages=find_packages(include=["librados", "librados.*"]),
    include_package_data=True,
    python_requires=">=3.6",
    install_requires=[
        "cffi",
    ],
    zip_safe=False,
    test_suite="librados.test",
)

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
