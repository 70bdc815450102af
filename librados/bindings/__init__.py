# SPDX-License-Identifier: Apache-2.0
#
# Copyright 2026 The pyrados Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
The package that contains a module per each C library the `librados`
wrappers call into.  Each module declares the C interface it needs and
gets the CFFI objects, ``ffi`` and ``lib``, attached here.

Libraries are opened on first use.  The shared library passed to
``dlopen`` is the module's ``LIBRARY`` unless the environment variable
named by its ``LIBRARY_ENV`` holds another name or a path.
"""

import importlib
import logging
import os
import threading

from cffi import FFI

logger = logging.getLogger(__name__)

MODULES = ["librados"]


class LazyLibrary(object):

    def __init__(self, ffi, libname):
        self._ffi = ffi
        self._libname = libname
        self._lib = None
        self._lock = threading.Lock()

    def _load(self):
        with self._lock:
            if self._lib is None:
                logger.debug("loading %s", self._libname)
                self._lib = self._ffi.dlopen(self._libname)
        return self._lib

    def __getattr__(self, name):
        lib = self._lib
        if lib is None:
            lib = self._load()
        return getattr(lib, name)


def _setup_cffi():
    ffi = FFI()

    for module_name in MODULES:
        module = importlib.import_module("." + module_name, __name__)
        ffi.cdef(module.CDEF)
        libname = os.environ.get(module.LIBRARY_ENV) or module.LIBRARY
        setattr(module, "ffi", ffi)
        setattr(module, "lib", LazyLibrary(ffi, libname))


_setup_cffi()

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
