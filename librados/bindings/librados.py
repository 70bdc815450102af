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
Python bindings for ``librados``.

Only the part of the API needed to manage a cluster session, its pools
and the I/O contexts handed to other bindings is declared.
"""

CDEF = """
    typedef void *rados_t;
    typedef void *rados_ioctx_t;

    int rados_create(rados_t *, const char *);
    int rados_conf_read_file(rados_t, const char *);
    int rados_connect(rados_t);
    void rados_shutdown(rados_t);
    void rados_version(int *, int *, int *);

    int64_t rados_pool_lookup(rados_t, const char *);
    int rados_pool_create(rados_t, const char *);
    int rados_pool_delete(rados_t, const char *);
    int rados_pool_list(rados_t, char *, size_t);

    int rados_ioctx_create(rados_t, const char *, rados_ioctx_t *);
    int rados_aio_flush(rados_ioctx_t);
    void rados_ioctx_destroy(rados_ioctx_t);
"""

SOURCE = """
#include <rados/librados.h>
"""

LIBRARY = "rados"
LIBRARY_ENV = "LIBRADOS_PATH"

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
