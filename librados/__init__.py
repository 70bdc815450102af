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

'''
Python wrappers for a small subset of the **librados** library.

The wrappers cover what is needed to administer the pools of a Ceph
cluster: opening a session, creating, checking, deleting and listing
pools, and creating the I/O contexts other bindings use for data access.
Errors are reported as exceptions rather than negative errno-style
status codes.

The session is :class:`Rados`; the module level ``rados_*`` functions
are one-to-one wrappers of the C functions and take the handle
explicitly.
'''

from ._constants import (
    CONF_ENV,
    MAX_POOL_LIST_ATTEMPTS,
    SessionState
)

from ._librados import (
    rados_create,
    rados_conf_read_file,
    rados_connect,
    rados_shutdown,
    rados_version,
    rados_pool_lookup,
    rados_pool_create,
    rados_pool_delete,
    rados_pool_list,
    rados_ioctx_create,
    rados_aio_flush,
    rados_ioctx_destroy,
    split_pool_names,
)

from ._rados import (
    Rados,
    Version,
)

__all__ = [
    'exceptions',
    'CONF_ENV',
    'MAX_POOL_LIST_ATTEMPTS',
    'SessionState',
    'Rados',
    'Version',
    'rados_create',
    'rados_conf_read_file',
    'rados_connect',
    'rados_shutdown',
    'rados_version',
    'rados_pool_lookup',
    'rados_pool_create',
    'rados_pool_delete',
    'rados_pool_list',
    'rados_ioctx_create',
    'rados_aio_flush',
    'rados_ioctx_destroy',
    'split_pool_names',
]

# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
