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
Important `librados` wrapper constants.
"""

import errno
from enum import Enum


#: Encoding of pool names crossing the C boundary.
ENCODING = "utf-8"
#: Bytes that are not valid UTF-8 map to lone surrogates and back.
ENCODING_ERRORS = "surrogateescape"
#: Environment variable consulted when no configuration file is given.
CONF_ENV = "CEPH_CONF"
#: Upper bound on ``rados_pool_list`` calls made to size the name buffer.
MAX_POOL_LIST_ATTEMPTS = 16
#: Size of the first buffer passed to ``rados_pool_list``.
POOL_LIST_INITIAL_SIZE = 1

#: Status returned by ``rados_pool_lookup`` for a missing pool.
POOL_NOT_FOUND = -errno.ENOENT


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    CONNECTED = "connected"
    SHUTDOWN = "shutdown"


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
