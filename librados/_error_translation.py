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
Helper routines for converting negative ``errno`` style status codes
returned by librados functions to Python exceptions defined by this package.

There is a conversion routine for each wrapped librados function.
The routines take the return code as their first parameter followed by
the parameters of the corresponding call that give the error its context.
"""

import errno
from . import exceptions as rados_exc
from ._constants import POOL_NOT_FOUND


def rados_create_translate_error(ret):
    if ret >= 0:
        return
    raise rados_exc.InitializationError(-ret)


def rados_conf_read_file_translate_error(ret, path):
    if ret >= 0:
        return
    raise rados_exc.ConfigurationError(-ret, path)


def rados_connect_translate_error(ret):
    if ret >= 0:
        return
    raise rados_exc.ConnectionError(-ret)


def rados_pool_lookup_translate_error(ret, name):
    '''
    :return: `True` if the lookup found the pool, `False` if the
        pool does not exist.
    '''
    if ret >= 0:
        return True
    if ret == POOL_NOT_FOUND:
        return False
    raise rados_exc.PoolStatusError(-ret, name)


def rados_pool_create_translate_error(ret, name):
    if ret >= 0:
        return
    if ret == -errno.EEXIST:
        raise rados_exc.PoolAlreadyExists(name)
    raise rados_exc.PoolCreateError(-ret, name)


def rados_pool_delete_translate_error(ret, name):
    if ret >= 0:
        return
    if ret == -errno.ENOENT:
        raise rados_exc.PoolNotFound(name)
    raise rados_exc.PoolDeleteError(-ret, name)


def rados_pool_list_translate_error(ret):
    if ret >= 0:
        return
    raise rados_exc.EnumerationError(-ret, "rados_pool_list failed")


def rados_ioctx_create_translate_error(ret, name):
    if ret >= 0:
        return
    raise rados_exc.ContextCreateError(-ret, name)


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
