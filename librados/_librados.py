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
Python wrappers for librados interfaces.

As a rule, there is a Python function for each C function.
The signatures of the Python functions generally follow those of the
functions, but the argument types are natural to Python: names are
`str`, handles are opaque cffi objects, output parameters are not used
and values are directly returned.  Error conditions are signalled by
exceptions rather than by negative error codes.
"""

import errno
import logging
import os

from . import exceptions
from . import _error_translation as errors
from .bindings import librados
from ._constants import (
    ENCODING,
    ENCODING_ERRORS,
    MAX_POOL_LIST_ATTEMPTS,
    POOL_LIST_INITIAL_SIZE
)

logger = logging.getLogger(__name__)


def _pool_name_in(name):
    if isinstance(name, bytes):
        c_name = name
    else:
        try:
            c_name = name.encode(ENCODING, ENCODING_ERRORS)
        except UnicodeEncodeError:
            raise exceptions.PoolNameInvalid(name)
    # C strings can not carry an embedded NUL.
    if b'\0' in c_name:
        raise exceptions.PoolNameInvalid(name)
    return c_name


def rados_create(rados_id=None):
    '''
    Create a handle for communicating with a cluster.

    :param str rados_id: the client id to authenticate as, without the
        ``client.`` prefix.  ``None`` lets librados pick the default.
    :return: the cluster handle.
    :raises InitializationError: if librados can not create the handle.
    :raises InvalidHandleError: if the returned handle is NULL.
    '''
    handlep = _ffi.new('rados_t *')
    if rados_id is None:
        c_id = _ffi.NULL
    else:
        c_id = rados_id.encode(ENCODING)
    ret = _lib.rados_create(handlep, c_id)
    errors.rados_create_translate_error(ret)
    handle = handlep[0]
    if handle == _ffi.NULL:
        raise exceptions.InvalidHandleError()
    return handle


def rados_conf_read_file(handle, path=None):
    '''
    Load a configuration file into the cluster handle.

    :param handle: the cluster handle, not yet connected.
    :param path: the configuration file path, ``None`` to let librados
        search its default locations.
    :raises ConfigurationError: if the file can not be read or parsed.
    '''
    if path is None:
        c_path = _ffi.NULL
    else:
        c_path = os.fsencode(path)
    ret = _lib.rados_conf_read_file(handle, c_path)
    errors.rados_conf_read_file_translate_error(ret, path)


def rados_connect(handle):
    '''
    Connect the configured handle to the cluster.

    :raises ConnectionError: if the connection can not be established.
    '''
    ret = _lib.rados_connect(handle)
    errors.rados_connect_translate_error(ret)


def rados_shutdown(handle):
    '''
    Disconnect from the cluster and release the handle.

    The handle must not be used afterwards.
    '''
    _lib.rados_shutdown(handle)


def rados_version():
    '''
    Get the version of the librados library in use.

    :return: a ``(major, minor, extra)`` tuple.
    :rtype: tuple of int
    '''
    major = _ffi.new('int *')
    minor = _ffi.new('int *')
    extra = _ffi.new('int *')
    _lib.rados_version(major, minor, extra)
    return (major[0], minor[0], extra[0])


def rados_pool_lookup(handle, name):
    '''
    Check whether a pool exists.

    :param str name: the pool name, may be empty.
    :return: `True` if the pool exists, `False` otherwise.
    :rtype: bool
    :raises PoolStatusError: if the lookup fails for any other reason
        than the pool being absent.
    '''
    ret = _lib.rados_pool_lookup(handle, _pool_name_in(name))
    return errors.rados_pool_lookup_translate_error(ret, name)


def rados_pool_create(handle, name):
    '''
    Create a pool with default settings.

    :raises PoolAlreadyExists: if a pool with the name already exists.
    :raises PoolCreateError: if the pool can not be created.
    '''
    ret = _lib.rados_pool_create(handle, _pool_name_in(name))
    errors.rados_pool_create_translate_error(ret, name)


def rados_pool_delete(handle, name):
    '''
    Delete a pool and all data inside it.

    :raises PoolNotFound: if there is no pool with the name.
    :raises PoolDeleteError: if the pool can not be deleted.
    '''
    ret = _lib.rados_pool_delete(handle, _pool_name_in(name))
    errors.rados_pool_delete_translate_error(ret, name)


def rados_pool_list(handle):
    '''
    List the names of all pools of the cluster.

    The C function fills a caller supplied buffer and returns the buffer
    length it needs, so the buffer starts small and is reallocated to the
    reported size until the names fit.

    :return: the pool names in the order given by the cluster.
    :rtype: list of str
    :raises EnumerationError: if the cluster reports an error, if the
        required size keeps growing or if the returned data is malformed.
    '''
    size = POOL_LIST_INITIAL_SIZE
    for attempt in range(1, MAX_POOL_LIST_ATTEMPTS + 1):
        buf = _ffi.new('char[]', size)
        ret = _lib.rados_pool_list(handle, buf, size)
        errors.rados_pool_list_translate_error(ret)
        logger.debug(
            "rados_pool_list attempt %d: capacity %d, needed %d",
            attempt, size, ret)
        if ret <= size:
            if ret == 0:
                return []
            return split_pool_names(_ffi.buffer(buf, ret)[:])
        size = ret
    raise exceptions.EnumerationError(
        errno.EOVERFLOW,
        "required size still growing after %d attempts" %
        MAX_POOL_LIST_ATTEMPTS)


def split_pool_names(data):
    '''
    Parse the buffer filled by ``rados_pool_list``.

    Each name is followed by a NUL and the list is terminated by one more
    NUL, e.g. ``b"a\\0b\\0\\0"``.  A buffer holding a single NUL is the
    empty list.  Zero length names are kept, they are the name of a pool
    called ``""``.  Bytes that are not valid UTF-8 are decoded to lone
    surrogates, so every name can be passed back to the other wrappers.

    :param bytes data: the used part of the buffer.
    :rtype: list of str
    :raises EnumerationError: if the data is not terminated properly.
    '''
    if data == b'\0':
        return []
    if not data.endswith(b'\0\0'):
        raise exceptions.EnumerationError(
            errno.EBADMSG, "unterminated pool list %r" % (data, ))
    return [name.decode(ENCODING, ENCODING_ERRORS)
            for name in data[:-2].split(b'\0')]


def rados_ioctx_create(handle, name):
    '''
    Create an I/O context bound to a pool.

    :param str name: the pool the context operates on.
    :return: the opaque context handle, owned by the caller.
    :raises ContextCreateError: if the context can not be created,
        most commonly because the pool does not exist.
    '''
    ioctxp = _ffi.new('rados_ioctx_t *')
    ret = _lib.rados_ioctx_create(handle, _pool_name_in(name), ioctxp)
    errors.rados_ioctx_create_translate_error(ret, name)
    return ioctxp[0]


def rados_aio_flush(ioctx):
    '''
    Block until all pending asynchronous operations on the context
    are safe.
    '''
    ret = _lib.rados_aio_flush(ioctx)
    if ret < 0:
        logger.warning("rados_aio_flush returned %d", ret)


def rados_ioctx_destroy(ioctx):
    '''
    Release an I/O context.  Pending operations are not waited for,
    use :func:`rados_aio_flush` first.
    '''
    _lib.rados_ioctx_destroy(ioctx)


_ffi = librados.ffi
_lib = librados.lib


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
