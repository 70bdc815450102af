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
The cluster session: a handle to the cluster together with the state
that decides which operations the handle may be used for.
"""

import contextlib
import logging
import os
import threading
from collections import namedtuple

from . import exceptions
from . import _librados
from ._constants import CONF_ENV, SessionState

logger = logging.getLogger(__name__)


class Version(namedtuple('Version', ['major', 'minor', 'extra'])):
    __slots__ = ()

    def __str__(self):
        return "%d.%d.%d" % self


# States a session may move to from a given state.
_TRANSITIONS = {
    SessionState.UNINITIALIZED: frozenset([
        SessionState.CONFIGURED, SessionState.SHUTDOWN]),
    SessionState.CONFIGURED: frozenset([
        SessionState.CONNECTED, SessionState.SHUTDOWN]),
    SessionState.CONNECTED: frozenset([SessionState.SHUTDOWN]),
    SessionState.SHUTDOWN: frozenset(),
}


class Rados(object):
    '''
    A session with a cluster.

    Creating the object creates a librados handle and loads the
    configuration into it.  :meth:`connect` must be called before pools
    can be inspected, created, deleted or listed.  :meth:`shutdown`
    releases the handle; it can be called any number of times.
    The object is also a context manager that shuts the session down
    on exit::

        with Rados('/etc/ceph/ceph.conf') as cluster:
            cluster.connect()
            names = cluster.list_pools()

    :param conffile: the configuration file.  When ``None`` the path in
        the ``CEPH_CONF`` environment variable is used, and when that is
        not set either librados searches its default locations.
    :param str rados_id: the client id to connect as.
    :raises InitializationError: if the handle can not be created.
    :raises InvalidHandleError: if librados returned a NULL handle.
    :raises ConfigurationError: if the configuration can not be read.

    .. note::
        State transitions are serialized by a lock owned by the session,
        but a pool operation running in one thread is not protected from
        a concurrent :meth:`shutdown` in another.  Share a session between
        threads only under external synchronization.

    .. note::
        I/O contexts returned by :meth:`ioctx_create` are owned by the
        caller and are not released by :meth:`shutdown`.
    '''

    def __init__(self, conffile=None, rados_id=None):
        self._lock = threading.RLock()
        self._handle = None
        self._state = SessionState.UNINITIALIZED
        if conffile is None:
            conffile = os.environ.get(CONF_ENV)
        self.conffile = conffile
        self._configure(conffile, rados_id)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()
        return False

    def __repr__(self):
        return "%s(%r, state=%s)" % (
            self.__class__.__name__, self.conffile, self._state.value)

    @property
    def state(self):
        return self._state

    def _check_transition(self, new_state):
        if new_state not in _TRANSITIONS[self._state]:
            raise exceptions.SessionStateError(
                "%s -> %s" % (self._state.value, new_state.value))

    def _transition(self, new_state):
        self._check_transition(new_state)
        logger.debug("rados session %s -> %s",
                     self._state.value, new_state.value)
        self._state = new_state

    def _configure(self, conffile, rados_id):
        handle = _librados.rados_create(rados_id)
        try:
            _librados.rados_conf_read_file(handle, conffile)
        except Exception:
            _librados.rados_shutdown(handle)
            raise
        self._handle = handle
        self._transition(SessionState.CONFIGURED)

    def connect(self):
        '''
        Connect to the cluster.

        :raises SessionStateError: if the session is not in the configured
            state, e.g. it is already connected or has been shut down.
        :raises ConnectionError: if librados fails to connect; the session
            stays configured and the call may be retried.
        '''
        with self._lock:
            self._check_transition(SessionState.CONNECTED)
            _librados.rados_connect(self._handle)
            self._transition(SessionState.CONNECTED)

    def shutdown(self):
        '''
        Close the connection to the cluster and release the handle.
        Calling it again is a no-op.
        '''
        with self._lock:
            if self._state is SessionState.SHUTDOWN:
                return
            if self._handle is not None:
                _librados.rados_shutdown(self._handle)
                self._handle = None
            self._transition(SessionState.SHUTDOWN)

    def require_connected(self, operation=None):
        '''
        :raises NotConnectedError: unless the session is connected.
        '''
        if self._state is not SessionState.CONNECTED:
            raise exceptions.NotConnectedError(operation)

    def version(self):
        '''
        The version of the librados library, available in any state.

        :rtype: Version
        '''
        return Version(*_librados.rados_version())

    def pool_exists(self, pool_name):
        '''
        Check whether the pool exists.  The cluster is asked every time.

        :param str pool_name: the pool name, may be empty.
        :rtype: bool
        :raises NotConnectedError: if the session is not connected.
        :raises PoolStatusError: if the lookup fails.
        '''
        self.require_connected("pool_exists")
        return _librados.rados_pool_lookup(self._handle, pool_name)

    def create_pool(self, pool_name):
        '''
        Create the pool.

        :raises NotConnectedError: if the session is not connected.
        :raises PoolAlreadyExists: if the pool exists.
        :raises PoolCreateError: if the pool can not be created.
        '''
        self.require_connected("create_pool")
        _librados.rados_pool_create(self._handle, pool_name)

    def delete_pool(self, pool_name):
        '''
        Delete the pool.

        :raises NotConnectedError: if the session is not connected.
        :raises PoolNotFound: if the pool does not exist.
        :raises PoolDeleteError: if the pool can not be deleted.
        '''
        self.require_connected("delete_pool")
        _librados.rados_pool_delete(self._handle, pool_name)

    def list_pools(self):
        '''
        List all the pools.

        :return: the pool names, in the order reported by the cluster.
            A pool named ``""`` is listed as an empty string.
        :rtype: list of str
        :raises NotConnectedError: if the session is not connected.
        :raises EnumerationError: if the list can not be retrieved.
        '''
        self.require_connected("list_pools")
        return _librados.rados_pool_list(self._handle)

    def ioctx_create(self, pool_name):
        '''
        Create an I/O context for the pool and hand it over to the caller,
        who must release it with :meth:`ioctx_destroy`.

        :return: an opaque ``rados_ioctx_t`` handle.
        :raises NotConnectedError: if the session is not connected.
        :raises ContextCreateError: if the context can not be created.
        '''
        self.require_connected("ioctx_create")
        ioctx = _librados.rados_ioctx_create(self._handle, pool_name)
        logger.debug("created io context for pool %r", pool_name)
        return ioctx

    def ioctx_destroy(self, ioctx):
        '''
        Wait for the pending asynchronous operations of the context and
        release it.  Must be called exactly once per context.
        '''
        try:
            _librados.rados_aio_flush(ioctx)
        finally:
            _librados.rados_ioctx_destroy(ioctx)
        logger.debug("destroyed io context")

    @contextlib.contextmanager
    def open_ioctx(self, pool_name):
        '''
        Context manager version of :meth:`ioctx_create` that destroys
        the context on exit.
        '''
        ioctx = self.ioctx_create(pool_name)
        try:
            yield ioctx
        finally:
            self.ioctx_destroy(ioctx)


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
