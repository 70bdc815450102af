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
Tests for the `Rados` session.

These check the session state machine and the pool and I/O context
operations built on top of it, with `FakeLibrados` in place of the C
library.
"""

import collections
import errno
import os
import unittest
from unittest import mock

from .. import _librados
from .. import exceptions as rados_exc
from .._constants import CONF_ENV, SessionState
from .._rados import Rados, Version
from .fake_librados import FakeLibrados, _addr

CONF = '/etc/ceph/ceph.conf'


class RadosSessionTest(unittest.TestCase):

    def setUp(self):
        self.fake = FakeLibrados()
        patcher = mock.patch.object(_librados, '_lib', self.fake)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _connected(self):
        r = Rados(CONF)
        r.connect()
        self.addCleanup(r.shutdown)
        return r

    def assertNotConnected(self, func, *args):
        del self.fake.calls[:]
        with self.assertRaises(rados_exc.NotConnectedError):
            func(*args)
        self.assertEqual(self.fake.calls, [])

    def test_configure(self):
        r = Rados(CONF)
        self.assertEqual(r.state, SessionState.CONFIGURED)
        self.assertEqual(self.fake.conf_paths, [CONF.encode()])
        self.assertEqual(len(self.fake.live_handles), 1)

    def test_configure_with_id(self):
        Rados(CONF, rados_id='admin')
        self.assertEqual(self.fake.ids, [b'admin'])

    def test_conffile_from_environment(self):
        with mock.patch.dict(os.environ, {CONF_ENV: CONF}):
            r = Rados()
        self.assertEqual(r.conffile, CONF)
        self.assertEqual(self.fake.conf_paths, [CONF.encode()])

    def test_conffile_default_locations(self):
        with mock.patch.dict(os.environ):
            os.environ.pop(CONF_ENV, None)
            Rados()
        self.assertEqual(self.fake.conf_paths, [None])

    def test_configure_unreadable_file(self):
        with self.assertRaises(rados_exc.ConfigurationError):
            Rados('./unexistant_conf_file')
        self.assertEqual(self.fake.live_handles, set())
        self.assertEqual(len(self.fake.shutdowns), 1)

    def test_configure_null_handle(self):
        self.fake.null_handle = True
        with self.assertRaises(rados_exc.InvalidHandleError):
            Rados(CONF)
        self.assertNotIn('rados_conf_read_file', self.fake.calls)

    def test_configure_create_failure(self):
        self.fake.create_ret = -errno.ENOMEM
        with self.assertRaises(rados_exc.InitializationError):
            Rados(CONF)
        self.assertEqual(self.fake.live_handles, set())

    def test_connect(self):
        r = Rados(CONF)
        r.connect()
        self.assertEqual(r.state, SessionState.CONNECTED)
        r.require_connected()

    def test_connect_failure_keeps_state(self):
        r = Rados(CONF)
        self.fake.connect_ret = -errno.ETIMEDOUT
        with self.assertRaises(rados_exc.ConnectionError) as ctx:
            r.connect()
        self.assertEqual(ctx.exception.errno, errno.ETIMEDOUT)
        self.assertEqual(r.state, SessionState.CONFIGURED)
        self.fake.connect_ret = 0
        r.connect()
        self.assertEqual(r.state, SessionState.CONNECTED)

    def test_connect_twice(self):
        r = self._connected()
        with self.assertRaises(rados_exc.SessionStateError):
            r.connect()
        self.assertEqual(r.state, SessionState.CONNECTED)

    def test_connect_after_shutdown(self):
        r = Rados(CONF)
        r.shutdown()
        del self.fake.calls[:]
        with self.assertRaises(rados_exc.SessionStateError):
            r.connect()
        self.assertEqual(self.fake.calls, [])

    def test_shutdown_twice(self):
        r = self._connected()
        r.shutdown()
        r.shutdown()
        self.assertEqual(r.state, SessionState.SHUTDOWN)
        self.assertEqual(len(self.fake.shutdowns), 1)
        self.assertEqual(self.fake.live_handles, set())

    def test_shutdown_after_failed_connect(self):
        r = Rados(CONF)
        self.fake.connect_ret = -errno.ECONNREFUSED
        with self.assertRaises(rados_exc.ConnectionError):
            r.connect()
        r.shutdown()
        self.assertEqual(r.state, SessionState.SHUTDOWN)
        self.assertEqual(self.fake.live_handles, set())

    def test_context_manager(self):
        with Rados(CONF) as r:
            r.connect()
            self.assertEqual(r.state, SessionState.CONNECTED)
        self.assertEqual(r.state, SessionState.SHUTDOWN)
        self.assertEqual(self.fake.live_handles, set())

    def test_context_manager_on_error(self):
        with self.assertRaises(ValueError):
            with Rados(CONF) as r:
                raise ValueError()
        self.assertEqual(r.state, SessionState.SHUTDOWN)

    def test_version(self):
        r = Rados(CONF)
        v = r.version()
        self.assertEqual(v, Version(14, 2, 22))
        self.assertEqual(str(v), '14.2.22')
        self.assertEqual(v.minor, 2)
        r.shutdown()
        self.assertEqual(r.version(), v)

    def test_operations_before_connect(self):
        r = Rados(CONF)
        self.fake.pools = [b'one']
        self.assertNotConnected(r.pool_exists, 'one')
        self.assertNotConnected(r.create_pool, 'two')
        self.assertNotConnected(r.delete_pool, 'one')
        self.assertNotConnected(r.list_pools)
        self.assertNotConnected(r.ioctx_create, 'one')
        self.assertNotConnected(r.require_connected)
        self.assertEqual(self.fake.pools, [b'one'])

    def test_operations_after_shutdown(self):
        r = self._connected()
        r.create_pool('one')
        r.shutdown()
        self.assertNotConnected(r.pool_exists, 'one')
        self.assertNotConnected(r.create_pool, 'two')
        self.assertNotConnected(r.delete_pool, 'one')
        self.assertNotConnected(r.list_pools)
        self.assertNotConnected(r.ioctx_create, 'one')
        self.assertEqual(self.fake.pools, [b'one'])

    def test_not_connected_names_operation(self):
        r = Rados(CONF)
        with self.assertRaises(rados_exc.NotConnectedError) as ctx:
            r.list_pools()
        self.assertEqual(ctx.exception.errno, errno.ENOTCONN)
        self.assertEqual(ctx.exception.name, 'list_pools')

    def test_create_delete_pool(self):
        r = self._connected()
        for name in ['test_createpool', '']:
            r.create_pool(name)
            self.assertTrue(r.pool_exists(name))
            r.delete_pool(name)
            self.assertFalse(r.pool_exists(name))

    def test_pool_exists_is_not_cached(self):
        r = self._connected()
        r.pool_exists('one')
        r.pool_exists('one')
        self.assertEqual(self.fake.calls.count('rados_pool_lookup'), 2)

    def test_list_pools_create_delete(self):
        r = self._connected()
        self.assertEqual(r.list_pools(), [])
        names = ['one', 'two', 'three']
        for name in names:
            r.create_pool(name)
        self.assertEqual(sorted(r.list_pools()), sorted(names))
        for name in names:
            r.delete_pool(name)
        self.assertEqual(r.list_pools(), [])

    def test_list_pools_empty_name_with_non_empty(self):
        r = self._connected()
        r.create_pool('t')
        r.create_pool('')
        self.assertEqual(
            collections.Counter(r.list_pools()),
            collections.Counter(['t', '']))

    def test_list_pools_only_empty_name(self):
        r = self._connected()
        r.create_pool('')
        self.assertEqual(r.list_pools(), [''])

    def test_list_pools_non_utf8_name(self):
        r = self._connected()
        r.create_pool('good')
        r.create_pool(b'\xffpool')
        pools = r.list_pools()
        self.assertEqual(pools, ['good', u'\udcffpool'])
        self.assertTrue(r.pool_exists(pools[1]))
        r.delete_pool(pools[1])
        self.assertFalse(r.pool_exists(b'\xffpool'))
        self.assertEqual(r.list_pools(), ['good'])

    def test_list_pools_multiset(self):
        r = self._connected()
        pool_sets = [
            [],
            [''],
            ['a'],
            ['', 'a', 'bb'],
            ['x' * 200] + ['p%d' % i for i in range(100)],
        ]
        for pools in pool_sets:
            self.fake.pools = [p.encode() for p in pools]
            self.assertEqual(
                collections.Counter(r.list_pools()),
                collections.Counter(pools))

    def test_ioctx_create_destroy(self):
        r = self._connected()
        r.create_pool('one')
        ioctx = r.ioctx_create('one')
        addr = _addr(ioctx)
        self.assertEqual(self.fake.live_ioctxs, {addr: b'one'})
        r.ioctx_destroy(ioctx)
        self.assertEqual(
            self.fake.events, [('flush', addr), ('destroy', addr)])
        self.assertEqual(self.fake.live_ioctxs, {})

    def test_ioctx_create_missing_pool(self):
        r = self._connected()
        with self.assertRaises(rados_exc.ContextCreateError) as ctx:
            r.ioctx_create('nonexistent')
        self.assertEqual(ctx.exception.name, 'nonexistent')

    def test_ioctx_outlives_session(self):
        r = self._connected()
        r.create_pool('one')
        ioctx = r.ioctx_create('one')
        r.shutdown()
        self.assertEqual(len(self.fake.live_ioctxs), 1)
        r.ioctx_destroy(ioctx)
        self.assertEqual(self.fake.live_ioctxs, {})

    def test_open_ioctx(self):
        r = self._connected()
        r.create_pool('one')
        with r.open_ioctx('one') as ioctx:
            self.assertIn(_addr(ioctx), self.fake.live_ioctxs)
        self.assertEqual(self.fake.live_ioctxs, {})

    def test_open_ioctx_on_error(self):
        r = self._connected()
        r.create_pool('one')
        with self.assertRaises(ValueError):
            with r.open_ioctx('one'):
                raise ValueError()
        self.assertEqual([e[0] for e in self.fake.events],
                         ['flush', 'destroy'])
        self.assertEqual(self.fake.live_ioctxs, {})


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
