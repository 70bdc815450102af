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
Exceptions that can be raised by librados operations.
"""

import errno


class RadosError(Exception):
    errno = None
    message = None
    name = None

    def __str__(self):
        if self.name is not None:
            return "[Errno %d] %s: '%s'" % (
                self.errno, self.message, self.name)
        else:
            return "[Errno %d] %s" % (self.errno, self.message)

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__, self.errno, self.message)


class InitializationError(RadosError):
    message = "Failed to create a cluster handle"

    def __init__(self, errno):
        self.errno = errno


class InvalidHandleError(RadosError):
    errno = errno.EFAULT
    message = "Could not get a valid handle to the cluster"


class ConfigurationError(RadosError):
    message = "Failed to read the configuration file"

    def __init__(self, errno, name):
        self.errno = errno
        self.name = name


class ConnectionError(RadosError):
    message = "Failed to connect to the cluster"

    def __init__(self, errno):
        self.errno = errno


class SessionStateError(RadosError):

    """
    This exception is raised when a session is asked to make a transition
    its current state does not allow, e.g. to connect after a shutdown.
    """
    errno = errno.EINVAL
    message = "Operation not allowed in session state"

    def __init__(self, name):
        self.name = name


class NotConnectedError(RadosError):
    errno = errno.ENOTCONN
    message = "Rados not connected"

    def __init__(self, name=None):
        self.name = name


class PoolNameInvalid(RadosError):
    errno = errno.EINVAL
    message = "Invalid pool name"

    def __init__(self, name):
        self.name = name


class PoolStatusError(RadosError):
    message = "Problem getting pool status"

    def __init__(self, errno, name):
        self.errno = errno
        self.name = name


class PoolCreateError(RadosError):
    message = "Cannot create pool"

    def __init__(self, errno, name):
        self.errno = errno
        self.name = name


class PoolAlreadyExists(PoolCreateError):
    message = "Pool already exists"

    def __init__(self, name):
        super(PoolAlreadyExists, self).__init__(errno.EEXIST, name)


class PoolDeleteError(RadosError):
    message = "Cannot delete pool"

    def __init__(self, errno, name):
        self.errno = errno
        self.name = name


class PoolNotFound(PoolDeleteError):
    message = "Pool not found"

    def __init__(self, name):
        super(PoolNotFound, self).__init__(errno.ENOENT, name)


class EnumerationError(RadosError):

    """
    This exception is raised when the list of pool names cannot be
    retrieved or the data returned by the cluster cannot be parsed.
    `errno` is the status reported by the cluster, or ``EBADMSG`` /
    ``EOVERFLOW`` when the failure was detected by the parser or the
    buffer negotiation.
    """
    message = "Failed to list pools"

    def __init__(self, errno, detail=None):
        self.errno = errno
        self.name = detail


class ContextCreateError(RadosError):
    message = "Cannot create context for pool"

    def __init__(self, errno, name):
        self.errno = errno
        self.name = name


# vim: softtabstop=4 tabstop=4 expandtab shiftwidth=4
