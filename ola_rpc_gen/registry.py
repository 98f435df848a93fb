#
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER
#
# Copyright (c) 2026, OLA RPC generator developers. All rights reserved.
#
#
# The contents of this file are subject to the terms of the BSD 3 clause
# License (the "License"). You may not use this file except in compliance
# with the License.
#
# You can obtain a copy of the license in the LICENSE file at the top of
# the source tree.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
# this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
# notice, this list of conditions and the following disclaimer in the
# documentation and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
# contributors may be used to endorse or promote products derived from this
# software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
#
# File name:
#     registry.py
#
# Description:
#     Python side of the descriptor registration protocol emitted into the
#     generated C++: a read-only file lookup over a protobuf DescriptorPool,
#     a one-time execution barrier and a table of per-service descriptor
#     slots that is filled through that barrier.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     The plugin uses ServiceDescriptorTable to check that each emitted
#     file->service(i) index resolves to the service of the same name.
#

import threading

from google.protobuf import descriptor_pool
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .helpers import LogHelper
from .helpers import OlaRpcGenException

lh = LogHelper(name=__name__)

class DescriptorNotFoundException(OlaRpcGenException):
    pass

class DescriptorRegistry():
    """Read-only file lookup over a DescriptorPool."""

    def __init__(self, pool):
        self.pool = pool

    @classmethod
    def default(cls):
        return cls(descriptor_pool.Default())

    @classmethod
    def from_file_protos(cls, proto_files):
        """Build a private pool. proto_files must be in dependency order, as
        protoc hands them to plugins."""
        pool = descriptor_pool.DescriptorPool()
        for proto_file in proto_files:
            try:
                pool.AddSerializedFile(proto_file.SerializeToString())
            except (TypeError, KeyError, ValueError) as e:
                raise OlaRpcGenException('Error: cannot register ' +
                                         proto_file.name + ': ' + str(e))
        return cls(pool)

    def lookup_file(self, name):
        try:
            return self.pool.FindFileByName(name)
        except KeyError:
            return None

###############################################################################
# One-time barrier
###############################################################################
NOT_STARTED = 0
RUNNING = 1
DONE = 2

class OnceBarrier():
    """Runs a callable exactly once, whatever the number of callers.

    The first caller runs it; callers arriving while it runs wait until it
    is finished; later callers return straight away. If the callable raises,
    the barrier goes back to NOT_STARTED, the exception reaches the caller
    that ran it and the next caller tries again.
    """

    def __init__(self):
        self.cond = threading.Condition()
        self.state = NOT_STARTED

    def done(self):
        with self.cond:
            return self.state == DONE

    def run(self, fn):
        with self.cond:
            while self.state == RUNNING:
                self.cond.wait()
            if self.state == DONE:
                return
            self.state = RUNNING

        try:
            fn()
        except BaseException:
            with self.cond:
                self.state = NOT_STARTED
                self.cond.notify_all()
            raise

        with self.cond:
            self.state = DONE
            self.cond.notify_all()

###############################################################################
# Descriptor slots
###############################################################################
class ServiceDescriptorTable():

    def __init__(self, file_name, service_names, registry):
        self.file_name = file_name
        self.service_names = list(service_names)
        self.registry = registry
        self.slots = dict((name, None) for name in self.service_names)
        self.once = OnceBarrier()

    @classmethod
    def for_file(cls, proto_file, registry):
        if not isinstance(proto_file, FileDescriptorProto):
            raise OlaRpcGenException('Error: not a FileDescriptorProto: ' +
                                     type(proto_file).__name__)
        return cls(proto_file.name,
                   [service.name for service in proto_file.service],
                   registry)

    def assign_descriptors(self):
        file_desc = self.registry.lookup_file(self.file_name)
        if file_desc is None:
            lh.error('File %s is not registered', self.file_name)
            raise DescriptorNotFoundException('Error: file not found in ' +
                                              'descriptor registry: ' +
                                              self.file_name)

        by_index = dict((service.index, service)
                        for service in file_desc.services_by_name.values())
        # Slots are only published once every index resolved.
        slots = {}
        for index, name in enumerate(self.service_names):
            if not index in by_index:
                raise DescriptorNotFoundException('Error: ' + self.file_name +
                                                  ' has no service at index ' +
                                                  str(index))
            slots[name] = by_index[index]
        self.slots = slots

        lh.debug('Assigned %d service descriptor(s) for %s',
                 len(self.service_names), self.file_name)

    def assign_descriptors_once(self):
        self.once.run(self.assign_descriptors)

    def descriptor(self, service_name):
        self.assign_descriptors_once()
        return self.slots[service_name]
