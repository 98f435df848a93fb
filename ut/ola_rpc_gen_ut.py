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
#     ola_rpc_gen_ut.py
#
# Description:
#     Base test case and descriptor builders shared by the generator tests.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#

import re
import unittest

from google.protobuf.descriptor_pb2 import FileDescriptorProto

from ola_rpc_gen import FileGenerator
from ola_rpc_gen import Printer
from ola_rpc_gen.gen_helpers import output_base_name

ECHO_FILE = 'ola/rpc/test/Echo.proto'
ECHO_PACKAGE = 'ola.rpc.test'

def build_file(name, package, services, messages=None):
    """Build a FileDescriptorProto.

    services: list of (service_name, [(method_name, input, output)]) where
    input/output are message names local to the file. Every message named
    by a method is declared unless messages is given explicitly.
    """
    proto_file = FileDescriptorProto()
    proto_file.name = name
    proto_file.package = package

    scope = '.' + package if package else ''

    if messages is None:
        messages = []
        for (_, methods) in services:
            for (_, input_type, output_type) in methods:
                for msg in (input_type, output_type):
                    if not msg in messages:
                        messages.append(msg)

    for msg in messages:
        proto_file.message_type.add(name=msg)

    for (service_name, methods) in services:
        service = proto_file.service.add(name=service_name)
        for (method_name, input_type, output_type) in methods:
            service.method.add(name=method_name,
                               input_type=scope + '.' + input_type,
                               output_type=scope + '.' + output_type)
    return proto_file

def build_echo_file():
    return build_file(ECHO_FILE, ECHO_PACKAGE,
                      [('Echo', [('Ping', 'EchoRequest', 'EchoReply')])])

class OlaRpcGenTestCase(unittest.TestCase):
    """Base class: runs the generators into fresh printers."""

    longMessage = True

    def header(self, proto_file, output_name=None, **kwargs):
        printer = Printer()
        output_name = output_name or output_base_name(proto_file.name)
        FileGenerator(proto_file, output_name, **kwargs).generate_header(printer)
        return printer.getvalue()

    def implementation(self, proto_file, output_name=None, **kwargs):
        printer = Printer()
        output_name = output_name or output_base_name(proto_file.name)
        FileGenerator(proto_file, output_name,
                      **kwargs).generate_implementation(printer)
        return printer.getvalue()

    def assertInOrder(self, text, needles):
        pos = -1
        for needle in needles:
            found = text.find(needle, pos + 1)
            self.assertNotEqual(found, -1,
                                'Missing (or out of order): ' + repr(needle))
            pos = found

    def package_namespaces(self, text):
        """Return the (opened, closed) package namespace names in text."""
        opened = re.findall(r'^namespace (\w+) \{$', text, re.MULTILINE)
        closed = re.findall(r'^\}  // namespace (\w+)$', text, re.MULTILINE)
        return (opened, closed)
