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
#     test_file_gen.py
#
# Description:
#     Tests for header/implementation generation of a whole proto file.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#

import unittest

from google.protobuf.descriptor_pb2 import FileDescriptorProto
from google.protobuf.descriptor_pb2 import FileOptions

from ola_rpc_gen import FileGenerator
from ola_rpc_gen import FileGeneratorOptions
from ola_rpc_gen import OlaRpcParseException
from ola_rpc_gen import Printer
from ola_rpc_gen.walker import WalkerOps
from ola_rpc_gen.walker import rpc_file_walk

from ola_rpc_gen_ut import ECHO_FILE
from ola_rpc_gen_ut import OlaRpcGenTestCase
from ola_rpc_gen_ut import build_echo_file
from ola_rpc_gen_ut import build_file

GUARD = 'PROTOBUF_OLA_RPC_TEST_ECHOSERVICE__INCLUDED'

class EchoHeaderTestCase(OlaRpcGenTestCase):

    def setUp(self):
        self.text = self.header(build_echo_file())

    def test_banner_and_guard(self):
        self.assertTrue(self.text.startswith(
            '// Generated by the protocol buffer compiler.  DO NOT EDIT!\n'
            '// source: ' + ECHO_FILE + '\n'
            '\n'
            '#ifndef ' + GUARD + '  // NOLINT(build/header_guard)\n'
            '#define ' + GUARD + '\n'))
        self.assertTrue(self.text.endswith('#endif  // ' + GUARD + '\n'))

    def test_includes_and_forward_declarations(self):
        self.assertInOrder(self.text, [
            '#include <google/protobuf/service.h>\n',
            '#include "ola/rpc/test/Echo.pb.h"\n',
            '#include "common/rpc/RpcService.h"\n',
            'namespace ola {\nnamespace rpc {\n'
            'class RpcController;\nclass RpcChannel;\n'
            '}  // rpc\n}  // ola\n',
        ])

    def test_namespaces_wrap_declaration(self):
        self.assertInOrder(self.text, [
            'namespace ola {\nnamespace rpc {\nnamespace test {\n',
            'class Echo : public ola::rpc::RpcService {',
            'class Echo_Stub : public Echo {',
            '\n}  // namespace test\n}  // namespace rpc\n}  // namespace ola\n',
            '#endif',
        ])

    def test_guard_uses_output_name(self):
        text = self.header(build_echo_file(), output_name='other/Name')
        self.assertIn('#define PROTOBUF_OTHER_NAME__INCLUDED\n', text)
        self.assertIn('#include "ola/rpc/test/Echo.pb.h"\n', text)

class EchoImplementationTestCase(OlaRpcGenTestCase):

    def setUp(self):
        self.text = self.implementation(build_echo_file())

    def test_includes(self):
        self.assertInOrder(self.text, [
            '// source: ' + ECHO_FILE + '\n',
            '#include "ola/rpc/test/EchoService.pb.h"\n',
            '#include <google/protobuf/descriptor.h>',
            '#include <mutex>\n',
            '#include "common/rpc/RpcChannel.h"\n',
            '#include "common/rpc/RpcController.h"\n',
        ])

    def test_layout(self):
        self.assertInOrder(self.text, [
            'namespace ola {\nnamespace rpc {\nnamespace test {\n',
            'namespace {\n\n'
            'const ::google::protobuf::ServiceDescriptor* Echo_descriptor_ =\n'
            '    NULL;\n'
            '\n}  // namespace\n',
            'void protobuf_AssignDesc_OLA_RPC_TEST_ECHOSERVICE() {\n',
            '    "' + ECHO_FILE + '");\n'
            '  GOOGLE_CHECK(file != NULL);\n'
            '  Echo_descriptor_ = file->service(0);\n'
            '}\n',
            'void protobuf_AssignDescriptorsOnce() {\n'
            '  static std::once_flag once;\n'
            '  std::call_once(once, '
            '&protobuf_AssignDesc_OLA_RPC_TEST_ECHOSERVICE);\n'
            '}\n',
            '// ====',
            'Echo::~Echo() {}\n',
            '  return Echo_descriptor_;\n',
            '\n}  // namespace test\n}  // namespace rpc\n}  // namespace ola\n',
        ])
        self.assertTrue(self.text.endswith('}  // namespace ola\n'))

    def test_protobuf_once(self):
        text = self.implementation(
            build_echo_file(), options=FileGeneratorOptions(once='protobuf'))
        self.assertIn('#include <google/protobuf/stubs/once.h>\n', text)
        self.assertIn('::google::protobuf::internal::call_once(once, ', text)
        self.assertNotIn('std::call_once', text)

    def test_legacy_once(self):
        text = self.implementation(
            build_echo_file(), options=FileGeneratorOptions(once='legacy'))
        self.assertIn(
            'GOOGLE_PROTOBUF_DECLARE_ONCE(protobuf_AssignDescriptors_once_);\n',
            text)
        self.assertIn('::google::protobuf::GoogleOnceInit(', text)

    def test_unknown_once(self):
        with self.assertRaises(OlaRpcParseException):
            FileGeneratorOptions(once='spinlock')

    def test_lite_runtime(self):
        proto_file = build_echo_file()
        proto_file.options.optimize_for = FileOptions.LITE_RUNTIME
        text = self.implementation(proto_file)
        self.assertNotIn('protobuf_AssignDesc_', text)
        self.assertNotIn('FindFileByName', text)
        # The slots and service bodies are still there.
        self.assertIn('Echo_descriptor_ =\n    NULL;\n', text)
        self.assertIn('Echo::~Echo() {}\n', text)

class ServiceOrderTestCase(OlaRpcGenTestCase):

    def build(self, names):
        return build_file('order.proto', 'order',
                          [(name, [('Run', 'Req', 'Rep')]) for name in names])

    def check_order(self, names):
        proto_file = self.build(names)
        header = self.header(proto_file)
        impl = self.implementation(proto_file)

        self.assertInOrder(header, ['class ' + name + ' : public '
                                    for name in names])
        self.assertInOrder(impl, [name + '_descriptor_ =\n    NULL;'
                                  for name in names])
        self.assertInOrder(impl, ['  ' + name + '_descriptor_ = file->service(' +
                                  str(index) + ');\n'
                                  for (index, name) in enumerate(names)])
        self.assertInOrder(impl, [name + '::~' + name + '() {}'
                                  for name in names])

    def test_declaration_order(self):
        self.check_order(['A', 'B', 'C'])

    def test_permuted_order(self):
        self.check_order(['C', 'A', 'B'])

class EmptyPackageTestCase(OlaRpcGenTestCase):

    def setUp(self):
        self.proto_file = build_file('Plain.proto', '',
                                     [('Echo', [('Ping', 'Req', 'Rep')])])

    def test_header(self):
        text = self.header(self.proto_file)
        (opened, closed) = self.package_namespaces(text)
        # Only the fixed ola::rpc forward declarations remain.
        self.assertEqual(opened, ['ola', 'rpc'])
        self.assertEqual(closed, [])
        self.assertIn('}  // ola\n\nclass Echo_Stub;\n', text)
        self.assertIn('virtual void Ping(', text)

    def test_implementation(self):
        text = self.implementation(self.proto_file)
        self.assertEqual(self.package_namespaces(text), ([], []))
        self.assertIn('Echo_descriptor_ = file->service(0);\n', text)
        self.assertIn('Echo::~Echo() {}\n', text)
        self.assertIn('return ::Req::default_instance();\n', text)

class NoServicesTestCase(OlaRpcGenTestCase):

    def setUp(self):
        self.proto_file = build_file('ola/Types.proto', 'ola', [],
                                     messages=['Foo'])

    def test_implementation(self):
        text = self.implementation(self.proto_file)
        self.assertIn('namespace {\n\n\n}  // namespace\n', text)
        self.assertIn('  GOOGLE_CHECK(file != NULL);\n}\n', text)
        self.assertNotIn('file->service(', text)
        self.assertNotIn('_descriptor_', text)

    def test_header(self):
        text = self.header(self.proto_file)
        self.assertIn('namespace ola {\n\n}  // namespace ola\n', text)
        self.assertNotIn('class ', text.split('}  // ola\n')[1])

class MalformedInputTestCase(unittest.TestCase):

    def test_none(self):
        with self.assertRaises(OlaRpcParseException):
            FileGenerator(None, 'out')

    def test_wrong_type(self):
        with self.assertRaises(OlaRpcParseException):
            FileGenerator('Echo.proto', 'out')

    def test_unnamed_file(self):
        with self.assertRaises(OlaRpcParseException):
            FileGenerator(FileDescriptorProto(), 'out')

    def test_empty_output_name(self):
        with self.assertRaises(OlaRpcParseException):
            FileGenerator(build_echo_file(), '')

    def test_unnamed_service(self):
        proto_file = build_echo_file()
        proto_file.service.add()
        with self.assertRaises(OlaRpcParseException):
            FileGenerator(proto_file, 'out')

    def test_method_without_types(self):
        proto_file = build_echo_file()
        proto_file.service[0].method.add(name='Broken')
        with self.assertRaises(OlaRpcParseException):
            FileGenerator(proto_file, 'out')

    def test_service_names_from_walk(self):
        proto_file = build_file(
            ECHO_FILE, 'ola.rpc.test',
            [('Echo', [('Ping', 'EchoRequest', 'EchoReply')]), ('Admin', [])])
        generator = FileGenerator(proto_file, 'out')
        self.assertEqual(generator.service_names, ['Echo', 'Admin'])

    def test_generation_is_append_only(self):
        generator = FileGenerator(build_echo_file(), 'out')
        printer = Printer()
        generator.generate_header(printer)
        once = printer.getvalue()
        generator.generate_header(printer)
        self.assertEqual(printer.getvalue(), once + once)

class WalkerTestCase(unittest.TestCase):

    def test_hook_order(self):
        proto_file = build_file(
            ECHO_FILE, 'ola.rpc.test',
            [('Echo', [('Ping', 'EchoRequest', 'EchoReply'),
                       ('Pong', 'EchoReply', 'EchoRequest')]),
             ('Admin', [])])
        events = []

        def record(*event):
            events.append(event)
            return []

        ops = WalkerOps(
            f_enter=lambda f: record('f_enter', f.name),
            f_leave=lambda f: record('f_leave', f.name),
            s_enter=lambda i, s: record('s_enter', i, s.name),
            s_method=lambda s, i, m: record('s_method', s.name, i, m.name),
            s_leave=lambda i, s: record('s_leave', i, s.name))
        rpc_file_walk(proto_file, ops)

        self.assertEqual(events, [
            ('f_enter', ECHO_FILE),
            ('s_enter', 0, 'Echo'),
            ('s_method', 'Echo', 0, 'Ping'),
            ('s_method', 'Echo', 1, 'Pong'),
            ('s_leave', 0, 'Echo'),
            ('s_enter', 1, 'Admin'),
            ('s_leave', 1, 'Admin'),
            ('f_leave', ECHO_FILE),
        ])

    def test_hook_output_is_collected(self):
        ops = WalkerOps(s_enter=lambda i, s: [s.name],
                        s_method=lambda s, i, m: [m.name])
        self.assertEqual(rpc_file_walk(build_echo_file(), ops),
                         ['Echo', 'Ping'])

if __name__ == '__main__':
    unittest.main()
