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
#     test_service_gen.py
#
# Description:
#     Tests for the per-service declaration/definition generator.
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

from ola_rpc_gen import Printer
from ola_rpc_gen import ServiceGenerator
from ola_rpc_gen import ServiceGeneratorOptions
from ola_rpc_gen.gen_helpers import CppTypeResolver

from ola_rpc_gen_ut import OlaRpcGenTestCase
from ola_rpc_gen_ut import build_echo_file
from ola_rpc_gen_ut import build_file

class ServiceGeneratorTestCase(OlaRpcGenTestCase):

    def setUp(self):
        self.proto_file = build_file(
            'ola/rpc/test/Echo.proto', 'ola.rpc.test',
            [('Echo', [('Ping', 'EchoRequest', 'EchoReply'),
                       ('Stream', 'StreamRequest', 'EchoReply')])])
        self.generator = ServiceGenerator(self.proto_file, 0,
                                          self.proto_file.service[0])

    def run_op(self, op, *args):
        printer = Printer()
        op(printer, *args)
        return printer.getvalue()

    def test_declarations(self):
        text = self.run_op(self.generator.generate_declarations)
        self.assertInOrder(text, [
            'class Echo_Stub;\n\n',
            'class Echo : public ola::rpc::RpcService {\n',
            '  typedef Echo_Stub Stub;\n',
            '  static const ::google::protobuf::ServiceDescriptor* '
            'descriptor();\n',
            '  virtual void Ping(ola::rpc::RpcController* controller,\n'
            '      const ::ola::rpc::test::EchoRequest* request,\n'
            '      ::ola::rpc::test::EchoReply* response,\n'
            '      CompletionCallback* done);\n',
            '  virtual void Stream(',
            '  void CallMethod(',
            '  GOOGLE_DISALLOW_EVIL_CONSTRUCTORS(Echo);\n',
            'class Echo_Stub : public Echo {\n',
            '  explicit Echo_Stub(ola::rpc::RpcChannel* channel);\n',
            '  void Ping(ola::rpc::RpcController* controller,\n',
            '  void Stream(',
            '  ola::rpc::RpcChannel* channel_;\n',
        ])

    def test_dllexport(self):
        generator = ServiceGenerator(
            self.proto_file, 0, self.proto_file.service[0],
            ServiceGeneratorOptions(dllexport_decl='OLA_EXPORT'))
        text = self.run_op(generator.generate_declarations)
        self.assertIn('class OLA_EXPORT Echo : public', text)
        self.assertIn('class OLA_EXPORT Echo_Stub : public Echo', text)

    def test_descriptor_initializer(self):
        self.assertEqual(
            self.run_op(self.generator.generate_descriptor_initializer, 3),
            'Echo_descriptor_ = file->service(3);\n')

    def test_implementation(self):
        text = self.run_op(self.generator.generate_implementation)
        self.assertInOrder(text, [
            'Echo::~Echo() {}\n',
            'const ::google::protobuf::ServiceDescriptor* '
            'Echo::descriptor() {\n'
            '  protobuf_AssignDescriptorsOnce();\n'
            '  return Echo_descriptor_;\n'
            '}\n',
            'controller->SetFailed("Method Ping() not implemented.");\n',
            'controller->SetFailed("Method Stream() not implemented.");\n',
            'void Echo::CallMethod(\n',
            '  GOOGLE_DCHECK_EQ(method->service(), Echo_descriptor_);\n',
            '    case 0:\n      Ping(controller,\n',
            '    case 1:\n      Stream(controller,\n',
            'Echo::GetRequestPrototype(',
            '      return ::ola::rpc::test::EchoRequest::default_instance();\n',
            '      return ::ola::rpc::test::StreamRequest::default_instance();\n',
            'Echo::GetResponsePrototype(',
            '      return ::ola::rpc::test::EchoReply::default_instance();\n',
            'Echo_Stub::Echo_Stub(ola::rpc::RpcChannel* channel)\n',
            'void Echo_Stub::Ping(\n',
            '  channel_->CallMethod(descriptor()->method(0),\n',
            'void Echo_Stub::Stream(\n',
            '  channel_->CallMethod(descriptor()->method(1),\n',
        ])

    def test_nested_types_from_resolver(self):
        other = build_file('ola/Common.proto', 'ola.common', [],
                           messages=['Outer'])
        other.message_type[0].nested_type.add(name='Inner')
        proto_file = build_echo_file()
        proto_file.service[0].method[0].input_type = '.ola.common.Outer.Inner'

        generator = ServiceGenerator(proto_file, 0, proto_file.service[0],
                                     type_resolver=CppTypeResolver(
                                         [other, proto_file]))
        text = self.run_op(generator.generate_declarations)
        self.assertIn('const ::ola::common::Outer_Inner* request,', text)

if __name__ == '__main__':
    unittest.main()
