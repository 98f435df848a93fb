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
#     service_gen.py
#
# Description:
#     Emits the C++ declarations and definitions for a single proto service:
#     the abstract ola::rpc::RpcService subclass, its _Stub client class and
#     the descriptor initializer used by the file's registration routine.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     Every method prints straight to the printer it is given, in call
#     order. Nothing is buffered.
#

from .gen_helpers import ASSIGN_ONCE_NAME
from .gen_helpers import CppTypeResolver
from .gen_helpers import THIN_SEPARATOR
from .gen_helpers import gen_descriptor_slot_name
from .gen_helpers import gen_stub_name
from .helpers import LogHelper
from .walker import WalkerOps
from .walker import rpc_service_walk

lh = LogHelper(name=__name__)

REQUEST = 'Request'
RESPONSE = 'Response'

BAD_INDEX = \
    '      GOOGLE_LOG(FATAL) << "Bad method index; this should never happen.";\n'

class ServiceGeneratorOptions():

    def __init__(self, dllexport_decl=''):
        self.dllexport_decl = dllexport_decl

class ServiceGenerator():

    def __init__(self, proto_file, index, descriptor, options=None,
                 type_resolver=None):
        self.proto_file = proto_file
        self.index = index
        self.descriptor = descriptor
        self.options = ServiceGeneratorOptions() if options is None \
                       else options
        self.types = CppTypeResolver([proto_file]) if type_resolver is None \
                     else type_resolver

        dllexport = self.options.dllexport_decl
        self.vars = {
            'classname'  : descriptor.name,
            'stubname'   : gen_stub_name(descriptor.name),
            'descriptor' : gen_descriptor_slot_name(descriptor.name),
            'once'       : ASSIGN_ONCE_NAME,
            'dllexport'  : dllexport + ' ' if dllexport else '',
        }

    def _walk(self, s_method):
        rpc_service_walk(self.proto_file, self.index, self.descriptor,
                         WalkerOps(s_method=s_method))

    def _method_vars(self, method_index, method):
        sub_vars = dict(self.vars)
        sub_vars['name'] = method.name
        sub_vars['index'] = str(method_index)
        sub_vars['input_type'] = self.types.class_name(method.input_type)
        sub_vars['output_type'] = self.types.class_name(method.output_type)
        return sub_vars

    ###########################################################################
    # Declarations
    ###########################################################################
    def generate_declarations(self, printer):
        lh.debug('Declaring service %s', self.descriptor.name)

        printer.emit('class $stubname$;\n'
                     '\n', self.vars)

        self._generate_interface(printer)
        self._generate_stub_definition(printer)

    def _generate_interface(self, printer):
        printer.emit(
            'class $dllexport$$classname$ : public ola::rpc::RpcService {\n'
            ' protected:\n'
            '  // This class should be treated as an abstract interface.\n'
            '  inline $classname$() {}\n'
            ' public:\n'
            '  virtual ~$classname$();\n', self.vars)
        printer.indent()

        printer.emit(
            '\n'
            'typedef $stubname$ Stub;\n'
            '\n'
            'static const ::google::protobuf::ServiceDescriptor* '
            'descriptor();\n'
            '\n', self.vars)

        self._generate_method_signatures(printer, 'virtual ')

        printer.emit(
            '\n'
            '$separator$'
            '\n'
            'const ::google::protobuf::ServiceDescriptor* GetDescriptor();\n'
            'void CallMethod(const ::google::protobuf::MethodDescriptor* '
            'method,\n'
            '                ola::rpc::RpcController* controller,\n'
            '                const ::google::protobuf::Message* request,\n'
            '                ::google::protobuf::Message* response,\n'
            '                CompletionCallback* done);\n'
            'const ::google::protobuf::Message& GetRequestPrototype(\n'
            '  const ::google::protobuf::MethodDescriptor* method) const;\n'
            'const ::google::protobuf::Message& GetResponsePrototype(\n'
            '  const ::google::protobuf::MethodDescriptor* method) const;\n',
            separator=THIN_SEPARATOR)

        printer.outdent()
        printer.emit(
            '\n'
            ' private:\n'
            '  GOOGLE_DISALLOW_EVIL_CONSTRUCTORS($classname$);\n'
            '};\n'
            '\n', self.vars)

    def _generate_stub_definition(self, printer):
        printer.emit(
            'class $dllexport$$stubname$ : public $classname$ {\n'
            ' public:\n', self.vars)
        printer.indent()

        printer.emit(
            'explicit $stubname$(ola::rpc::RpcChannel* channel);\n'
            '~$stubname$();\n'
            '\n'
            'inline ola::rpc::RpcChannel* channel() { return channel_; }\n'
            '\n', self.vars)

        self._generate_method_signatures(printer, '')

        printer.outdent()
        printer.emit(
            ' private:\n'
            '  ola::rpc::RpcChannel* channel_;\n'
            '  bool owns_channel_;\n'
            '  GOOGLE_DISALLOW_EVIL_CONSTRUCTORS($stubname$);\n'
            '};\n'
            '\n', self.vars)

    def _generate_method_signatures(self, printer, virtual):
        def signature(service, method_index, method):
            sub_vars = self._method_vars(method_index, method)
            sub_vars['virtual'] = virtual
            printer.emit(
                '$virtual$void $name$(ola::rpc::RpcController* controller,\n'
                '    const $input_type$* request,\n'
                '    $output_type$* response,\n'
                '    CompletionCallback* done);\n', sub_vars)
            return []

        self._walk(signature)

    ###########################################################################
    # Descriptor registration
    ###########################################################################
    def generate_descriptor_initializer(self, printer, index):
        printer.emit('$descriptor$ = file->service($index$);\n',
                     self.vars, index=str(index))

    ###########################################################################
    # Definitions
    ###########################################################################
    def generate_implementation(self, printer):
        lh.debug('Defining service %s', self.descriptor.name)

        printer.emit(
            '$classname$::~$classname$() {}\n'
            '\n'
            'const ::google::protobuf::ServiceDescriptor* '
            '$classname$::descriptor() {\n'
            '  $once$();\n'
            '  return $descriptor$;\n'
            '}\n'
            '\n'
            'const ::google::protobuf::ServiceDescriptor* '
            '$classname$::GetDescriptor() {\n'
            '  return descriptor();\n'
            '}\n'
            '\n', self.vars)

        self._generate_not_implemented_methods(printer)
        self._generate_call_method(printer)
        self._generate_get_prototype(printer, REQUEST)
        self._generate_get_prototype(printer, RESPONSE)

        printer.emit(
            '$stubname$::$stubname$(ola::rpc::RpcChannel* channel)\n'
            '  : channel_(channel), owns_channel_(false) {}\n'
            '$stubname$::~$stubname$() {\n'
            '  if (owns_channel_) delete channel_;\n'
            '}\n'
            '\n', self.vars)

        self._generate_stub_methods(printer)

    def _generate_not_implemented_methods(self, printer):
        def not_implemented(service, method_index, method):
            printer.emit(
                'void $classname$::$name$(\n'
                '    ola::rpc::RpcController* controller,\n'
                '    const $input_type$*,\n'
                '    $output_type$*,\n'
                '    CompletionCallback* done) {\n'
                '  controller->SetFailed("Method $name$() not implemented.");\n'
                '  done->Run();\n'
                '}\n'
                '\n', self._method_vars(method_index, method))
            return []

        self._walk(not_implemented)

    def _generate_call_method(self, printer):
        printer.emit(
            'void $classname$::CallMethod(\n'
            '    const ::google::protobuf::MethodDescriptor* method,\n'
            '    ola::rpc::RpcController* controller,\n'
            '    const ::google::protobuf::Message* request,\n'
            '    ::google::protobuf::Message* response,\n'
            '    CompletionCallback* done) {\n'
            '  GOOGLE_DCHECK_EQ(method->service(), $descriptor$);\n'
            '  switch (method->index()) {\n', self.vars)

        def dispatch(service, method_index, method):
            printer.emit(
                '    case $index$:\n'
                '      $name$(controller,\n'
                '          ::google::protobuf::down_cast<\n'
                '              const $input_type$*>(request),\n'
                '          ::google::protobuf::down_cast<\n'
                '              $output_type$*>(response),\n'
                '          done);\n'
                '      break;\n', self._method_vars(method_index, method))
            return []

        self._walk(dispatch)

        printer.emit(
            '    default:\n'
            '$bad_index$'
            '      break;\n'
            '  }\n'
            '}\n'
            '\n', bad_index=BAD_INDEX)

    def _generate_get_prototype(self, printer, which):
        printer.emit(
            'const ::google::protobuf::Message& '
            '$classname$::Get$which$Prototype(\n'
            '    const ::google::protobuf::MethodDescriptor* method) const {\n'
            '  GOOGLE_DCHECK_EQ(method->service(), descriptor());\n'
            '  switch (method->index()) {\n', self.vars, which=which)

        def prototype(service, method_index, method):
            sub_vars = self._method_vars(method_index, method)
            sub_vars['type'] = sub_vars['input_type'] if which == REQUEST \
                               else sub_vars['output_type']
            printer.emit(
                '    case $index$:\n'
                '      return $type$::default_instance();\n', sub_vars)
            return []

        self._walk(prototype)

        printer.emit(
            '    default:\n'
            '$bad_index$'
            '      return *reinterpret_cast< ::google::protobuf::Message*>'
            '(NULL);\n'
            '  }\n'
            '}\n'
            '\n', bad_index=BAD_INDEX)

    def _generate_stub_methods(self, printer):
        def stub_method(service, method_index, method):
            printer.emit(
                'void $stubname$::$name$(\n'
                '    ola::rpc::RpcController* controller,\n'
                '    const $input_type$* request,\n'
                '    $output_type$* response,\n'
                '    CompletionCallback* done) {\n'
                '  channel_->CallMethod(descriptor()->method($index$),\n'
                '                       controller, request, response, '
                'done);\n'
                '}\n', self._method_vars(method_index, method))
            return []

        self._walk(stub_method)
