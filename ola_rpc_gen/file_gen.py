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
#     file_gen.py
#
# Description:
#     Generates the service header (<output>.pb.h) and implementation
#     (<output>.pb.cpp) for one proto file, including the routine that binds
#     the per-service descriptor slots exactly once at run time.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     Service order is the declaration order in the proto file and is the
#     same for declarations, descriptor slots, initializers and definitions.
#

from .gen_helpers import ASSIGN_ONCE_NAME
from .gen_helpers import CppTypeResolver
from .gen_helpers import HEADER_EXT
from .gen_helpers import RPC_CHANNEL_INCLUDE
from .gen_helpers import RPC_CONTROLLER_INCLUDE
from .gen_helpers import RPC_NAMESPACE
from .gen_helpers import RPC_SERVICE_INCLUDE
from .gen_helpers import THICK_SEPARATOR
from .gen_helpers import gen_descriptor_slot_name
from .gen_helpers import gen_h_guard_name
from .gen_helpers import global_assign_descriptors_name
from .gen_helpers import has_descriptor_methods
from .gen_helpers import strip_proto
from .helpers import LogHelper
from .namespace import close_namespaces
from .namespace import open_namespaces
from .service_gen import ServiceGenerator
from .service_gen import ServiceGeneratorOptions
from .walker import OlaRpcParseException
from .walker import WalkerOps
from .walker import package_parts
from .walker import rpc_file_walk

lh = LogHelper(name=__name__)

BANNER = \
    '// Generated by the protocol buffer compiler.  DO NOT EDIT!\n' \
    '// source: $filename$\n' \
    '\n'

# Includes and body of protobuf_AssignDescriptorsOnce(), per barrier flavour.
ONCE_STD = 'std'
ONCE_PROTOBUF = 'protobuf'
ONCE_LEGACY = 'legacy'

ONCE_INCLUDES = {
    ONCE_STD      : '#include <mutex>\n',
    ONCE_PROTOBUF : '#include <google/protobuf/stubs/once.h>\n',
    ONCE_LEGACY   : '#include <google/protobuf/stubs/once.h>\n',
}

ONCE_BODIES = {
    ONCE_STD :
        'void $once$() {\n'
        '  static std::once_flag once;\n'
        '  std::call_once(once, &$assigndescriptorsname$);\n'
        '}\n'
        '\n',
    ONCE_PROTOBUF :
        'void $once$() {\n'
        '  static ::google::protobuf::internal::once_flag once;\n'
        '  ::google::protobuf::internal::call_once(once, '
        '&$assigndescriptorsname$);\n'
        '}\n'
        '\n',
    ONCE_LEGACY :
        'namespace {\n'
        '\n'
        'GOOGLE_PROTOBUF_DECLARE_ONCE(protobuf_AssignDescriptors_once_);\n'
        'inline void $once$() {\n'
        '  ::google::protobuf::GoogleOnceInit('
        '&protobuf_AssignDescriptors_once_,\n'
        '                 &$assigndescriptorsname$);\n'
        '}\n'
        '\n'
        '}  // namespace\n',
}

class FileGeneratorOptions():

    def __init__(self, once=ONCE_STD, dllexport_decl=''):
        if not once in ONCE_BODIES:
            raise OlaRpcParseException('Error: unknown once implementation: ' +
                                       str(once))
        self.once = once
        self.dllexport_decl = dllexport_decl

def check_f_enter(proto_file):
    lh.debug('Checking %s', proto_file.name)
    return []

def check_f_leave(proto_file):
    lh.debug('Checked %s: %d service(s)', proto_file.name,
             len(proto_file.service))
    return []

def check_s_enter(service_index, service):
    lh.debug('Checking service %d: %s', service_index, service.name)
    return [service.name]

def check_s_leave(service_index, service):
    lh.debug('Checked service %s: %d method(s)', service.name,
             len(service.method))
    return []

CHECK_OPS = WalkerOps(f_enter=check_f_enter, f_leave=check_f_leave,
                      s_enter=check_s_enter, s_leave=check_s_leave)

class FileGenerator():

    def __init__(self, proto_file, output_name, options=None,
                 type_resolver=None):
        # Raises on a malformed descriptor before anything is built.
        self.service_names = rpc_file_walk(proto_file, CHECK_OPS)

        if not output_name:
            raise OlaRpcParseException('Error: empty output name for ' +
                                       proto_file.name)

        self.file = proto_file
        self.output_name = output_name
        self.options = FileGeneratorOptions() if options is None else options
        self.package_parts = package_parts(proto_file)

        if type_resolver is None:
            type_resolver = CppTypeResolver([proto_file])

        service_options = ServiceGeneratorOptions(
            dllexport_decl=self.options.dllexport_decl)
        self.service_generators = [
            ServiceGenerator(proto_file, index, service, service_options,
                             type_resolver)
            for index, service in enumerate(proto_file.service)
        ]

    ###########################################################################
    # Header
    ###########################################################################
    def generate_header(self, printer):
        lh.debug('Generating header for %s (%s)', self.file.name,
                 self.output_name)

        var_map = {
            'basename'  : strip_proto(self.file.name),
            'filename'  : self.file.name,
            'guard'     : gen_h_guard_name(self.output_name),
            'ext'       : HEADER_EXT,
            'rpcservice': RPC_SERVICE_INCLUDE,
        }

        printer.emit(BANNER +
                     '#ifndef $guard$  // NOLINT(build/header_guard)\n'
                     '#define $guard$\n'
                     '\n'
                     '#include <google/protobuf/service.h>\n'
                     '\n'
                     '#include "$basename$$ext$"\n'
                     '#include "$rpcservice$"\n'
                     '\n', var_map)

        self._generate_rpc_forward_declarations(printer)

        open_namespaces(printer, self.package_parts)

        for service_generator in self.service_generators:
            service_generator.generate_declarations(printer)

        close_namespaces(printer, self.package_parts)

        printer.emit('#endif  // $guard$\n', var_map)

    def _generate_rpc_forward_declarations(self, printer):
        for part in RPC_NAMESPACE:
            printer.emit('namespace $part$ {\n', part=part)
        printer.emit('class RpcController;\n'
                     'class RpcChannel;\n')
        for part in reversed(RPC_NAMESPACE):
            printer.emit('}  // $part$\n', part=part)
        printer.emit('\n')

    ###########################################################################
    # Implementation
    ###########################################################################
    def generate_implementation(self, printer):
        lh.debug('Generating implementation for %s (%s)', self.file.name,
                 self.output_name)

        printer.emit(BANNER +
                     '#include "$file$$ext$"\n'
                     '\n'
                     '#include <google/protobuf/descriptor.h>'
                     '  // NOLINT(build/include)\n'
                     '$once_include$'
                     '\n'
                     '#include "$channel$"\n'
                     '#include "$controller$"\n'
                     '\n',
                     file=self.output_name,
                     filename=self.file.name,
                     ext=HEADER_EXT,
                     once_include=ONCE_INCLUDES[self.options.once],
                     channel=RPC_CHANNEL_INCLUDE,
                     controller=RPC_CONTROLLER_INCLUDE)

        open_namespaces(printer, self.package_parts)

        printer.emit('\n'
                     'namespace {\n'
                     '\n')
        for service_generator in self.service_generators:
            printer.emit(
                'const ::google::protobuf::ServiceDescriptor* $slot$ =\n'
                '    NULL;\n',
                slot=gen_descriptor_slot_name(service_generator.descriptor.name))
        printer.emit('\n'
                     '}  // namespace\n'
                     '\n')

        self.generate_build_descriptors(printer)
        printer.emit('\n')
        printer.emit(THICK_SEPARATOR)
        printer.emit('\n')

        for service_generator in self.service_generators:
            service_generator.generate_implementation(printer)

        close_namespaces(printer, self.package_parts)

    def generate_build_descriptors(self, printer):
        # Lite runtime files carry no descriptors to bind.
        if not has_descriptor_methods(self.file):
            lh.debug('Skipping descriptor assignment for lite file %s',
                     self.file.name)
            return

        assign_name = global_assign_descriptors_name(self.output_name)

        printer.emit('\n'
                     'void $assigndescriptorsname$() {\n',
                     assigndescriptorsname=assign_name)
        printer.indent()

        printer.emit(
            'const ::google::protobuf::FileDescriptor* file =\n'
            '  ::google::protobuf::DescriptorPool::generated_pool()'
            '->FindFileByName(\n'
            '    "$filename$");\n'
            'GOOGLE_CHECK(file != NULL);\n',
            filename=self.file.name)

        for index, service_generator in enumerate(self.service_generators):
            service_generator.generate_descriptor_initializer(printer, index)

        printer.outdent()
        printer.emit('}\n'
                     '\n')

        printer.emit(ONCE_BODIES[self.options.once],
                     once=ASSIGN_ONCE_NAME,
                     assigndescriptorsname=assign_name)
