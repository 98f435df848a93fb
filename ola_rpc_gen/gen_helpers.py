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
#     gen_helpers.py
#
# Description:
#     Naming helpers and fixed strings shared by the file and service
#     generators.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     filename_identifier() maps every non-alphanumeric character to '_', so
#     names such as 'a-b' and 'a.b' share one identifier (and one include
#     guard). That collision class is kept as is.
#

import re

from google.protobuf.descriptor_pb2 import FileOptions

HEADER_EXT = '.pb.h'
IMPL_EXT = '.pb.cpp'
OUTPUT_SUFFIX = 'Service'

RPC_SERVICE_INCLUDE = 'common/rpc/RpcService.h'
RPC_CHANNEL_INCLUDE = 'common/rpc/RpcChannel.h'
RPC_CONTROLLER_INCLUDE = 'common/rpc/RpcController.h'
RPC_NAMESPACE = ['ola', 'rpc']

THICK_SEPARATOR = '// ' + '=' * 67 + '\n'
THIN_SEPARATOR = '// ' + '-' * 67 + '\n'

ASSIGN_DESC_PREFIX = 'protobuf_AssignDesc_'
ASSIGN_ONCE_NAME = 'protobuf_AssignDescriptorsOnce'

def filename_identifier(filename):
    return re.sub('[^0-9A-Za-z]', '_', filename).upper()

def gen_h_guard_name(output_name):
    return 'PROTOBUF_' + filename_identifier(output_name) + '__INCLUDED'

def strip_proto(filename):
    for suffix in ('.protodevel', '.proto'):
        if filename.endswith(suffix):
            return filename[:-len(suffix)]
    return filename

def output_base_name(filename):
    return strip_proto(filename) + OUTPUT_SUFFIX

def global_assign_descriptors_name(output_name):
    return ASSIGN_DESC_PREFIX + filename_identifier(output_name)

def has_descriptor_methods(proto_file):
    return proto_file.options.optimize_for != FileOptions.LITE_RUNTIME

def dots_to_colons(name):
    return name.replace('.', '::')

def gen_descriptor_slot_name(service_name):
    return service_name + '_descriptor_'

def gen_stub_name(service_name):
    return service_name + '_Stub'

class CppTypeResolver():
    """Maps fully qualified proto type names to C++ class names.

    '.pkg.Outer.Inner' becomes '::pkg::Outer_Inner': the package turns into
    namespaces and nested messages are joined with '_'. Only files handed to
    add_file() are known; any other name is converted by swapping dots for
    '::'.
    """

    def __init__(self, proto_files=()):
        self.types = {}
        for proto_file in proto_files:
            self.add_file(proto_file)

    def add_file(self, proto_file):
        scope = '.' + proto_file.package if proto_file.package else ''
        namespace = '::' + dots_to_colons(proto_file.package) + '::' \
                    if proto_file.package else '::'

        for msg_item in proto_file.message_type:
            self._add_message(scope, namespace, '', msg_item)

    def _add_message(self, scope, namespace, outer, msg_item):
        full_name = scope + '.' + msg_item.name
        class_name = outer + '_' + msg_item.name if outer else msg_item.name

        self.types[full_name] = namespace + class_name
        for nested in msg_item.nested_type:
            self._add_message(full_name, namespace, class_name, nested)

    def class_name(self, type_name):
        if type_name in self.types:
            return self.types[type_name]
        return '::' + dots_to_colons(type_name.lstrip('.'))
