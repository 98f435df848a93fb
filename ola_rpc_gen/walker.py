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
#     walker.py
#
# Description:
#     Module for walking protoc FileDescriptorProto objects: services in
#     declaration order and, per service, methods in declaration order.
#     Structural problems are reported as OlaRpcParseException.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     Schema syntax is protoc's job; only the shape of the objects we read
#     is checked here.
#

from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .helpers import OlaRpcGenException

class OlaRpcParseException(OlaRpcGenException):
    pass

def noop(*args):
    return []

class WalkerOps:

    def __init__(self,
                 f_enter        = noop,
                 f_leave        = noop,
                 s_enter        = noop,
                 s_method       = noop,
                 s_leave        = noop):
        self.f_enter = f_enter
        self.f_leave = f_leave
        self.s_enter = s_enter
        self.s_method = s_method
        self.s_leave = s_leave

def check_file(proto_file):
    if proto_file is None:
        raise OlaRpcParseException('Error: missing file descriptor')
    if not isinstance(proto_file, FileDescriptorProto):
        raise OlaRpcParseException('Error: not a FileDescriptorProto: ' + \
                                   type(proto_file).__name__)
    if proto_file.name == '':
        raise OlaRpcParseException('Error: file descriptor without a name')

def check_service(proto_file, service):
    if service.name == '':
        raise OlaRpcParseException('Error: unnamed service in ' + \
                                   proto_file.name)

def check_method(service, method):
    if method.name == '':
        raise OlaRpcParseException('Error: unnamed method in service ' + \
                                   service.name)
    if method.input_type == '' or method.output_type == '':
        raise OlaRpcParseException('Error: method without input/output ' + \
                                   'type: ' + service.name + '.' + method.name)

def package_parts(proto_file):
    # Empty pieces are dropped, so '' gives no namespaces at all.
    return [part for part in proto_file.package.split('.') if part]

def rpc_service_walk(proto_file, service_index, service, walker_ops):
    output = []

    check_service(proto_file, service)
    output += walker_ops.s_enter(service_index, service)

    for method_index, method in enumerate(service.method):
        check_method(service, method)
        output += walker_ops.s_method(service, method_index, method)

    output += walker_ops.s_leave(service_index, service)
    return output

def rpc_file_walk(proto_file, walker_ops):
    output = []

    check_file(proto_file)
    output += walker_ops.f_enter(proto_file)

    for service_index, service in enumerate(proto_file.service):
        output += rpc_service_walk(proto_file, service_index, service,
                                   walker_ops)

    output += walker_ops.f_leave(proto_file)
    return output
