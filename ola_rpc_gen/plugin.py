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
#     plugin.py
#
# Description:
#     protoc plugin which generates OLA RPC service stubs: for every file to
#     generate, foo/Bar.proto gives foo/BarService.pb.h and
#     foo/BarService.pb.cpp.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     Invoke through protoc, e.g.:
#         protoc --plugin=protoc-gen-olarpc --olarpc_out=once=std:out/ x.proto
#

import sys

from google.protobuf.compiler import plugin_pb2 as plugin

from .file_gen import ONCE_BODIES
from .file_gen import ONCE_STD
from .file_gen import FileGenerator
from .file_gen import FileGeneratorOptions
from .gen_helpers import CppTypeResolver
from .gen_helpers import HEADER_EXT
from .gen_helpers import IMPL_EXT
from .gen_helpers import output_base_name
from .helpers import LogHelper
from .helpers import OlaRpcGenException
from .printer import Printer
from .registry import DescriptorRegistry
from .registry import ServiceDescriptorTable
from .walker import WalkerOps
from .walker import rpc_file_walk

lh = LogHelper(name=__name__)

PARAM_DLLEXPORT = 'dllexport_decl'
PARAM_ONCE = 'once'
PARAM_VERIFY = 'verify_descriptors'

BOOL_VALUES = {
    'true'  : True,
    '1'     : True,
    'false' : False,
    '0'     : False,
}

class GeneratorParameters():

    def __init__(self, dllexport_decl='', once=ONCE_STD,
                 verify_descriptors=True):
        self.dllexport_decl = dllexport_decl
        self.once = once
        self.verify_descriptors = verify_descriptors

def parse_parameter(parameter):
    """Parse protoc's 'key=value,key=value' parameter string."""
    params = GeneratorParameters()

    for item in parameter.split(','):
        item = item.strip()
        if item == '':
            continue

        (key, _, value) = item.partition('=')
        if key == PARAM_DLLEXPORT:
            params.dllexport_decl = value
        elif key == PARAM_ONCE:
            if not value in ONCE_BODIES:
                raise OlaRpcGenException('Error: unknown value for ' +
                                         PARAM_ONCE + ': ' + value)
            params.once = value
        elif key == PARAM_VERIFY:
            if not value.lower() in BOOL_VALUES:
                raise OlaRpcGenException('Error: unknown value for ' +
                                         PARAM_VERIFY + ': ' + value)
            params.verify_descriptors = BOOL_VALUES[value.lower()]
        else:
            raise OlaRpcGenException('Error: unknown parameter: ' + key)

    return params

def verify_descriptors(proto_file, registry):
    table = ServiceDescriptorTable.for_file(proto_file, registry)
    for service in proto_file.service:
        resolved = table.descriptor(service.name)
        if resolved is None or resolved.name != service.name:
            raise OlaRpcGenException('Error: service ' + service.name +
                                     ' does not resolve by index in ' +
                                     proto_file.name)

def generate_file(proto_file, params, type_resolver=None, registry=None):
    """Return [(name, content)] for the header and implementation."""
    output_name = output_base_name(proto_file.name)
    options = FileGeneratorOptions(once=params.once,
                                   dllexport_decl=params.dllexport_decl)
    file_generator = FileGenerator(proto_file, output_name, options,
                                   type_resolver)

    if params.verify_descriptors and registry is not None:
        verify_descriptors(proto_file, registry)

    hdr = Printer()
    file_generator.generate_header(hdr)

    impl = Printer()
    file_generator.generate_implementation(impl)

    return [(output_name + HEADER_EXT, hdr.getvalue()),
            (output_name + IMPL_EXT, impl.getvalue())]

def generate(request, response):
    try:
        params = parse_parameter(request.parameter)

        proto_files = dict((proto_file.name, proto_file)
                           for proto_file in request.proto_file)

        # Malformed files are reported by the walker before the descriptor
        # pool is built from them.
        for filename in request.file_to_generate:
            if not filename in proto_files:
                raise OlaRpcGenException('Error: file to generate missing ' +
                                         'from request: ' + filename)
            rpc_file_walk(proto_files[filename], WalkerOps())

        type_resolver = CppTypeResolver(request.proto_file)
        registry = DescriptorRegistry.from_file_protos(request.proto_file) \
                   if params.verify_descriptors else None

        for filename in request.file_to_generate:
            for (name, content) in generate_file(proto_files[filename],
                                                 params, type_resolver,
                                                 registry):
                f_out = response.file.add()
                f_out.name = name
                f_out.content = content
                lh.info('Generated %s', name)

    except OlaRpcGenException as e:
        lh.error('%s', e)
        del response.file[:]
        response.error = str(e)

def main():
    # Read request message from stdin
    data = sys.stdin.buffer.read()

    # Parse request
    request = plugin.CodeGeneratorRequest()
    request.ParseFromString(data)

    response = plugin.CodeGeneratorResponse()
    generate(request, response)

    sys.stdout.buffer.write(response.SerializeToString())
    sys.stdout.buffer.flush()
    return 0

if __name__ == '__main__':
    sys.exit(main())
