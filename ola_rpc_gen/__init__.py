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
#     __init__.py
#
# Description:
#     protoc plugin generating C++ OLA RPC service stubs.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#

from .helpers import LogHelper, OlaRpcGenException
from .printer import Printer, PrinterException
from .walker import OlaRpcParseException
from .namespace import open_namespaces, close_namespaces
from .service_gen import ServiceGenerator, ServiceGeneratorOptions
from .file_gen import FileGenerator, FileGeneratorOptions
from .registry import DescriptorRegistry, DescriptorNotFoundException
from .registry import OnceBarrier, ServiceDescriptorTable
from .plugin import generate, generate_file, parse_parameter

__all__ = [
    'LogHelper', 'OlaRpcGenException', 'OlaRpcParseException',
    'Printer', 'PrinterException',
    'open_namespaces', 'close_namespaces',
    'ServiceGenerator', 'ServiceGeneratorOptions',
    'FileGenerator', 'FileGeneratorOptions',
    'DescriptorRegistry', 'DescriptorNotFoundException',
    'OnceBarrier', 'ServiceDescriptorTable',
    'generate', 'generate_file', 'parse_parameter',
]
