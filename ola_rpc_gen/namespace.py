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
#     namespace.py
#
# Description:
#     C++ namespace framing derived from a proto package path. The openers
#     and closers are mirror images; an empty path produces no text at all.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#

def namespace_openers(package_parts):
    if not package_parts:
        return []
    return ['\n'] + ['namespace ' + part + ' {\n' for part in package_parts]

def namespace_closers(package_parts):
    if not package_parts:
        return []
    return ['\n'] + ['}  // namespace ' + part + '\n'
                     for part in reversed(package_parts)]

def open_namespaces(printer, package_parts):
    if package_parts:
        printer.emit('\n')
    for part in package_parts:
        printer.emit('namespace $part$ {\n', part=part)

def close_namespaces(printer, package_parts):
    if package_parts:
        printer.emit('\n')
    for part in reversed(package_parts):
        printer.emit('}  // namespace $part$\n', part=part)
