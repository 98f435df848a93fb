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
#     printer.py
#
# Description:
#     Template printer used to emit the generated C++ text. Variables are
#     written as $name$ and substituted from a dict and/or keyword arguments;
#     $$ emits a literal '$'. Indentation is applied at the start of every
#     non-empty line.
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
from io import StringIO

from .helpers import OlaRpcGenException

INDENT_STEP = '  '
VAR_DELIMITER = '$'

# Only '\n' ends a line; other line-break characters are plain text.
LINE_SPLIT = re.compile('(?<=\n)')

class PrinterException(OlaRpcGenException):
    pass

class Printer():

    def __init__(self, stream=None, delimiter=VAR_DELIMITER):
        self.stream = StringIO() if stream is None else stream
        self.delimiter = delimiter
        self._indent = ''
        self.at_start_of_line = True

    def emit(self, text, variables=None, **kwargs):
        """Substitute variables in text and append it to the output.

        variables is a key -> replacement mapping. Keyword arguments are
        merged into it; a key given both ways raises PrinterException.
        """
        subst = dict(variables) if variables else {}
        for key, value in kwargs.items():
            if key in subst:
                raise PrinterException('Error: duplicate template variable: ' +
                                       key)
            subst[key] = value

        pos = 0
        while pos < len(text):
            start = text.find(self.delimiter, pos)
            if start < 0:
                self._write(text[pos:])
                break

            self._write(text[pos:start])
            end = text.find(self.delimiter, start + 1)
            if end < 0:
                raise PrinterException('Error: unterminated variable in ' +
                                       'template: ' + repr(text))

            name = text[start + 1:end]
            if name == '':
                self._write(self.delimiter)
            elif name in subst:
                self._write(str(subst[name]))
            else:
                raise PrinterException('Error: undefined template variable: ' +
                                       name)
            pos = end + 1

    def indent(self):
        self._indent += INDENT_STEP

    def outdent(self):
        if self._indent == '':
            raise PrinterException('Error: outdent() without matching ' +
                                   'indent()')
        self._indent = self._indent[:-len(INDENT_STEP)]

    def getvalue(self):
        return self.stream.getvalue()

    def _write(self, data):
        for chunk in LINE_SPLIT.split(data):
            if chunk == '':
                continue
            if self.at_start_of_line and chunk != '\n':
                self.stream.write(self._indent)
            self.stream.write(chunk)
            self.at_start_of_line = chunk.endswith('\n')
