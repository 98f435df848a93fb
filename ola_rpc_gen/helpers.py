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
#     helpers.py
#
# Description:
#     Logging and exception helpers used throughout the generator.
#
# Author:
#     OLA RPC generator developers
#
# Initial Created:
#     10/18/2026
#
# Notes:
#     The generator runs as a protoc plugin so stdout is reserved for the
#     CodeGeneratorResponse. Logs go to stderr unless OLA_RPC_GEN_LOG_FILE
#     points somewhere else.
#

import os
import logging

OLA_RPC_GEN_LOG_VAR = 'OLA_RPC_GEN_LOG'
OLA_RPC_GEN_LOG_LVL_VAR = 'OLA_RPC_GEN_LOG_LVL'
OLA_RPC_GEN_LOG_FILE_VAR = 'OLA_RPC_GEN_LOG_FILE'

OLA_RPC_GEN_LOG_LVL_DEFAULT = 'WARNING'

class LogHelper():

    def __init__(self, name=__name__, filename=None):
        if os.environ.get(OLA_RPC_GEN_LOG_VAR, '1') == '1':
            self.l = logging.getLogger(name)

            if filename is None:
                filename = os.environ.get(OLA_RPC_GEN_LOG_FILE_VAR)

            if not filename is None:
                handler = logging.FileHandler(filename=filename, mode='a')
            else:
                handler = logging.StreamHandler()

            desired_lvl = os.environ.get(OLA_RPC_GEN_LOG_LVL_VAR,
                                         OLA_RPC_GEN_LOG_LVL_DEFAULT)
            lvl = {
                'DEBUG'     : logging.DEBUG,
                'INFO'      : logging.INFO,
                'WARNING'   : logging.WARNING,
                'ERROR'     : logging.ERROR,
                'CRITICAL'  : logging.CRITICAL
            }.get(desired_lvl.upper(), logging.WARNING)

            handler.setLevel(lvl)
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            self.l.addHandler(handler)
            self.l.setLevel(lvl)
            # Keep protoc's stderr free of duplicates from the root logger.
            self.l.propagate = False

        else:
            self.l = None

    def debug(self, msg, *args, **kwargs):
        if self.l is None:
            return
        self.l.debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        if self.l is None:
            return
        self.l.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        if self.l is None:
            return
        self.l.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        if self.l is None:
            return
        self.l.error(msg, *args, **kwargs)

    def critical(self, msg, *args, **kwargs):
        if self.l is None:
            return
        self.l.critical(msg, *args, **kwargs)

class OlaRpcGenException(Exception):
    def __init__(self, msg):
        super(OlaRpcGenException, self).__init__(msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)
