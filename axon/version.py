# -----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc. All rights reserved.
# -----------------------------------------------------------------------------
"""
Project version information.
"""
VERSION = '0.1.0'
SHORT_VERSION = '0.1.0'
