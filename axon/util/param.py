# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Contains various functions for checking and setting required and optional
parameters on objects configured through keyword arguments or YAML.
"""


def req_param(obj, paramlist):
    for param in paramlist:
        if not hasattr(obj, param):
            name = getattr(obj, 'name', obj.__class__.__name__)
            raise ValueError("req param %s missing for %s" % (param, name))


def opt_param(obj, paramlist, default_value=None):
    for param in paramlist:
        if getattr(obj, param, None) is None:
            setattr(obj, param, default_value)
