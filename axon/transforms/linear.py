# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Linear (identity) transform functions and classes.
"""

from axon.transforms.activation import Activation


class Identity(Activation):
    """
    Embodiment of a linear activation function: outputs pass through
    unchanged.
    """

    def f(self, v, i):
        return v[i]

    def df(self, y):
        return 1.0

    def scale(self):
        return (0.1, 0.9)


Linear = Identity
