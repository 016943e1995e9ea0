# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Rectified linear (ReLU) transform functions and classes, along with the
leaky and exponential variants.
"""

import numpy as np

from axon.transforms.activation import Activation
from axon.util.param import opt_param


class RectLin(Activation):

    """
    Embodiment of a rectified linear activation function.
    """

    def f(self, v, i):
        """
        Apply the rectified linear activation function.

        Arguments:
            v (array_like): pre-activation values of one sample.
            i (int): output index.
        """
        return max(0.0, v[i])

    def df(self, y):
        """
        Apply the rectified linear activation function derivative.  Outputs
        of exactly 0 get a derivative of 0.

        Arguments:
            y (scalar): output of the activation.
        """
        return 1.0 if y > 0.0 else 0.0

    def scale(self):
        return (0.1, 0.9)


RectifiedLinear = RectLin


class RectLeaky(Activation):

    """
    Embodiment of a leaky rectified linear activation function.  Negative
    inputs are scaled by a small slope rather than clamped to 0.

    Keyword Arguments:
        slope (float, optional): gradient for negative inputs.  Defaults to
                                 0.01
    """

    def __init__(self, **kwargs):
        super(RectLeaky, self).__init__(**kwargs)
        opt_param(self, ['slope'], 0.01)

    def f(self, v, i):
        return v[i] if v[i] > 0.0 else self.slope * v[i]

    def df(self, y):
        # negative outputs mean negative inputs, so testing y is enough
        return 1.0 if y > 0.0 else self.slope

    def scale(self):
        return (0.1, 0.9)


class ExpLin(Activation):

    """
    Embodiment of an exponential linear (ELU) activation function.
    """

    def f(self, v, i):
        return np.exp(v[i]) - 1.0 if v[i] < 0.0 else v[i]

    def df(self, y):
        return 1.0 if y > 0.0 else 1.0 + y

    def scale(self):
        return (0.1, 0.9)
