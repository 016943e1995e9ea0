# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Tanh transform functions and classes.
"""

import numpy as np

from axon.transforms.activation import Activation
from axon.transforms.logistic import logistic_derivative


class Tanh(Activation):

    """
    Embodiment of a tanh activation function.
    """

    def f(self, v, i):
        """
        Applies the hyperbolic tangent to element i of the sample passed.
        """
        return np.tanh(v[i])

    def df(self, y):
        return 1.0 - y * y

    def scale(self):
        return (-0.8, 0.8)


class RescaledTanh(Activation):

    """
    Hyperbolic tangent shifted and scaled onto the (0, 1) output range, so it
    trains towards the same targets as the other activations.
    """

    def f(self, v, i):
        ep = np.exp(v[i])
        return ep / (ep + np.exp(-v[i]))

    def df(self, y):
        return 2.0 * logistic_derivative(y)

    def scale(self):
        return (0.1, 0.9)
