# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Logistic transform functions and classes.
"""

import numpy as np

from axon.transforms.activation import Activation


def logistic(x):
    """
    Applies the logistic function to the scalar passed.

    Arguments:
        x (scalar): pre-activation value.

    Returns:
        scalar: ``1 / (1 + exp(-x))``
    """
    return 1.0 / (1.0 + np.exp(-x))


def logistic_derivative(y):
    """
    Derivative of the logistic function, in terms of its output y.

    Arguments:
        y (scalar): value previously returned by :py:func:`logistic`.
    """
    return y * (1.0 - y)


class Logistic(Activation):

    """
    Embodiment of a logistic (sigmoid) activation function.
    """

    def f(self, v, i):
        """
        Apply the logistic activation function.
        """
        return logistic(v[i])

    def df(self, y):
        """
        Apply the logistic activation function derivative.
        """
        return logistic_derivative(y)

    def scale(self):
        return (0.1, 0.9)


Sigmoid = Logistic
