# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Softmax transform functions and classes.
"""

import numpy as np

from axon.transforms.activation import Activation
from axon.transforms.logistic import logistic_derivative


class Softmax(Activation):

    """
    Embodiment of a softmax activation function.  Every output depends on the
    whole input vector, so its Jacobian is dense.
    """

    def f(self, v, i):
        """
        Apply the softmax activation function at index i.  The maximum input
        is subtracted before exponentiating to keep exp from overflowing.

        Arguments:
            v (array_like): pre-activation values of one sample (the x's)
            i (int): output index.
        """
        v = np.asarray(v)
        alpha = v.max()
        numer = np.exp(v[i] - alpha)
        denom = np.exp(v - alpha).sum()
        return numer / denom

    def df(self, y):
        """
        Diagonal Jacobian entry, in terms of the output y.
        """
        return logistic_derivative(y)

    def df_row(self, y, index):
        """
        Full Jacobian row: ``y_i (1 - y_i)`` on the diagonal and
        ``-y_k y_i`` elsewhere.
        """
        row = np.zeros(len(y))
        for k in range(len(y)):
            row[k] = self.df(y[index]) if k == index else -y[k] * y[index]
        return row

    def one_hot(self):
        return False

    def scale(self):
        return (0.0, 1.0)
