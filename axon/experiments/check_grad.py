# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Numerical gradient checking to validate activation derivatives.
"""

import logging
import numpy as np

from axon.backends import gen_backend
from axon.transforms import get_activation
from axon.util.param import opt_param, req_param


logger = logging.getLogger(__name__)


class GradientChecker(object):
    """
    Compares each activation's analytic Jacobian rows (computed from its
    outputs through ``df_row``) against central finite differences of its
    value function.

    Keyword Arguments:
        activations (list): Activation instances or names to check.  Required
                            by :py:func:`run`.
        backend (Backend, optional): used to draw random pre-activations.
                                     Defaults to a sequential CPU backend.
        eps (float, optional): finite difference step.  Defaults to 1e-4.
        tolerance (float, optional): largest acceptable absolute difference
                                     between the two Jacobians.  Defaults to
                                     1e-3.
        nsamples (int, optional): number of random vectors per activation.
        width (int, optional): length of each random vector.
        low, high (float, optional): range the random inputs are drawn from.
    """
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)
        opt_param(self, ['eps'], 1e-4)
        opt_param(self, ['tolerance'], 1e-3)
        opt_param(self, ['nsamples'], 4)
        opt_param(self, ['width'], 5)
        opt_param(self, ['low'], -2.0)
        opt_param(self, ['high'], 2.0)

    def numeric_jacobian(self, activation, v):
        """
        Central difference estimate of ``d f_i / d v_k`` for all i, k.

        Arguments:
            activation (Activation): function to differentiate.
            v (array_like): point to differentiate at.

        Returns:
            numpy.ndarray: square matrix, row i holding the derivatives of
                           output i.
        """
        v = np.asarray(v, dtype=np.float64)
        n = len(v)
        jac = np.zeros((n, n))
        for k in range(n):
            vplus = v.copy()
            vplus[k] += self.eps
            vminus = v.copy()
            vminus[k] -= self.eps
            for i in range(n):
                jac[i, k] = ((activation.f(vplus, i) - activation.f(vminus, i))
                             / (2 * self.eps))
        return jac

    def max_error(self, activation, inputs):
        """
        Largest absolute difference between analytic and numeric Jacobian
        entries over every vector in inputs.
        """
        diff = 0.0
        for v in inputs:
            v = np.asarray(v, dtype=np.float64)
            y = np.array([activation.f(v, i) for i in range(len(v))])
            numeric = self.numeric_jacobian(activation, v)
            for i in range(len(v)):
                analytic = activation.df_row(y, i)
                diff = max(diff, np.max(np.abs(analytic - numeric[i])))
        return diff

    def check(self, activation, inputs):
        """
        Check a single activation at the pre-activation vectors given.

        Returns:
            bool: True if every Jacobian entry is within tolerance.
        """
        diff = self.max_error(activation, inputs)
        if diff < self.tolerance:
            logger.info('diff %g. activation %s OK.', diff, activation.name)
            return True

        logger.error('diff %g. gradient check failed on activation %s.',
                     diff, activation.name)
        return False

    def run(self):
        """
        Check every configured activation on randomly drawn inputs.

        Returns:
            dict: activation name to check outcome.
        """
        req_param(self, ['activations'])
        if getattr(self, 'backend', None) is None:
            self.backend = gen_backend()
        results = dict()
        for activation in self.activations:
            if isinstance(activation, str):
                activation = get_activation(activation)
            inputs = self.backend.uniform(self.low, self.high,
                                          (self.nsamples, self.width),
                                          dtype=np.float64)
            results[activation.name] = self.check(activation,
                                                  inputs.asnumpyarray())
        return results
