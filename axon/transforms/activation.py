# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Contains activation function related code: the abstract activation class and
the routines that evaluate an activation over a batch of samples during
forward and backward propagation.
"""

import logging
import numpy as np

from axon.backends.par import NoPar
from axon.util.param import opt_param

logger = logging.getLogger(__name__)


class Activation(object):
    """
    Abstract activation function class.  Defines operations any concrete
    activation function child must support.

    Activations hold no state of their own; any keyword arguments given at
    construction (e.g. a ``name`` from a YAML configuration) are simply stored
    as attributes.
    """

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)
        opt_param(self, ['name'], self.__class__.__name__.lower())

    def __repr__(self):
        return "%s(name=%r)" % (self.__class__.__name__, self.name)

    def f(self, v, i):
        """
        Computes the activation value at output index i.

        Arguments:
            v (array_like): the full pre-activation vector of one sample.  The
                            whole vector is passed since some activations
                            (softmax) normalize across it.
            i (int): output index, in ``[0, len(v))``.  Not checked.

        Returns:
            scalar: the activation value.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError("f should be overridden in child class.")

    def df(self, y):
        """
        Computes the derivative of the activation with respect to its input,
        expressed in terms of the already computed output value y.

        Arguments:
            y (scalar): output of :py:func:`f` at some index.

        Returns:
            scalar: the local derivative.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError("df should be overridden in child class.")

    def df_row(self, y, i):
        """
        Computes row i of the Jacobian, the derivative of output i with
        respect to every output k.  For element-wise activations only entry i
        is non-zero.

        Arguments:
            y (array_like): the full output vector of one sample.
            i (int): the row to compute.

        Returns:
            numpy.ndarray: vector with the same length as y.
        """
        row = np.zeros(len(y))
        row[i] = self.df(y[i])
        return row

    def one_hot(self):
        """
        Whether the Jacobian is diagonal, that is each output depends on its
        own input only.
        """
        return True

    def scale(self):
        """
        Target value range this activation is best trained towards.

        Returns:
            tuple: (low, high) pair.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError("scale should be overridden in child class.")

    def apply_function(self, backend, inputs, outputs):
        """
        Apply the activation function to every sample in a batch.

        Arguments:
            backend (Backend): The backend class to use for computation.  Its
                               associated batch strategy drives the samples.
            inputs (Tensor): Pre-activation batch, one row per sample.
            outputs (Tensor): Storage for the transformed output.
        """
        forward_activation(outputs, inputs, self, backend.par)

    def bprop_func(self, backend, prev_delta, outputs, curr_delta):
        """
        Propagate a batch of errors back through the activation.

        Arguments:
            backend (Backend): The backend class to use for computation.
            prev_delta (Tensor): errors arriving from the following layer.
            outputs (Tensor): activation outputs saved from the forward pass.
            curr_delta (Tensor): storage for the propagated errors.
        """
        backward_activation(prev_delta, outputs, curr_delta, self,
                            backend.par, backend.vdot)


def _host(batch):
    # Tensors are evaluated through their underlying numpy buffer
    if hasattr(batch, 'asnumpyarray'):
        return batch.asnumpyarray()
    return batch


def _scratch(batch, nsamples, width):
    dtype = batch.dtype if isinstance(batch, np.ndarray) else np.float64
    return np.empty((nsamples, width), dtype)


def _commit(dest, scratch):
    """
    Copy a fully computed batch into the caller's storage.  Only called once
    every sample succeeded, so a failing pass leaves dest untouched.
    """
    if isinstance(dest, np.ndarray):
        dest[...] = scratch
        return
    for sample, row in enumerate(scratch):
        dest_row = dest[sample]
        for i, value in enumerate(row):
            dest_row[i] = value


def forward_activation(y, a, h, par=None):
    """
    Computes ``y = h(a)`` for every sample of a batch.  Results are gathered
    in a scratch batch and copied into y only once every sample succeeded,
    so an activation raising on some sample leaves y as it was.

    Arguments:
        y (array_like, Tensor): output batch, overwritten in place.  Must have
                                as many samples as a, each of the same width.
        a (array_like, Tensor): pre-activation batch, one vector per sample.
        h (Activation): the activation to apply.
        par (NoPar, ThreadPar, optional): strategy that iterates over the
                                          samples.  Defaults to sequential.
    """
    y = _host(y)
    a = _host(a)
    if len(a) == 0:
        return
    if par is None:
        par = NoPar()

    out_dim = len(a[0])
    result = _scratch(y, len(y), out_dim)

    def fprop_sample(sample):
        y_vec = result[sample]
        a_vec = a[sample]
        for i in range(out_dim):
            y_vec[i] = h.f(a_vec, i)

    logger.debug("%s forward over %d samples of width %d", h.name, len(y),
                 out_dim)
    par.for_i(len(y), fprop_sample)
    _commit(y, result)


def backward_activation(prev_delta, this_out, curr_delta, h, par=None,
                        dot=None):
    """
    Applies the chain rule through the activation for every sample of a
    batch.  Activations with a diagonal Jacobian scale each error by the
    local derivative; the others (softmax) contract the error vector with a
    full Jacobian row per output.  As with :py:func:`forward_activation`,
    curr_delta is only written once the whole batch succeeded.

    Arguments:
        prev_delta (array_like, Tensor): errors arriving from the following
                                         layer.
        this_out (array_like, Tensor): outputs of h from the forward pass.
        curr_delta (array_like, Tensor): storage for the propagated errors,
                                         overwritten in place.
        h (Activation): the activation the outputs were produced by.
        par (NoPar, ThreadPar, optional): strategy that iterates over the
                                          samples.  Defaults to sequential.
        dot (callable, optional): inner product of two vectors, used for
                                  dense Jacobians.  Defaults to numpy.dot.
    """
    prev_delta = _host(prev_delta)
    this_out = _host(this_out)
    curr_delta = _host(curr_delta)
    if len(this_out) == 0:
        return
    if par is None:
        par = NoPar()
    if dot is None:
        dot = np.dot

    length = len(prev_delta[0])
    result = _scratch(curr_delta, len(this_out), length)

    def bprop_sample(sample):
        out_vec = this_out[sample]
        prev_delta_vec = prev_delta[sample]
        curr_delta_vec = result[sample]

        if h.one_hot():
            for c in range(length):
                curr_delta_vec[c] = prev_delta_vec[c] * h.df(out_vec[c])
        else:
            for c in range(length):
                df = h.df_row(out_vec, c)
                curr_delta_vec[c] = dot(prev_delta_vec, df)

    logger.debug("%s backward over %d samples", h.name, len(this_out))
    par.for_i(len(this_out), bprop_sample)
    _commit(curr_delta, result)
