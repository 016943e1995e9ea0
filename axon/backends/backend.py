# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Interfaces for allocating the batches activations are evaluated over.
"""

from axon.util.persist import YAMLable


class Backend(YAMLable):
    """
    Allocates sample batches and supplies the vector inner product used by
    dense activation Jacobians.  Can be built from YAML configuration.

    Attributes:
        par (NoPar, ThreadPar): the batch iteration strategy, set by the
                                strategy's associate() call.
    """
    par = None

    def array(self, obj, dtype=None):
        """
        Batch holding the values of obj (nested lists or numpy.ndarray).

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError()

    def zeros(self, shape, dtype=None):
        """
        Batch of the given shape with every element set to 0.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError()

    def ones(self, shape, dtype=None):
        raise NotImplementedError()

    def vdot(self, left, right):
        """
        Inner product of two sample vectors of equal length.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError()

    def rng_init(self):
        raise NotImplementedError()

    def err_init(self):
        raise NotImplementedError()

    def close(self):
        """
        Release the worker threads of the associated batch strategy.  The
        backend owns its strategy once associated, so callers shut down
        through here (or a ``with`` block) rather than the strategy itself.
        """
        if self.par is not None:
            self.par.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class Tensor(object):
    """
    A batch: one row per sample, one column per output index.

    Attributes:
        shape (tuple): length of each dimension.
        dtype (numpy.dtype): element type.
    """
    shape = None
    dtype = None

    def asnumpyarray(self):
        """
        The element values as a :py:class:`numpy.ndarray`.  Writes to the
        returned array are visible through the Tensor.

        Raises:
            NotImplementedError: Must be implemented in a child class.
        """
        raise NotImplementedError()
