# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Host memory batches and the :mod:`numpy` backend that allocates them.
"""

import logging
import numpy as np

from axon.backends.backend import Backend, Tensor

logger = logging.getLogger(__name__)


class CPUTensor(Tensor):

    """
    Batch resident in host memory, wrapping a `numpy.ndarray`.

    Arguments:
        obj (array_like): element values.
        dtype (numpy.dtype, optional): element type.  Defaults to float32.
    """

    def __init__(self, obj, dtype=None):
        if dtype is None:
            dtype = np.float32
        self._tensor = np.asarray(obj, dtype)
        self.shape = self._tensor.shape
        self.dtype = dtype

    def asnumpyarray(self):
        return self._tensor


class CPU(Backend):

    """
    :mod:`numpy` backend.  Batches default to 32-bit floats.

    Keyword Arguments:
        rng_seed (int, optional): seed for numpy's random number generator.
        seterr_handling (dict, optional): numpy.seterr settings deciding how
                                          overflow and invalid operations are
                                          reported.  Values are never altered.
        default_dtype (str, dtype, optional): element type of new batches.
    """
    default_dtype = np.float32

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)
        if isinstance(self.default_dtype, str):
            self.default_dtype = np.dtype(self.default_dtype).type
        self.err_init()
        self.rng_init()

    def _batch(self, values, dtype):
        if dtype is None:
            dtype = self.default_dtype
        return CPUTensor(values, dtype)

    def array(self, obj, dtype=None):
        return self._batch(obj, dtype)

    def zeros(self, shape, dtype=None):
        return self._batch(np.zeros(shape), dtype)

    def ones(self, shape, dtype=None):
        return self._batch(np.ones(shape), dtype)

    def uniform(self, low=0.0, high=1.0, size=1, dtype=None):
        """
        Batch of samples drawn uniformly from ``[low, high)``.

        Arguments:
            low (float, optional): smallest value.  Defaults to 0.0
            high (float, optional): open upper bound.  Defaults to 1.0
            size (int, tuple, optional): shape of the batch.
            dtype (dtype, optional): element type.  Defaults to the backend's.
        """
        return self._batch(np.random.uniform(low, high, size), dtype)

    def vdot(self, left, right):
        return np.dot(left, right)

    def err_init(self):
        # http://docs.scipy.org/doc/numpy/reference/generated/numpy.seterr.html
        if self.__dict__.get('seterr_handling') is not None:
            logger.info("Updating numpy.seterr settings: %s",
                        str(self.seterr_handling))
            np.seterr(**self.seterr_handling)

    def rng_init(self):
        seed = self.__dict__.get('rng_seed')
        if seed is not None:
            logger.info("Seeding random number generator with: %s", seed)
        np.random.seed(seed)
