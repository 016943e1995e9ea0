# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Assertion helpers for comparing tensors and batches in unit tests.
"""

import numpy as np


def _raw(obj):
    if hasattr(obj, 'asnumpyarray'):
        return obj.asnumpyarray()
    return np.asarray(obj)


def assert_tensor_equal(actual, desired):
    """
    Ensures that the values of each element of actual exactly match those of
    desired.  Either argument may be a Tensor, numpy.ndarray or nested list.

    Raises:
        AssertionError: if any element differs, or the shapes don't agree.
    """
    np.testing.assert_array_equal(_raw(actual), _raw(desired))


def assert_tensor_near_equal(actual, desired, tolerance=1e-7):
    """
    Ensures that the values of each element of actual are within tolerance of
    those in desired.

    Arguments:
        actual (Tensor, array_like): values produced.
        desired (Tensor, array_like): expected values.
        tolerance (float, optional): maximal absolute difference allowed per
                                     element.  Defaults to 1e-7.

    Raises:
        AssertionError: if any element is further apart than tolerance.
    """
    np.testing.assert_allclose(_raw(actual), _raw(desired), rtol=0,
                               atol=tolerance)
