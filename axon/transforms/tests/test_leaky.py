# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
import numpy as np

from axon.backends import gen_backend
from axon.transforms.rectified import RectLeaky
from axon.util.testing import assert_tensor_near_equal


def compare_cpu_tensors(inputs, outputs, deriv=False):
    rlin = RectLeaky()
    be = gen_backend(dtype=np.float64)
    temp = be.zeros(inputs.shape)
    rlin.apply_function(be, be.array(inputs), temp)
    if deriv is True:
        deltas = be.zeros(inputs.shape)
        rlin.bprop_func(be, be.ones(inputs.shape), temp, deltas)
        temp = deltas
    assert_tensor_near_equal(temp, outputs, tolerance=1e-12)


def test_rectleaky_values():
    rlin = RectLeaky()
    assert rlin.f([-1.0], 0) == -0.01
    assert rlin.df(-0.01) == 0.01
    assert rlin.df(2.0) == 1


def test_rectleaky_positives():
    inputs = np.array([[1, 3, 2]])
    outputs = np.array([[1, 3, 2]])
    compare_cpu_tensors(inputs, outputs)


def test_rectleaky_negatives():
    inputs = np.array([[-1, -3], [-2, -4]])
    outputs = np.array([[-0.01, -0.03], [-0.02, -0.04]])
    compare_cpu_tensors(inputs, outputs)


def test_rectleaky_mixed():
    inputs = np.array([[4, 0], [-2, 9]])
    outputs = np.array([[4, 0], [-0.02, 9]])
    compare_cpu_tensors(inputs, outputs)


def test_rectleaky_derivative_positives():
    inputs = np.array([[1, 3, 2]])
    outputs = np.array([[1, 1, 1]])
    compare_cpu_tensors(inputs, outputs, deriv=True)


def test_rectleaky_derivative_negatives():
    inputs = np.array([[-1, -3], [-2, -4]])
    outputs = np.array([[0.01, 0.01], [0.01, 0.01]])
    compare_cpu_tensors(inputs, outputs, deriv=True)


def test_rectleaky_derivative_mixed():
    inputs = np.array([[4, 0], [-2, 9]])
    outputs = np.array([[1, 0.01], [0.01, 1]])
    compare_cpu_tensors(inputs, outputs, deriv=True)


def test_rectleaky_slope_option():
    assert RectLeaky(slope=0.2).f([-1.0], 0) == -0.2
    assert RectLeaky(slope=0.2).df(-0.2) == 0.2
    unset = RectLeaky(slope=None)
    assert unset.slope == 0.01
    assert unset.f([-1.0], 0) == -0.01
