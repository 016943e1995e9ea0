# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
import numpy as np

from axon.backends import gen_backend
from axon.transforms.softmax import Softmax
from axon.util.testing import assert_tensor_near_equal


def test_softmax_cputensor():
    sftmx = Softmax()
    inputs = np.array([0, 1, -2]).reshape((1, 3))
    be = gen_backend(rng_seed=0)
    temp = be.zeros((1, 3))
    outputs = np.exp(inputs - 1) / np.sum(np.exp(inputs - 1))
    sftmx.apply_function(be, be.array(inputs), temp)
    assert_tensor_near_equal(outputs, temp, tolerance=1e-6)


def test_softmax_normalizes():
    sftmx = Softmax()
    for v in ([0.0], [1.0, 2.0, 3.0], [-5.0, 0.1, 0.1, 7.25, -0.5]):
        outputs = [sftmx.f(v, i) for i in range(len(v))]
        assert abs(sum(outputs) - 1.0) < 1e-12
        assert all(0.0 < y <= 1.0 for y in outputs)


def test_softmax_translation_invariance():
    sftmx = Softmax()
    v = [0.5, 1.0, -2.0]
    shifted = [x + 3.0 for x in v]
    for i in range(len(v)):
        assert sftmx.f(v, i) == sftmx.f(shifted, i)


def test_softmax_large_inputs():
    sftmx = Softmax()
    assert sftmx.f([1000.0, 1000.0], 0) == 0.5
    assert sftmx.f([1000.0, -1000.0], 0) == 1.0


def test_softmax_dense_jacobian():
    sftmx = Softmax()
    assert not sftmx.one_hot()
    assert sftmx.scale() == (0.0, 1.0)
    y = [0.2, 0.3, 0.5]
    assert_tensor_near_equal(sftmx.df_row(y, 1), [-0.06, 0.21, -0.15],
                             tolerance=1e-12)
    assert sftmx.df(0.5) == 0.25


def test_softmax_derivative_cputensor():
    sftmx = Softmax()
    inputs = np.array([[0, 1, -2], [3, 0.5, 0.5]])
    errmat = np.array([[1.0, -2.0, 0.5], [0.0, 1.0, 3.0]])
    outputs = np.exp(inputs) / np.sum(np.exp(inputs), axis=1, keepdims=True)
    a = np.sum(errmat * outputs, axis=1, keepdims=True)
    expected = outputs * (errmat - a)
    be = gen_backend(dtype=np.float64)
    temp = be.zeros(inputs.shape)
    sftmx.apply_function(be, be.array(inputs), temp)
    deltas = be.zeros(inputs.shape)
    sftmx.bprop_func(be, be.array(errmat), temp, deltas)
    assert_tensor_near_equal(expected, deltas, tolerance=1e-12)
