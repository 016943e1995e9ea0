# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
import numpy as np

from axon.backends import gen_backend
from axon.transforms.tanh import RescaledTanh, Tanh
from axon.util.testing import assert_tensor_near_equal


def test_tanh_values():
    tntest = Tanh()
    assert tntest.f([0.0], 0) == 0
    assert tntest.df(0.0) == 1
    assert tntest.scale() == (-0.8, 0.8)


def test_tanh_cputensor():
    tntest = Tanh()
    inputs = np.array([[0, 1, -2]])
    be = gen_backend()
    temp = be.zeros(inputs.shape)
    outputs = np.tanh(inputs)
    tntest.apply_function(be, be.array(inputs), temp)
    assert_tensor_near_equal(outputs, temp, tolerance=1e-6)


def test_tanh_derivative_cputensor():
    tntest = Tanh()
    inputs = np.array([[0, 1, -2]])
    be = gen_backend()
    outputs = 1.0 - np.tanh(inputs) ** 2
    temp = be.zeros(inputs.shape)
    tntest.apply_function(be, be.array(inputs), temp)
    deltas = be.zeros(inputs.shape)
    tntest.bprop_func(be, be.ones(inputs.shape), temp, deltas)
    assert_tensor_near_equal(outputs, deltas, tolerance=1e-6)


def test_rescaled_tanh_matches_shifted_tanh():
    rtanh = RescaledTanh()
    inputs = [-1.5, 0.0, 0.25, 2.0]
    for i, x in enumerate(inputs):
        assert abs(rtanh.f(inputs, i) - (np.tanh(x) + 1.0) / 2.0) < 1e-12
    assert rtanh.f([0.0], 0) == 0.5
    assert rtanh.df(0.5) == 0.5
    assert rtanh.scale() == (0.1, 0.9)
