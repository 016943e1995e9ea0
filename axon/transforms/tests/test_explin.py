# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
import numpy as np

from axon.transforms.activation import backward_activation, forward_activation
from axon.transforms.rectified import ExpLin
from axon.util.testing import assert_tensor_near_equal


def test_explin_values():
    elu = ExpLin()
    assert elu.f([0.0], 0) == 0.0
    assert elu.f([3.0], 0) == 3.0
    assert elu.f([-1.0], 0) == np.exp(-1.0) - 1.0
    assert elu.df(2.0) == 1
    assert elu.df(-0.5) == 0.5
    assert elu.df(0.0) == 1.0


def test_explin_batch():
    inputs = np.array([[-2.0, 0.0, 1.5]])
    outputs = np.zeros(inputs.shape)
    forward_activation(outputs, inputs, ExpLin())
    assert_tensor_near_equal(outputs,
                             [[np.exp(-2.0) - 1.0, 0.0, 1.5]])
    deltas = np.zeros(inputs.shape)
    backward_activation(np.ones(inputs.shape), outputs, deltas, ExpLin())
    assert_tensor_near_equal(deltas, [[np.exp(-2.0), 1.0, 1.0]])
