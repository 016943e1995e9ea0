# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Activation functions and the routines that evaluate them over batches.
"""

# import shortcuts
from axon.transforms.activation import (Activation,  # noqa
                                        forward_activation,
                                        backward_activation)
from axon.transforms.linear import Identity, Linear  # noqa
from axon.transforms.logistic import Logistic, Sigmoid  # noqa
from axon.transforms.rectified import (RectLin, RectifiedLinear,  # noqa
                                       RectLeaky, ExpLin)
from axon.transforms.softmax import Softmax  # noqa
from axon.transforms.tanh import Tanh, RescaledTanh  # noqa

ACTIVATIONS = {
    'identity': Identity,
    'linear': Identity,
    'sigmoid': Logistic,
    'logistic': Logistic,
    'relu': RectLin,
    'rectlin': RectLin,
    'rectified_linear': RectLin,
    'leaky_relu': RectLeaky,
    'rectleaky': RectLeaky,
    'elu': ExpLin,
    'explin': ExpLin,
    'tanh': Tanh,
    'tan_h': Tanh,
    'rescaled_tanh': RescaledTanh,
    'tan_hp1m2': RescaledTanh,
    'softmax': Softmax,
}


def get_activation(name, **kwargs):
    """
    Construct an activation from its name.

    Arguments:
        name (str): case insensitive activation name, e.g. ``'relu'``,
                    ``'tanh'`` or ``'softmax'``.  See ACTIVATIONS for the
                    full list of accepted names.
        kwargs: passed through to the activation's constructor.

    Returns:
        Activation: newly constructed instance.

    Raises:
        ValueError: if the name isn't known.
    """
    try:
        cls = ACTIVATIONS[name.lower()]
    except KeyError:
        raise ValueError("unknown activation %s, expected one of: %s" %
                         (name, ', '.join(sorted(ACTIVATIONS))))
    return cls(**kwargs)
