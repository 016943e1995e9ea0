# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
axon - Activation functions and batched activation evaluation
=============================================================

Activations expose a value function, a derivative expressed in terms of the
output, a target value range, and whether their Jacobian is diagonal.
:py:func:`~axon.transforms.activation.forward_activation` and
:py:func:`~axon.transforms.activation.backward_activation` apply them across
a batch of samples.
"""

from axon.version import VERSION as __version__  # noqa
