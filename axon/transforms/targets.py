# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Conversion of class labels into training targets that lie within an
activation's preferred output range.
"""

import logging

logger = logging.getLogger(__name__)


def label_targets(backend, labels, nout, activation):
    """
    Build a batch of training targets from integer class labels.  Every
    entry is set to the low end of ``activation.scale()``, except the entry
    at each sample's label which gets the high end.

    Arguments:
        backend (Backend): used to allocate the result.
        labels (sequence of int): class label of each sample.
        nout (int): width of the output layer.
        activation (Activation): activation of the output layer.

    Returns:
        Tensor: batch of shape ``(len(labels), nout)``.

    Raises:
        ValueError: if a label lies outside ``[0, nout)``.
    """
    low, high = activation.scale()
    targets = backend.zeros((len(labels), nout))
    buf = targets.asnumpyarray()
    buf.fill(low)
    for sample, label in enumerate(labels):
        if not 0 <= label < nout:
            raise ValueError("label %d of sample %d outside [0, %d)" %
                             (label, sample, nout))
        buf[sample, label] = high
    logger.debug("built %d %s targets in range (%s, %s)", len(labels),
                 activation.name, low, high)
    return targets
