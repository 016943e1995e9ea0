# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Houses code for the core backend, its Tensor data structure and the batch
iteration strategies.
"""

import logging

# import shortcuts
from axon.backends.cpu import CPU, CPUTensor  # noqa
from axon.backends.par import NoPar, ThreadPar


def gen_backend(nthreads=None, rng_seed=None, numerr_handling=None,
                dtype=None):
    """
    Construct and return a backend instance based on the arguments given.
    With no parameters, a single threaded, float32 CPU backend is returned.

    Arguments:
        nthreads (int, optional): Number of worker threads the samples of a
                                  batch are spread over.  None or 1 (the
                                  default) processes samples sequentially.
        rng_seed (numeric, optional): Set this to a numeric value which can be
                                      used to seed the random number generator
                                      of the instantiated backend.  Defaults to
                                      None, which doesn't explicitly seed (so
                                      each run will be different)
        numerr_handling (dict, optional): Dictate how numeric errors are
                                          displayed and handled.  The keys and
                                          values permissible for this dict
                                          match that seen in numpy.seterr.
                                          If set to None (the default),
                                          numpy's current settings are kept.
        dtype (data-type, optional): element type of the tensors the backend
                                     allocates.  Defaults to float32.

    Returns:
        Backend: newly constructed backend instance, already associated with
                 its batch iteration strategy.  Call its close() (or use it
                 in a ``with`` block) to release worker threads.
    """
    logger = logging.getLogger(__name__)

    if nthreads is None or nthreads == 1:
        par = NoPar()
    else:
        par = ThreadPar(nthreads=nthreads)

    kwargs = dict(rng_seed=rng_seed, seterr_handling=numerr_handling)
    if dtype is not None:
        kwargs['default_dtype'] = dtype
    be = CPU(**kwargs)
    logger.info("CPU backend, %s strategy, RNG seed: %s, numerr: %s",
                par.__class__.__name__, rng_seed, numerr_handling)

    par.associate(be)
    return be
