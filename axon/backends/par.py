# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Batch iteration strategies.  Each strategy exposes ``for_i(count, body)``
which calls ``body(i)`` exactly once for every ``i`` in ``[0, count)``.  No
ordering between indices is promised, so bodies must only touch the slot
belonging to their own index.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor

from axon.util.param import opt_param

logger = logging.getLogger(__name__)


class NoPar(object):

    """
    Processes every sample in turn on the calling thread.
    """

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)
        self.backend = None

    def associate(self, backend):
        backend.par = self
        self.backend = backend

    def for_i(self, count, body):
        for i in range(count):
            body(i)

    def size(self):
        return 1

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class ThreadPar(NoPar):

    """
    Spreads the samples of a batch across a pool of worker threads.

    Keyword Arguments:
        nthreads (int, optional): number of worker threads.  Defaults to the
                                  number of CPUs reported by the system.

    The pool lives until close() is called, either directly, through the
    associated backend's close(), or by leaving a ``with`` block.
    """

    def __init__(self, **kwargs):
        super(ThreadPar, self).__init__(**kwargs)
        opt_param(self, ['nthreads'], os.cpu_count() or 1)
        self.nthreads = int(self.nthreads)
        if self.nthreads < 1:
            raise ValueError("nthreads must be positive, got %d" %
                             self.nthreads)
        self.executor = ThreadPoolExecutor(max_workers=self.nthreads)
        logger.info('Thread-parallel mode. Number of threads = %d.',
                    self.nthreads)

    def for_i(self, count, body):
        futures = [self.executor.submit(body, i) for i in range(count)]
        # all units finish before the first failure is re-raised
        errors = [fut.exception() for fut in futures]
        for err in errors:
            if err is not None:
                raise err

    def size(self):
        return self.nthreads

    def close(self):
        self.executor.shutdown(wait=True)
