# timing.py - small timing helper

import time
from functools import wraps
from typing import Callable


def timed(func: Callable) -> Callable:
    """Decorator returns tuple: (result, elapsed)"""
    @wraps(func)
    def _wrap(*a, **kw):
        t0 = time.perf_counter()
        res = func(*a, **kw)
        t1 = time.perf_counter()
        return res, (t1 - t0)
    return _wrap
