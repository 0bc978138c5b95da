# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Memoization for decisions made once per primitive type."""

import functools


def cache_with_key(key):
    """
    Cache the result of the decorated function under ``key(*args, **kwargs)``.

    Exceptions are not cached, so a failing lookup is retried on the next
    call. The decorated function exposes its ``cache`` dict and a
    ``cache_clear()`` method.
    """

    def deco(func):
        cache = {}

        @functools.wraps(func)
        def inner(*args, **kwargs):
            cache_key = key(*args, **kwargs)
            try:
                return cache[cache_key]
            except KeyError:
                result = cache[cache_key] = func(*args, **kwargs)
                return result

        inner.cache = cache
        inner.cache_clear = cache.clear
        return inner

    return deco
