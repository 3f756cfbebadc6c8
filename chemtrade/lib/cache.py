"""
Test-friendly helpers for caching.

Some things in chemtrade are meant to be created once per process, like the
storage Repository picked from settings. We still want to be able to reset
those between test runs, or when a test overrides the storage settings, so
every function cached through this module can be cleared in one call.
"""
import functools

# Every function wrapped by our lru_cache decorator, so we can clear them later.
_lru_cached_fns = []


def lru_cache(*args, **kwargs):
    """
    Thin wrapper over functools.lru_cache that lets us clear all caches later.
    """
    def decorator(fn):
        wrapped_fn = functools.lru_cache(*args, **kwargs)(fn)
        _lru_cached_fns.append(wrapped_fn)
        return wrapped_fn
    return decorator


def clear_lru_caches():
    """
    Clear all LRU caches that use our lru_cache decorator.

    Useful for tests.
    """
    for fn in _lru_cached_fns:
        fn.cache_clear()
