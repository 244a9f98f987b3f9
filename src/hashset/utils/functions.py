from contextlib import contextmanager

__all__ = ['disable_datasets_cache', 'to_hashable']


@contextmanager
def disable_datasets_cache():
    from datasets import disable_caching, enable_caching, is_caching_enabled

    enabled = is_caching_enabled()
    disable_caching()

    try:
        yield
    finally:
        if enabled:
            enable_caching()


def to_hashable(value):
    # JSON arrays and objects come back as list and dict
    if isinstance(value, list):
        return tuple(to_hashable(x) for x in value)
    if isinstance(value, dict):
        return tuple(sorted((k, to_hashable(v)) for k, v in value.items()))
    return value
