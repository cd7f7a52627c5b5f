from enum import IntEnum


class KeyScheme(IntEnum):
    STR = 0
    REPR = 1
    IDENTITY = 2


def _identity(arg):
    return arg


_SCHEME_FUNCS = {
    KeyScheme.STR: str,
    KeyScheme.REPR: repr,
    KeyScheme.IDENTITY: _identity,
}

_SCHEME_STR_MAP = {scheme.name.lower(): scheme for scheme in KeyScheme}


def _resolve_scheme(key):
    """Accept KeyScheme enum, int, or string and return a KeyScheme member."""
    if isinstance(key, KeyScheme):
        return key
    if isinstance(key, bool):
        raise TypeError("key must be a KeyScheme, int, str, or callable, got bool")
    if isinstance(key, int):
        try:
            return KeyScheme(key)
        except ValueError:
            raise ValueError(f"Unknown key scheme: {key!r}") from None
    if isinstance(key, str):
        try:
            return _SCHEME_STR_MAP[key.lower()]
        except KeyError:
            names = ", ".join(repr(name) for name in _SCHEME_STR_MAP)
            raise ValueError(f"Unknown key scheme: {key!r}. Use one of {names}.") from None
    raise TypeError(f"key must be a KeyScheme, int, str, or callable, got {type(key).__name__}")


def resolve_key(key):
    """Turn the ``key=`` option of ``memoize`` into a one-argument key function.

    Callables are used as-is. Everything else goes through the named
    schemes, where ``"str"`` (the default) keys by the argument's string
    form, so ``5`` and ``"5"`` share one cache slot.
    """
    if callable(key):
        return key
    return _SCHEME_FUNCS[_resolve_scheme(key)]
