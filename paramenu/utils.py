"""
paramenu utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel for “value not provided”, distinct from None and falsey.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, preserving None/0/""/[].

- rename(callable, name) / @rename("name")
  • Stable __name__/__qualname__ for generated accessors.

- mirror("attr")
  • Read-only property over a private backing field (self._attr); containers
    are handed out as fresh tuples so callers cannot mutate registry state.

- pluralize(text, count)
  • Best-effort pluralization of the last word of a label, driven by a count.

- ordinal(number)
  • Human-friendly ordinal for 1-based positions ("first", "12th").

- prefixed(name) / squash(text)
  • Canonical "--" parameter names and whitespace-normalized descriptions.

Stability and contract
- Names listed in __all__ are re-exported by the package; anything else is internal.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> prefixed("count")
    '--count'
    >>> pluralize("value", 2)
    'values'
"""
import builtins
import functools
import re
from collections.abc import Mapping, Sequence, Set
from typing import final

PREFIX = "--"


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "" or [] are returned as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - rename(name) -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            callable.__qualname__ = name
            callable.__name__ = name
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    # tuples all the way down; mappings become plain dict copies
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_freeze, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_freeze, object.values())))
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors the private attribute "_{name}".

    Containers are returned as fresh tuples (recursively), so the only way to
    change a parameter's state is through the registry and the parser.

    Example
    - Given self._defaults, declare defaults = mirror("defaults").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


@functools.cache
def pluralize(text, count=2, /):
    """
    Pluralize the last word of a label when count is not one.

    Only the regular rules needed by the message catalog are covered
    (s/sh/ch/x/z → +es, consonant+y → -ies, otherwise +s); both English
    ("value" → "values") and French ("valeur" → "valeurs") labels follow them.
    Leading text and trailing whitespace are preserved.

    Examples
    - pluralize("value", 1)    -> "value"
    - pluralize("value", 3)    -> "values"
    - pluralize("entry", 2)    -> "entries"
    - pluralize("valeur", 0)   -> "valeurs"
    """
    if not isinstance(text, str):
        raise TypeError("pluralize() argument must be a string")

    if count == 1 or not (match := re.search(r"(\S+)(\s*)$", text)):
        return text

    head, last, trail = text[:match.start(1)], match.group(1), match.group(2)
    lower = last.lower()

    if lower.endswith(("s", "sh", "ch", "x", "z")):
        suffix = "es"
    elif lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        last, suffix = last[:-1], "ies"
    else:
        suffix = "s"

    return head + last + (suffix.upper() if last.isupper() else suffix) + trail


def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth").
    - Other numbers use numeric ordinals with English suffixes (11th, 22nd, 103rd).
    """
    if 1 <= number <= 10:
        return (
            "first", "second", "third", "fourth", "fifth",
            "sixth", "seventh", "eighth", "ninth", "tenth",
        )[number - 1]

    if 10 < number % 100 < 20:
        return f"{number}th"

    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def prefixed(name, /):
    """
    Return the canonical form of a parameter name.

    The "--" prefix is added once; names that already carry it are kept as-is,
    so "count" and "--count" resolve to the same parameter.
    """
    if not isinstance(name, str):
        raise TypeError("parameter names must be strings")
    return name if name.startswith(PREFIX) else PREFIX + name


def squash(text, /):
    """
    Collapse every run of whitespace into a single space and trim both ends.
    """
    if not isinstance(text, str):
        raise TypeError("descriptions must be strings")
    return " ".join(text.split())


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a meaningful value, and materialize it
with coalesce(value, default).
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "pluralize",
    "ordinal",
    "prefixed",
    "squash",

    # Types
    "UnsetType",

    # Constants
    "Unset",
    "PREFIX",
)
