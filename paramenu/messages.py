"""
Locale-keyed message catalog.

Every user-facing string of the help menu and of the parse diagnostics lives
here, keyed by (Locale, Message). Layout and parsing code only ask for a
message identifier; they never branch on the language themselves.

Host overrides
- The host application may define a __messages__ mapping in __main__ whose keys
  are (Locale, Message) pairs and whose values are format templates. Entries
  found there win over the built-in catalog, which keeps wording changes out of
  the library.

    __messages__ = {(Locale.EN, Message.DEFAULT_LABEL): "Defaults to:"}
"""
from enum import Enum, StrEnum, auto
from types import MappingProxyType


class Locale(StrEnum):
    """
    languages the menu and diagnostics can be printed in.
    """
    EN = "en"
    FR = "fr"


class Message(Enum):
    """
    stable identifiers for catalog entries.

    templates use str.format fields; the fields each entry expects are listed
    next to its identifier.
    """
    USAGE_HEADER = auto()        # -
    SUBSECTION = auto()          # title
    CHOICE_LABEL = auto()        # label
    DEFAULT_LABEL = auto()       # -
    UNKNOWN_PARAMETER = auto()   # token
    NOT_ENOUGH_VALUES = auto()   # name, count, values
    UNCASTABLE_VALUE = auto()    # name, kind, token
    VALUE_WORD = auto()          # -
    SUGGESTION = auto()          # suggestion
    INTEGER_KIND = auto()        # -
    REAL_KIND = auto()           # -
    EXTENDED_REAL_KIND = auto()  # -


CATALOG = MappingProxyType({
    Locale.EN: MappingProxyType({
        Message.USAGE_HEADER: "USAGE:",
        Message.SUBSECTION: "{title}:",
        Message.CHOICE_LABEL: '"{label}": ',
        Message.DEFAULT_LABEL: "Default:",
        Message.UNKNOWN_PARAMETER: 'unknown parameter "{token}"',
        Message.NOT_ENOUGH_VALUES: 'error: parameter "{name}" expects {count} {values}',
        Message.UNCASTABLE_VALUE: 'parameter "{name}" expects {kind} value, received "{token}"',
        Message.VALUE_WORD: "value",
        Message.SUGGESTION: "did you mean {suggestion!r}?",
        Message.INTEGER_KIND: "an integer",
        Message.REAL_KIND: "a real",
        Message.EXTENDED_REAL_KIND: "an extended-precision real",
    }),
    Locale.FR: MappingProxyType({
        Message.USAGE_HEADER: "UTILISATION :",
        Message.SUBSECTION: "{title} :",
        Message.CHOICE_LABEL: '"{label}" : ',
        Message.DEFAULT_LABEL: "Défaut :",
        Message.UNKNOWN_PARAMETER: 'erreur : paramètre "{token}" inconnu',
        Message.NOT_ENOUGH_VALUES: 'erreur : le paramètre "{name}" attend {count} {values}',
        Message.UNCASTABLE_VALUE: 'le paramètre "{name}" attend une valeur {kind}, et a reçu "{token}"',
        Message.VALUE_WORD: "valeur",
        Message.SUGGESTION: "vouliez-vous dire {suggestion!r} ?",
        Message.INTEGER_KIND: "entière",
        Message.REAL_KIND: "réelle",
        Message.EXTENDED_REAL_KIND: "réelle étendue",
    }),
})


def template(locale, key, /):
    """
    return the raw template for a catalog entry, honoring host overrides.
    """
    if not isinstance(key, Message):
        raise TypeError("template() key must be a message identifier")
    locale = Locale(locale)
    try:
        return getattr(__import__("__main__"), "__messages__", {})[locale, key]
    except KeyError:
        return CATALOG[locale][key]


def message(locale, key, /, **fields):
    """
    format a catalog entry for the given locale.

    examples
    - message(Locale.EN, Message.SUBSECTION, title="Output") -> "Output:"
    - message(Locale.FR, Message.DEFAULT_LABEL)              -> "Défaut :"
    """
    return template(locale, key).format(**fields)


__all__ = (
    "Locale",
    "Message",
    "CATALOG",
    "template",
    "message",
)
