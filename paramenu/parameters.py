r"""
paramenu parameter definitions and registry.

Overview
- Parameter: one declared command-line parameter.
  • name: canonical name with its "--" prefix ("--count").
  • description: whitespace-normalized help text.
  • slots: display names of the expected values ("<width> <height>").
  • kind: a ValueKind shared by every slot.
  • defaults / values: default and current value per slot.
  • valid: whether the last conversion of each slot was accepted.
  • defined: whether the parameter appeared on the command line.
  • choices: ordered (label, description) pairs of a choice parameter.
  • show_default: whether the help menu prints the default line.

- Registry: owns the parameters in definition order and the subsection markers.
  • define_param / define_value_param / define_choice_param / insert_subsection (build phase).
  • lookup / is_defined / is_valid / text_value / choice_value / numeric_value (queries).
  • iteration, len() and "in" follow definition order (rendering).

Validation highlights
- Names are strings without whitespace; "--" is prepended once.
- A name can only be defined once (DuplicateParameterError, registry untouched).
- Value parameters need as many default values as slot names (at least one).
- Choice parameters need a non-empty table of unique labels that contains the default.

Query errors
- UnknownParameterError: the name was never defined.
- IndexOutOfRangeError: the 1-based slot is outside 1..arity.
- UnsupportedTypeError: the accessor does not match the parameter's kind.

Quick example:
    >>> registry = Registry()
    >>> registry.define_value_param("count", ["n"], [0], "How many times.")
    >>> registry.numeric_value("count")
    0
"""
import re

from .faults import (
    DuplicateParameterError,
    IndexOutOfRangeError,
    UnknownParameterError,
    UnsupportedTypeError,
)
from .kinds import ValueKind
from .utils import Unset, coalesce, mirror, prefixed, squash


class Parameter:
    """
    A declared parameter and its parse state.

    Fields are exposed read-only (containers come back as tuples); the registry
    builds parameters and the parser is the only writer of values/valid/defined.
    """
    __slots__ = (
        "_name",
        "_description",
        "_slots",
        "_kind",
        "_defaults",
        "_values",
        "_valid",
        "_defined",
        "_choices",
        "_show_default",
    )

    name = mirror("name")
    description = mirror("description")
    slots = mirror("slots")
    kind = mirror("kind")
    defaults = mirror("defaults")
    values = mirror("values")
    valid = mirror("valid")
    defined = mirror("defined")
    choices = mirror("choices")
    show_default = mirror("show_default")

    def __init__(self, name, description, kind, slots=(), defaults=(), *, choices=(), show_default=False):
        self._name = name
        self._description = description
        self._kind = kind
        self._slots = list(slots)
        self._defaults = list(defaults)
        self._values = list(defaults)
        self._valid = [True] * len(self._slots)
        self._defined = False
        self._choices = list(choices)
        self._show_default = show_default

    @property
    def arity(self):
        return len(self._slots)

    def assign(self, slot, token, /):
        """
        convert token into the 0-based slot; return False when it is rejected.

        a rejected token leaves the previous value in place.
        """
        try:
            self._values[slot] = self._kind.convert(token)
        except ValueError:
            self._valid[slot] = False
            return False
        self._valid[slot] = True
        return True

    def mark(self):
        self._defined = True

    def __repr__(self):
        return "parameter(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        yield "name", self.name
        yield "kind", self.kind
        yield "slots", self.slots
        yield "values", self.values
        yield "defined", self.defined


def _sanitize_name(name, /):
    if not isinstance(name, str):
        raise TypeError("parameter names must be strings")
    elif not re.fullmatch(r"(--)?[^\s-]\S*", name):
        raise ValueError("parameter names must be non-empty, without whitespace nor leading hyphens (%r)" % name)
    return prefixed(name)


def _sanitize_slot(slot, name, /):
    if not isinstance(slot, str):
        raise TypeError(f"{name} slot names must be strings")
    elif not (slot := slot.strip()):
        raise ValueError(f"{name} slot names cannot be empty")
    return slot


class Registry:
    """
    Ordered store of parameter definitions.

    Storage
    - _parameters: list of Parameter in definition order (print order).
    - _positions: canonical name → index into _parameters.
    - _subsections: list of (title, index) markers; a header is printed right
      before the parameter occupying index, in insertion order.
    """

    def __init__(self):
        self._parameters = []
        self._positions = {}
        self._subsections = []

    subsections = mirror("subsections")

    def __iter__(self):
        return iter(self._parameters)

    def __len__(self):
        return len(self._parameters)

    def __contains__(self, name):
        return isinstance(name, str) and prefixed(name) in self._positions

    def _store(self, parameter):
        self._positions[parameter.name] = len(self._parameters)
        self._parameters.append(parameter)

    def _claim(self, name):
        name = _sanitize_name(name)
        if name in self._positions:
            raise DuplicateParameterError("a parameter named %r already exists" % name, name=name)
        return name

    def define_param(self, name, description, /):
        """
        define a flag: a parameter without values, only ever "defined" or not.
        """
        self._store(Parameter(self._claim(name), squash(description), ValueKind.FLAG))

    def define_value_param(self, name, slots, defaults, description, /, show_default=False):
        """
        define a numeric or text parameter with one value per slot.

        the kind is inferred from the default values (int, float, Decimal or str),
        which also become the initial current values.
        """
        name = self._claim(name)
        slots = [_sanitize_slot(slot, name) for slot in slots]
        defaults = list(defaults)

        if not slots:
            raise ValueError(f"{name} must declare at least one value slot")
        if len(slots) != len(defaults):
            raise ValueError(f"{name} declares {len(slots)} slots but {len(defaults)} default values")

        kind = ValueKind.infer(defaults, name)
        self._store(Parameter(name, squash(description), kind, slots, defaults, show_default=bool(show_default)))

    def define_choice_param(self, name, slot, default, choices, description, /, show_default=False):
        """
        define a multiple-choice parameter: one slot, a table of (label, description).

        the default label must be one of the labels; any text is still accepted
        when parsing, the table only documents the expected values.
        """
        name = self._claim(name)
        slot = _sanitize_slot(slot, name)
        table = []

        for entry in choices:
            try:
                label, text = entry
            except (TypeError, ValueError):
                raise TypeError(f"{name} choices must be (label, description) pairs") from None
            if not isinstance(label, str) or not isinstance(text, str):
                raise TypeError(f"{name} choice labels and descriptions must be strings")
            if label in (known for known, _ in table):
                raise ValueError(f"{name} choices cannot contain duplicated label {label!r}")
            table.append((label, squash(text)))

        if not table:
            raise ValueError(f"{name} must declare at least one choice")
        if not isinstance(default, str):
            raise TypeError(f"{name} default choice must be a string")
        if default not in (label for label, _ in table):
            raise ValueError(f"{name} default choice {default!r} is not one of its labels")

        self._store(Parameter(
            name, squash(description), ValueKind.CHOICE, [slot], [default],
            choices=table, show_default=bool(show_default),
        ))

    def insert_subsection(self, title, /):
        """
        print a subsection header before the next parameter to be defined.
        """
        if not isinstance(title, str):
            raise TypeError("subsection titles must be strings")
        self._subsections.append((squash(title), len(self._parameters)))

    def match(self, token, /):
        """
        return the parameter whose canonical name is exactly token, else None.

        command-line tokens are never prefix-normalized: "count" does not match
        "--count" on the command line, only in queries.
        """
        try:
            return self._parameters[self._positions[token]]
        except KeyError:
            return None

    def lookup(self, name, /):
        try:
            return self._parameters[self._positions[name := prefixed(name)]]
        except KeyError:
            raise UnknownParameterError("unknown parameter %r" % name, name=name) from None

    def _slot(self, parameter, slot, /):
        if not isinstance(slot, int) or isinstance(slot, bool):
            raise TypeError("slot numbers must be integers")
        if not 1 <= slot <= parameter.arity:
            raise IndexOutOfRangeError(
                "parameter %r only has %d values (slot %d requested)" % (parameter.name, parameter.arity, slot),
                name=parameter.name,
                slot=slot,
                arity=parameter.arity,
            )
        return slot - 1

    def _expect(self, parameter, accepted, accessor, /):
        if not accepted:
            raise UnsupportedTypeError(
                "%s() is not supported on %s parameter %r" % (accessor, parameter.kind.value, parameter.name),
                name=parameter.name,
                kind=parameter.kind,
            )

    def is_defined(self, name, /):
        return self.lookup(name).defined

    def is_valid(self, name, slot=1, /):
        """
        tell whether the last value given for a slot was accepted.

        a slot is valid until a token fails to convert into it; defaults are valid.
        """
        parameter = self.lookup(name)
        return parameter.valid[self._slot(parameter, slot)]

    def text_value(self, name, slot=1, /):
        parameter = self.lookup(name)
        self._expect(parameter, parameter.kind.textual, "text_value")
        return parameter.values[self._slot(parameter, slot)]

    def choice_value(self, name, /):
        parameter = self.lookup(name)
        self._expect(parameter, parameter.kind is ValueKind.CHOICE, "choice_value")
        return parameter.values[0]

    def numeric_value(self, name, slot=1, /, cast=Unset):
        """
        return a numeric value, whatever the numeric kind (int, float or Decimal).

        cast, when given, converts the stored value (e.g. cast=float on an
        integer parameter).
        """
        parameter = self.lookup(name)
        self._expect(parameter, parameter.kind.numeric, "numeric_value")
        value = parameter.values[self._slot(parameter, slot)]
        return coalesce(cast, lambda x: x)(value)


__all__ = (
    "Parameter",
    "Registry",
)
