"""
Command-line parsing against a parameter registry.

ArgumentParser.parse(tokens) walks the argument vector once, left to right,
starting after the program name (tokens[0]):

    prog --size 640 480 --bogus --verbose --mode fast
         ^^^^^^ ^^^ ^^^                                 value parameter, two slots
                        ^^^^^^^                         unknown: reported, skipped
                                ^^^^^^^^^               flag: no value consumed
                                          ^^^^^^ ^^^^   choice: one slot

Soft-failure policy
- Unknown tokens, missing values and unconvertible values are reported as
  InputFault diagnostics and the scan goes on; nothing is raised.
- A matched parameter is marked defined even when some (or all) of its values
  were rejected; rejected slots keep their previous value and are flagged
  invalid (see Registry.is_valid).
- Value tokens are consumed verbatim, even when they look like parameter names.
"""
import difflib
from collections import deque

from .faults import (
    NotEnoughValuesFault,
    UncastableValueFault,
    UnknownParameterFault,
    report,
)
from .messages import Locale, Message, message
from .utils import Unset, mirror, ordinal, pluralize


class ArgumentParser:
    """
    Single-pass parser filling a Registry from an argument vector.

    Parameters
    - registry: the Registry to fill (mutated in place).
    - locale: language of the diagnostics.
    - console: rich Console receiving diagnostics (defaults to stderr).
    - quiet: collect diagnostics without printing them.
    """

    faults = mirror("faults")

    def __init__(self, registry, /, *, locale=Locale.EN, console=Unset, quiet=False):
        self._registry = registry
        self._locale = Locale(locale)
        self._console = console
        self._quiet = quiet
        self._faults = []

    def _trigger(self, fault):
        self._faults.append(fault)
        if not self._quiet:
            report(fault, self._console)

    def _unknown(self, token, index):
        suggestions = difflib.get_close_matches(token, [parameter.name for parameter in self._registry], 1)
        self._trigger(UnknownParameterFault(
            message(self._locale, Message.UNKNOWN_PARAMETER, token=token),
            token=token,
            index=index,
            position=ordinal(index),
            suggestions=tuple(suggestions),
            hint=message(self._locale, Message.SUGGESTION, suggestion=suggestions[0]) if suggestions else None,
        ))

    def _missing(self, parameter, token, index, slot):
        self._trigger(NotEnoughValuesFault(
            message(
                self._locale,
                Message.NOT_ENOUGH_VALUES,
                name=parameter.name,
                count=parameter.arity,
                values=pluralize(message(self._locale, Message.VALUE_WORD), parameter.arity),
            ),
            token=token,
            index=index,
            position=ordinal(index),
            parameter=parameter.name,
            slot=slot,
            expected=parameter.arity,
        ))

    def _uncastable(self, parameter, token, index, slot):
        self._trigger(UncastableValueFault(
            message(
                self._locale,
                Message.UNCASTABLE_VALUE,
                name=parameter.name,
                kind=message(self._locale, parameter.kind.label),
                token=token,
            ),
            token=token,
            index=index,
            position=ordinal(index),
            parameter=parameter.name,
            slot=slot,
            kind=parameter.kind,
        ))

    def parse(self, tokens, /):
        """
        parse an argument vector; return the diagnostics raised by this pass.

        tokens[0] is the program invocation and is skipped. faults from a
        previous call are discarded; values and defined flags are not reset, so
        parsing twice accumulates like repeating the parameters would.
        """
        self._faults.clear()

        tokens = deque(enumerate(tokens))
        if tokens:
            tokens.popleft()

        while tokens:
            index, token = tokens.popleft()

            if (parameter := self._registry.match(token)) is None:
                self._unknown(token, index)
                continue

            for slot in range(parameter.arity):
                try:
                    position, value = tokens.popleft()
                except IndexError:
                    self._missing(parameter, token, index, slot + 1)
                    break
                if not parameter.assign(slot, value):
                    self._uncastable(parameter, value, position, slot + 1)

            parameter.mark()

        return self.faults


__all__ = ("ArgumentParser",)
