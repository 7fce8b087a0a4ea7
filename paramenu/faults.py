"""
paramenu faults (errors and diagnostics) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the package
  can surface. Codes are grouped by domain so logs and searches stay predictable.
- ParameterError and subclasses: programmer/configuration errors. They are
  raised immediately, carry structured context (the offending name, slot,
  arity or kind) and also derive from the matching builtin (KeyError,
  IndexError, TypeError) so generic handlers keep working.
- InputFault and subclasses: user-input diagnostics collected while parsing a
  command line. They are warnings, never raised by the parser, and know how to
  render themselves through rich.
- report(): central entry point to print a fault on a console (stderr by default).

Propagation policy
- Definition and query mistakes are bugs in the calling program: raise.
- Command-line mistakes are expected: report, keep scanning, let the caller
  decide what a faulty run means.
"""
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset, coalesce

stderr = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - command-line input (111xx)
      • UNKNOWN_PARAMETER, NOT_ENOUGH_VALUES, UNCASTABLE_VALUE
    - definitions and queries (211xx)
      • DUPLICATE_PARAMETER, UNDECLARED_PARAMETER, INDEX_OUT_OF_RANGE, UNSUPPORTED_TYPE
    """
    # --- command-line input (11xxx) ---
    UNKNOWN_PARAMETER    = 11101
    NOT_ENOUGH_VALUES    = 11102
    UNCASTABLE_VALUE     = 11103

    # --- definitions and queries (21xxx) ---
    DUPLICATE_PARAMETER  = 21101
    UNDECLARED_PARAMETER = 21102
    INDEX_OUT_OF_RANGE   = 21103
    UNSUPPORTED_TYPE     = 21104


class ParameterError(Exception):
    """
    base class for programmer/configuration errors.

    attributes
    - message: human-readable, lowercased description.
    - name: canonical name of the parameter involved ("--count").
    - options: read-only mapping with any extra context (slot, arity, kind, ...).
    - code: the FaultCode of the concrete class.
    """
    code = Unset

    def __init__(self, message, /, *, name, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.name = name
        self.options = MappingProxyType(options)

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.message

    def __rich__(self):
        return Text.assemble(("[%d] " % self.code, "bold #00E5FF"), (self.message, "#FF4DA6"))


class DuplicateParameterError(ParameterError, KeyError):
    code = FaultCode.DUPLICATE_PARAMETER


class UnknownParameterError(ParameterError, KeyError):
    code = FaultCode.UNDECLARED_PARAMETER


class IndexOutOfRangeError(ParameterError, IndexError):
    code = FaultCode.INDEX_OUT_OF_RANGE


class UnsupportedTypeError(ParameterError, TypeError):
    code = FaultCode.UNSUPPORTED_TYPE


class InputFault(Warning):
    """
    base class for command-line diagnostics.

    options carried by every fault
    - token: the offending command-line token (or the parameter token for arity faults).
    - index: 1-based position of that token in the argument vector.
    - hint: optional follow-up advice, rendered on its own line.
    subclasses add parameter/slot/kind where relevant.
    """
    code = Unset

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __getattr__(self, name, /):
        try:
            return self.__dict__["options"][name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} fault has no option {name!r}") from None

    def __str__(self):
        return self.message

    def __rich__(self):
        line = Text(self.message, style="#C8C8D0")
        if hint := self.options.get("hint"):
            return Text.assemble(line, "\n", (" → ", "#9CE19C dim"), (hint, "italic #9CE19C"))
        return line


class UnknownParameterFault(InputFault):
    code = FaultCode.UNKNOWN_PARAMETER


class NotEnoughValuesFault(InputFault):
    code = FaultCode.NOT_ENOUGH_VALUES


class UncastableValueFault(InputFault):
    code = FaultCode.UNCASTABLE_VALUE


def report(fault, /, console=Unset):
    """
    print a fault on a rich console.

    contract
    - fault must be renderable through __rich__ (every fault class here is).
    - console defaults to the module-level stderr console (faults.stderr); tests and hosts can
      pass their own (e.g. Console(file=io.StringIO())).
    - the line is printed with soft wrapping so the console never re-flows it.
    """
    if not callable(getattr(fault, "__rich__", None)):
        raise TypeError("report() argument must be renderable through __rich__")
    coalesce(console, stderr).print(fault, soft_wrap=True, highlight=False)


__all__ = (
    "FaultCode",
    "ParameterError",
    "DuplicateParameterError",
    "UnknownParameterError",
    "IndexOutOfRangeError",
    "UnsupportedTypeError",
    "InputFault",
    "UnknownParameterFault",
    "NotEnoughValuesFault",
    "UncastableValueFault",
    "report",
)
