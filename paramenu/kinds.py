"""
Value kinds of parameter slots.

A parameter stores all of its values under one kind. The kind decides how a
command-line token is converted, how a default is displayed in the help menu
and which typed accessors are allowed on the parameter.

    kind            native type        converter       default display
    FLAG            (no slots)         -               -
    INTEGER         int                int()           1, 2
    REAL            float              float()         0.5, 1
    EXTENDED_REAL   decimal.Decimal    Decimal()       0.1000000000000000000001
    TEXT            str                verbatim        "a", "b"
    CHOICE          str (one label)    verbatim        "fast"
"""
from decimal import Decimal, InvalidOperation
from enum import Enum

from .faults import UnsupportedTypeError
from .messages import Message


class ValueKind(Enum):
    FLAG = "flag"
    INTEGER = "integer"
    REAL = "real"
    EXTENDED_REAL = "extended-real"
    TEXT = "text"
    CHOICE = "choice"

    @property
    def numeric(self):
        return self in (ValueKind.INTEGER, ValueKind.REAL, ValueKind.EXTENDED_REAL)

    @property
    def textual(self):
        return self in (ValueKind.TEXT, ValueKind.CHOICE)

    @property
    def label(self):
        """
        catalog entry describing the expected value in conversion diagnostics.
        """
        match self:
            case ValueKind.INTEGER:
                return Message.INTEGER_KIND
            case ValueKind.REAL:
                return Message.REAL_KIND
            case ValueKind.EXTENDED_REAL:
                return Message.EXTENDED_REAL_KIND
            case _:
                raise TypeError(f"{self.value} values are never converted")

    @classmethod
    def infer(cls, values, /, name=None):
        """
        infer the kind of a parameter from its default values.

        rules
        - the exact native type decides: int, float, Decimal or str.
        - bool is rejected even though it is an int; flags are declared separately.
        - every value must share the same type.
        - name is only used to enrich the error raised on failure.
        """
        kinds = {int: cls.INTEGER, float: cls.REAL, Decimal: cls.EXTENDED_REAL, str: cls.TEXT}
        types = {type(value) for value in values}

        if len(types) != 1:
            raise UnsupportedTypeError(
                "default values of %r must all share one type" % name,
                name=name,
                types=tuple(sorted(native.__name__ for native in types)),
            )

        native, = types
        try:
            return kinds[native]
        except KeyError:
            raise UnsupportedTypeError(
                "default values of %r have unsupported type %r" % (name, native.__name__),
                name=name,
                types=(native.__name__,),
            ) from None

    def convert(self, token, /):
        """
        convert one command-line token into this kind's native value.

        raises ValueError when the token is not a valid literal; the parser turns
        that into a diagnostic and keeps the slot's previous value.
        """
        match self:
            case ValueKind.INTEGER:
                return int(token)
            case ValueKind.REAL:
                return float(token)
            case ValueKind.EXTENDED_REAL:
                try:
                    return Decimal(token)
                except InvalidOperation:
                    raise ValueError(f"invalid extended-precision literal: {token!r}") from None
            case ValueKind.TEXT | ValueKind.CHOICE:
                return token
            case ValueKind.FLAG:
                raise TypeError("flags do not take values")

    def format(self, value, /):
        """
        render one value the way the help menu shows defaults.
        """
        match self:
            case ValueKind.INTEGER | ValueKind.EXTENDED_REAL:
                return str(value)
            case ValueKind.REAL:
                return format(value, "g")
            case ValueKind.TEXT | ValueKind.CHOICE:
                return f'"{value}"'
            case ValueKind.FLAG:
                raise TypeError("flags do not have values")


__all__ = ("ValueKind",)
