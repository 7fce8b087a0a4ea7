"""
Help-menu layout: column constants and the word-wrap engine.

Layout
- terminal_width: hard right margin, in characters.
- column_gap: minimum number of spaces between a parameter's use string
  ("  --size <w> <h>") and its description; when the gap cannot be kept, the
  description moves to the next line.
- description_indent: description column, where parameter descriptions start.
- params_indent: indentation of use strings and of the usage line.
- choice_indent: extra indentation of choice entries, relative to the
  description column.
- locale: language of the menu and of the parse diagnostics.

wrap()
- One greedy routine shared by every text block of the menu. Callers only pick
  the indentation and whether the first line follows inline content.

        wrap("Print the result in a compact form", 10, 30)
        ['Print the result in', '          a compact form']
"""
import itertools
from collections import namedtuple

from .messages import Locale
from .utils import Unset, coalesce


class Layout(namedtuple("Layout", (
    "terminal_width",
    "column_gap",
    "description_indent",
    "params_indent",
    "choice_indent",
    "locale",
))):
    """
    validated, immutable layout constants of a help menu.

    defaults suit a classic 80-column terminal; every field only affects
    rendering (and the language of diagnostics), never parsing.
    """
    __slots__ = ()

    def __new__(
            cls,
            terminal_width=80,
            column_gap=2,
            description_indent=30,
            params_indent=2,
            choice_indent=4,
            locale=Locale.EN,
    ):
        for field, value in (
                ("terminal_width", terminal_width),
                ("column_gap", column_gap),
                ("description_indent", description_indent),
                ("params_indent", params_indent),
                ("choice_indent", choice_indent),
        ):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"layout {field!r} must be an integer")
            if value < 0:
                raise ValueError(f"layout {field!r} cannot be negative")

        if terminal_width < 1:
            raise ValueError("layout 'terminal_width' must be positive")
        if params_indent >= terminal_width:
            raise ValueError("layout 'params_indent' must be smaller than 'terminal_width'")
        if description_indent + choice_indent >= terminal_width:
            raise ValueError("layout choice column must fit inside 'terminal_width'")

        try:
            locale = Locale(locale)
        except ValueError:
            raise ValueError(f"layout 'locale' must be one of {', '.join(map(str, Locale))}") from None

        return super().__new__(cls, terminal_width, column_gap, description_indent, params_indent, choice_indent, locale)

    @property
    def choice_column(self):
        return self.description_indent + self.choice_indent


def wrap(text, indent, width, /, *, prefix=Unset, inline=True):
    """
    Greedily pack the words of text into lines no wider than width.

    Parameters
    - text: str
      Free text; runs of spaces collapse, the last word needs no terminator.
    - indent: int
      Columns already used on the left of every line (0 <= indent < width).
    - width: int
      Right margin (terminal width).
    - prefix: str (keyword-only)
      Padding written before every line but the first; defaults to indent spaces.
    - inline: bool (keyword-only)
      When True the first line is returned bare because the caller prints it
      right after inline content (a use string, a choice label). When False the
      first line receives the prefix as well.

    Returns
    - list[str]: at least one line (possibly empty).

    Algorithm
    - Characters accumulate into the pending word while indent + len(word) < width.
    - On a space, or when the word reached the margin, the word joins the line
      if indent + len(line) + len(word) + 1 <= width.
    - Otherwise the line is emitted and a word that fits on a fresh line starts
      it. A word too long for any line is split: the line is completed with the
      word's head, and the tail (plus the current character) becomes the new
      pending word. A line without a single free column is emitted first so the
      split always happens where there is room. Long words keep breaking until
      exhausted; no character is lost or duplicated.
    """
    if not isinstance(text, str):
        raise TypeError("wrap() text must be a string")
    if not 0 <= indent < width:
        raise ValueError("wrap() indent must be within 0 and width - 1")

    prefix = coalesce(prefix, " " * indent)
    room = width - indent
    lines = []
    line = word = ""

    for char in itertools.chain(text, " "):
        if char != " " and len(word) < room:
            word += char
            continue

        while word:
            if len(line) + len(word) + 1 <= room:
                line = f"{line} {word}" if line else word
                word = ""
            elif len(word) < room:
                lines.append(line)
                line, word = word, ""
            elif (used := len(line) + 1 if line else 0) >= room:
                lines.append(line)
                line = ""
            else:
                lines.append(f"{line} {word[:room - used]}" if line else word[:room - used])
                line, word = "", word[room - used:]
                if char != " ":
                    word += char
                    break

    if line or not lines:
        lines.append(line)

    return [
        line if index == 0 and inline else prefix + line
        for index, line in enumerate(lines)
    ]


__all__ = (
    "Layout",
    "wrap",
)
