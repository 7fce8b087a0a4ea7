r"""
paramenu facade: one object to declare, parse, query and print parameters.

How to build the menu
- set_description / set_usage: optional head sections of the help menu.
- define_flag:   a parameter without values.
- define_values: a numeric or text parameter with one or more values.
- define_choice: a multiple-choice parameter.
- insert_subsection: a header printed before the next defined parameter.
- print_help / render: the help menu, on the console or as a string.

How to use the parameters
- parse: read the command line (sys.argv by default).
- is_defined / is_valid / numeric_value / text_value / choice_value: read back.

Quick example:
    >>> menu = Menu(Layout(terminal_width=60))
    >>> menu.set_description("Compute the sum of two integers.")
    >>> menu.define_values("terms", ["a", "b"], [0, 0], "The two integers to add.")
    >>> menu.define_flag("verbose", "Print intermediate results.")
    >>> faults = menu.parse(["sum", "--terms", "2", "40"])
    >>> menu.numeric_value("terms", 1) + menu.numeric_value("terms", 2)
    42
"""
import sys

from rich.console import Console

from .layout import Layout
from .parameters import Registry
from .parsing import ArgumentParser
from .rendering import HelpRenderer
from .utils import Unset, coalesce, mirror, squash


def _sanitize_paragraph(field, text, /):
    if not isinstance(text, str):
        raise TypeError(f"menu {field!r} must be a string")
    elif not (text := squash(text)):
        raise ValueError(f"menu {field!r} cannot be empty")
    return text


class Menu:
    """
    Parameters of a command-line program and their help menu.

    Parameters
    - layout: Layout constants (terminal width, columns, locale).
    - description / usage: head sections of the help menu (see set_*).
    - console: rich Console used for diagnostics and help output; by default
      diagnostics go to stderr and the help menu to stdout.
    - quiet: collect parse diagnostics without printing them.
    """

    faults = mirror("faults")

    @property
    def registry(self):
        return self._registry

    @property
    def layout(self):
        return self._layout

    def __init__(self, layout=Layout(), /, *, description=Unset, usage=Unset, console=Unset, quiet=False):
        if not isinstance(layout, Layout):
            raise TypeError("menu layout must be a Layout")
        if console is not Unset and not isinstance(console, Console):
            raise TypeError("menu console must be a rich Console")
        self._layout = layout
        self._registry = Registry()
        self._console = console
        self._quiet = quiet
        self._faults = ()
        self._description = Unset
        self._usage = Unset
        if description is not Unset:
            self.set_description(description)
        if usage is not Unset:
            self.set_usage(usage)

    def set_description(self, text, /):
        self._description = _sanitize_paragraph("description", text)

    def set_usage(self, text, /):
        self._usage = _sanitize_paragraph("usage", text)

    # --- build ---

    def define_flag(self, name, description, /):
        self._registry.define_param(name, description)

    def define_values(self, name, slots, defaults, description, /, show_default=False):
        self._registry.define_value_param(name, slots, defaults, description, show_default)

    def define_choice(self, name, slot, default, choices, description, /, show_default=False):
        self._registry.define_choice_param(name, slot, default, choices, description, show_default)

    def insert_subsection(self, title, /):
        self._registry.insert_subsection(title)

    # --- parse ---

    def parse(self, tokens=Unset, /):
        """
        parse the command line and return its diagnostics (an empty tuple when clean).

        tokens defaults to sys.argv; tokens[0] is the program name and is skipped.
        """
        parser = ArgumentParser(
            self._registry,
            locale=self._layout.locale,
            console=self._console,
            quiet=self._quiet,
        )
        self._faults = parser.parse(coalesce(tokens, sys.argv))
        return self._faults

    # --- query ---

    def is_defined(self, name, /):
        return self._registry.is_defined(name)

    def is_valid(self, name, slot=1, /):
        return self._registry.is_valid(name, slot)

    def numeric_value(self, name, slot=1, /, cast=Unset):
        return self._registry.numeric_value(name, slot, cast=cast)

    def text_value(self, name, slot=1, /):
        return self._registry.text_value(name, slot)

    def choice_value(self, name, /):
        return self._registry.choice_value(name)

    # --- help ---

    def _renderer(self):
        return HelpRenderer(self._registry, self._layout, description=self._description, usage=self._usage)

    def render(self, usage=True, description=True):
        """
        return the help menu as plain text.
        """
        return self._renderer().render(usage, description).plain

    def print_help(self, usage=True, description=True, *, colorful=True):
        self._renderer().print(self._console, usage=usage, description=description, colorful=colorful)


__all__ = ("Menu",)
