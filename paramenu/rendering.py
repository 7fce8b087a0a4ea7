"""
Help-menu rendering.

HelpRenderer lays the registry out as plain, column-aligned text and keeps
rich styles as spans on top of it, so the same render serves both the
byte-stable string (Text.plain) and a colored terminal print.

Menu shape (Layout defaults, width 80):

    <program description, wrapped at column 0>

    USAGE:

      prog [options]

    Output:

      --size <w> <h>              Size of the generated image, in pixels.
                                  Default: 640, 480

      --mode <speed>              How hard to work.
                                      "fast": Skip the refinement passes.
                                      "slow": Refine until stable.

Palette keys
- usage-label, usage-section, description-section, group-label
- parameter-name, flag-name, metavar, argument-description
- choice, choice-description, default-label, default-value

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .kinds import ValueKind
from .layout import Layout, wrap
from .messages import Message, message
from .utils import Unset, coalesce


class HelpRenderer:
    """
    Read-only view of a Registry as a help menu.

    Parameters
    - registry: the Registry to display (never modified).
    - layout: Layout constants (width, columns, locale).
    - description: program description, printed first when given.
    - usage: usage line, printed under a localized header when given.
    """

    def __init__(self, registry, layout=Layout(), /, *, description=Unset, usage=Unset):
        if not isinstance(layout, Layout):
            raise TypeError("renderer layout must be a Layout")
        self._registry = registry
        self._layout = layout
        self._description = description
        self._usage = usage

    @staticmethod
    def _palette():
        return defaultdict(str, {
            # === Head sections ===
            "usage-label": "bold #00E6FF",
            "usage-section": "bold #36C5F0",
            "description-section": "italic #A3A3A3",

            # === Parameter list ===
            "group-label": "bold #FFFFFF",
            "parameter-name": "bold #00E6FF",
            "flag-name": "bold #22C55E",
            "metavar": "bold #FFD600",
            "argument-description": "#9CA3AF",

            # === Choices / defaults ===
            "choice": "bold #FF4D94",
            "choice-description": "#9CA3AF",
            "default-label": "#737373",
            "default-value": "#FFD600",
        } | getattr(__import__("__main__"), "__styles__", {}))

    def render(self, usage=True, description=True):
        """
        Build the whole menu as a rich Text (one "\\n"-terminated line per row).

        usage / description select whether those head sections are printed;
        they are skipped anyway when the renderer was not given them.
        """
        layout = self._layout
        width = layout.terminal_width
        locale = layout.locale
        styles = self._palette()
        menu = Text(end="")

        def emit(*fragments):
            menu.append_text(Text.assemble(*fragments))
            menu.append("\n")

        # Program description paragraph
        if description and self._description is not Unset:
            emit()
            for row in wrap(self._description, 0, width):
                emit((row, styles["description-section"]))

        # Usage block
        if usage and self._usage is not Unset:
            emit()
            emit((message(locale, Message.USAGE_HEADER), styles["usage-label"]))
            emit()
            for row in wrap(self._usage, layout.params_indent, width, inline=False):
                emit((row, styles["usage-section"]))
            emit()

        subsections = self._registry.subsections

        for index, parameter in enumerate(self._registry):
            for title, position in subsections:
                if position == index:
                    emit()
                    emit((message(locale, Message.SUBSECTION, title=title), styles["group-label"]))
                    emit()

            # Use string: indentation, name, then one <slot> per value
            use = Text(" " * layout.params_indent)
            use.append(parameter.name, styles["flag-name" if parameter.kind is ValueKind.FLAG else "parameter-name"])
            for slot in parameter.slots:
                use.append(" ").append(f"<{slot}>", styles["metavar"])

            inline = len(use) + layout.column_gap <= layout.description_indent
            rows = wrap(parameter.description, layout.description_indent, width, inline=inline)
            if not parameter.description and not inline:
                rows.clear()

            if inline:
                if rows[0]:
                    use.append(" " * (layout.description_indent - len(use)))
                emit(use, (rows.pop(0), styles["argument-description"]))
            else:
                emit(use)
            for row in rows:
                emit((row, styles["argument-description"]))

            # Choice table: quoted label, separator, description at the choice column
            for label, text in parameter.choices:
                head = message(locale, Message.CHOICE_LABEL, label=label)
                padding = " " * layout.choice_column
                if (indent := layout.choice_column + len(head)) < width:
                    rows = wrap(text, indent, width)
                    emit(padding, (head, styles["choice"]), (rows.pop(0), styles["choice-description"]))
                else:
                    rows = wrap(text, layout.choice_column, width, inline=False)
                    emit(padding, (head.rstrip(), styles["choice"]))
                for row in rows:
                    emit((row, styles["choice-description"]))

            # Default values line
            if parameter.show_default and parameter.kind is not ValueKind.FLAG:
                emit(
                    " " * layout.description_indent,
                    (message(locale, Message.DEFAULT_LABEL), styles["default-label"]),
                    " ",
                    (", ".join(map(parameter.kind.format, parameter.defaults)), styles["default-value"]),
                )

            emit()

        return menu

    def print(self, console=Unset, /, *, usage=True, description=True, colorful=True):
        """
        Write the menu to a rich console (stdout by default).

        soft wrapping is forced so the console never re-flows the computed
        layout; colorful=False prints the plain text without styles.
        """
        menu = self.render(usage, description)
        if not colorful:
            menu = Text(menu.plain, end="")
        coalesce(console, Console()).print(menu, soft_wrap=True, highlight=False)


__all__ = ("HelpRenderer",)
