"""template.py - Positional ``{}`` placeholder substitution.

SigLog messages use anchor-style placeholders rather than ``%``-formatting::

    "::{}: placing order id={} qty={}"

Each ``{}`` is replaced, left to right, by the ``str()`` of the next argument.
Formatting is deferred: ``TemplateMessage`` is handed to ``logging`` as the
record's ``msg`` and only rendered when a handler actually calls
``record.getMessage()``, so disabled levels cost nothing beyond the call.

Substitution rules:
    - ``\\{}`` renders as a literal ``{}`` and consumes no argument.
    - ``\\\\{}`` renders as a literal backslash followed by a substituted value.
    - A placeholder with no argument left stays as ``{}``, while escaped
      placeholders are still unescaped.
    - Surplus arguments are ignored.
    - An argument whose ``__str__`` raises renders as ``[FAILED toString()]``.
"""

from typing import Any, Sequence

PLACEHOLDER = "{}"
ESCAPE = "\\"
FAILED_TO_STRING = "[FAILED toString()]"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return FAILED_TO_STRING


def format_template(template: str, args: Sequence[Any]) -> str:
    """Render ``template`` by substituting ``args`` into its ``{}`` slots.

    Args:
        template: Message text containing zero or more ``{}`` placeholders.
        args: Substitution values, consumed in order.

    Returns:
        The rendered message.

    Example:
        >>> format_template("::{}: placing id={}", ["place(id)", 42])
        '::place(id): placing id=42'
        >>> format_template("literal \\\\{} and {}", ["x"])
        'literal {} and x'
    """
    template = str(template)
    parts = []
    pos = 0
    index = 0
    while True:
        slot = template.find(PLACEHOLDER, pos)
        if slot == -1:
            break

        escaped = slot > 0 and template[slot - 1] == ESCAPE
        double_escaped = escaped and slot > 1 and template[slot - 2] == ESCAPE
        if escaped and not double_escaped:
            parts.append(template[pos:slot - 1])
            parts.append(PLACEHOLDER)
        elif index < len(args):
            end = slot - 1 if double_escaped else slot
            parts.append(template[pos:end])
            parts.append(_safe_str(args[index]))
            index += 1
        else:
            parts.append(template[pos:slot + len(PLACEHOLDER)])
        pos = slot + len(PLACEHOLDER)

    parts.append(template[pos:])
    return "".join(parts)


class TemplateMessage:
    """A log message whose formatting is deferred until it is rendered.

    ``logging.LogRecord.getMessage()`` calls ``str(record.msg)`` and only
    applies ``%``-formatting when ``record.args`` is non-empty. Passing a
    ``TemplateMessage`` with no record args therefore routes rendering through
    ``format_template`` instead.

    Attributes:
        template (str): The message template with ``{}`` placeholders.
        args (tuple): The substitution arguments, signature first.
    """

    __slots__ = ("template", "args")

    def __init__(self, template: str, args: Sequence[Any] = ()) -> None:
        self.template = template
        self.args = tuple(args)

    def __str__(self) -> str:
        return format_template(self.template, self.args)

    def __repr__(self) -> str:  # pragma: no cover
        return f"TemplateMessage({self.template!r}, {self.args!r})"
