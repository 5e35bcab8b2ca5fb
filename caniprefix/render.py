"""Prefix resolution renderer."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

NOT_APPLICABLE_LABEL = "not resolvable"
NO_PREFIX_LABEL = "no prefix required"


def _result_line(identifier: str, prefixes: Sequence[str] | None) -> Text:
    line = Text(identifier, style="bold cyan")
    if prefixes is None:
        line.append(f": {NOT_APPLICABLE_LABEL}", style="dim")
    elif not prefixes:
        line.append(f": {NO_PREFIX_LABEL}")
    else:
        line.append(f": {' '.join(prefixes)}")
    return line


def _expanded_lines(identifier: str, names: Sequence[str] | None) -> list[Text]:
    if names is None:
        return [Text(f"{identifier}: {NOT_APPLICABLE_LABEL}", style="dim")]
    return [Text(f"{name};") for name in names]


def render_results(
    results: Sequence[tuple[str, Sequence[str] | None]],
    *,
    expanded: bool = False,
    era: str | None = None,
) -> Group:
    """Render resolved prefixes (or expanded declaration names) as a Rich group."""
    lines: list[Text] = []
    for identifier, values in results:
        if expanded:
            lines.extend(_expanded_lines(identifier, values))
        else:
            lines.append(_result_line(identifier, values))

    title = f"era {era}" if era else None
    return Group(Panel(Group(*lines), border_style="blue", title=title))
