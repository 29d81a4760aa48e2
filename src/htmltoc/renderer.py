"""Render heading trees as ToC markup or a plain-text outline."""

from __future__ import annotations

from html import escape
from uuid import uuid4

from htmltoc.config import WRAPPER_ID_PREFIX
from htmltoc.schemas import DefaultToggle, HeadingNode, TocOptions

TOGGLE_LABEL = "Show/Hide"


def make_wrapper_id() -> str:
    """Return a fresh, document-unique id for the ToC wrapper."""
    return f"{WRAPPER_ID_PREFIX}{uuid4().hex[:13]}"


def render_toc(
    tree: list[HeadingNode],
    options: TocOptions | None = None,
    *,
    wrapper_id: str | None = None,
) -> str:
    """Render the heading tree inside a labelled, optionally collapsible nav.

    Args:
        tree: Root heading nodes.
        options: Title, CSS class and toggle settings. Defaults apply if None.
        wrapper_id: Id for the ``<nav>`` element; generated when omitted.

    Returns:
        The ToC markup, or an empty string for an empty tree.
    """
    if not tree:
        return ""

    opts = options or TocOptions()
    wid = wrapper_id or make_wrapper_id()
    toggle_id = f"{wid}_toggle"

    parts: list[str] = [
        f'<nav id="{_attr(wid)}" class="fyptaco_wrapper {_attr(opts.css_class)}">',
        '<div class="fyptaco-header">',
    ]
    if opts.title:
        parts.append(f'<h2 class="fyptaco-title">{escape(opts.title, quote=False)}</h2>')
    if opts.toggle:
        parts.append(
            f'<label class="fyptaco-toggle-label" for="{_attr(toggle_id)}">'
            f'<span class="fyptaco-toggle" role="button" aria-expanded="true" '
            f'aria-controls="{_attr(toggle_id)}">{escape(TOGGLE_LABEL, quote=False)}</span>'
            "</label>"
        )
    parts.append("</div>")

    if opts.toggle:
        checked = "checked " if opts.default_toggle is DefaultToggle.SHOW else ""
        parts.append(
            f'<input type="checkbox" class="fyptaco-toggle-checkbox" id="{_attr(toggle_id)}" '
            f'aria-hidden="true" {checked}/>'
        )

    parts.append(f'<ul class="fyptaco-list" id="{_attr(wid + "_list")}">')
    parts.append(_render_items(tree))
    parts.append("</ul>")
    parts.append("</nav>")
    return "".join(parts)


def _render_items(nodes: list[HeadingNode]) -> str:
    items: list[str] = []
    for node in nodes:
        item = f'<li><a href="#{_attr(node.id)}">{escape(node.title, quote=False)}</a>'
        if node.children:
            item += "<ul>" + _render_items(node.children) + "</ul>"
        items.append(item + "</li>")
    return "".join(items)


def _attr(value: str) -> str:
    return escape(value, quote=True)


def format_toc_tree(tree: list[HeadingNode], indent: int = 0) -> str:
    """Render the tree as an indented outline with anchors."""
    lines: list[str] = []
    for node in tree:
        lines.append(" " * (indent * 4) + f"{node.title} (#{node.id})")
        if node.children:
            lines.append(format_toc_tree(node.children, indent + 1))
    return "\n".join(lines)
