"""Inspect the headings of an HTML page and the ToC htmltoc would build."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from htmltoc import TocOptions, build_table_of_contents, format_toc_tree, render_toc
from htmltoc.schemas import Heading


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect heading levels, ids and the resulting ToC tree.")
    parser.add_argument("--url", help="URL to fetch (e.g. https://example.com/post)")
    parser.add_argument("--file", help="Local HTML file path")
    parser.add_argument("--included", default="h2,h3", help="Heading levels to include (default: h2,h3)")
    parser.add_argument("--excluded", default="", help="Comma-separated exclusion substrings")
    parser.add_argument("--min-headings", default="3", help="Minimum headings for a ToC (default: 3)")
    parser.add_argument("--html", action="store_true", help="Also print the rendered ToC markup")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    html = load_html(url=args.url, file_path=args.file)
    options = TocOptions(
        included_levels=args.included,
        excluded_selectors=args.excluded,
        min_headings=args.min_headings,
    )
    result = build_table_of_contents(html, options)

    print("Levels:")
    for level, count in sorted(collect_levels(result.headings).items()):
        print(f"h{level}: {count}")

    print(f"\nAccepted headings: {result.count}")
    if result.is_empty:
        print(f"No ToC (minimum is {options.min_headings})")
        return

    print("\nTree:")
    print(format_toc_tree(result.tree))

    if args.html:
        print("\nMarkup:")
        print(render_toc(result.tree, options))


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_levels(headings: list[Heading]) -> Counter:
    levels = Counter()
    for heading in headings:
        levels[heading.level] += 1
    return levels


if __name__ == "__main__":
    main()
