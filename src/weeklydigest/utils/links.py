"""Page reference handling."""

from __future__ import annotations


def page_ref_forms(page: str) -> tuple[str, str]:
    """Return the tagged and plain link forms of a page, in removal order."""

    return f"#[[{page}]]", f"[[{page}]]"


def strip_page_refs(text: str, page: str) -> str:
    """Remove every literal link to ``page`` from ``text`` and trim the result.

    Matching is exact and case-sensitive; ``[[foo]]`` is left alone when ``page`` is
    ``"Foo"``. Interior whitespace around a removed link is kept.
    """

    for ref in page_ref_forms(page):
        text = text.replace(ref, "")
    return text.strip()
