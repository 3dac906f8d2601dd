from __future__ import annotations

from typing import Sequence

MIN_LINK_SLOTS = 1


def empty_links() -> list[str]:
    return [""]


def project_for_submission(links: Sequence[str]) -> list[str]:
    return [link for link in links if link.strip() != ""]


def set_link(links: Sequence[str], index: int, value: str) -> list[str]:
    if not 0 <= index < len(links):
        raise IndexError(f"No portfolio link slot at index {index}")
    updated = list(links)
    updated[index] = value
    return updated


def add_link(links: Sequence[str]) -> list[str]:
    return [*links, ""]


def remove_link(links: Sequence[str], index: int) -> list[str]:
    # The last remaining slot stays so there is always a field to type into.
    if len(links) <= MIN_LINK_SLOTS:
        return list(links)
    if not 0 <= index < len(links):
        raise IndexError(f"No portfolio link slot at index {index}")
    return [link for i, link in enumerate(links) if i != index]


def normalize_links(links: Sequence[str]) -> list[str]:
    return list(links) if links else empty_links()
