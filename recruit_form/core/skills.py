from __future__ import annotations

from typing import Iterable, Iterator


class SkillSet:
    """Insertion-ordered, case-sensitive set of skill tags."""

    def __init__(self, skills: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        for skill in skills:
            if skill not in self._items:
                self._items.append(skill)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, skill: object) -> bool:
        return skill in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkillSet):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"SkillSet({self._items!r})"

    def as_list(self) -> list[str]:
        return list(self._items)

    def toggle(self, skill: str) -> None:
        if skill in self._items:
            self._items.remove(skill)
        else:
            self._items.append(skill)

    def add_custom(self, raw: str) -> bool:
        skill = (raw or "").strip()
        if not skill or skill in self._items:
            return False
        self._items.append(skill)
        return True

    def remove(self, skill: str) -> bool:
        if skill not in self._items:
            return False
        self._items.remove(skill)
        return True

    def clear(self) -> None:
        self._items.clear()
