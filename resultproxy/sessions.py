"""
Session code vocabulary for the BPUT results portal.

Callers use short codes such as ``E24``; the portal's forms expect display
names such as ``Even-(2023-24)``. Both lookup directions are built from
``SESSION_PAIRS`` so they cannot drift apart.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

# (short code, portal display name)
SESSION_PAIRS: tuple[tuple[str, str], ...] = (
    ("S24", "Supplementary 2023-24"),
    ("E24", "Even-(2023-24)"),
    ("O24", "Odd-(2023-24)"),
    ("S23", "Supplementary 2022-23"),
    ("E23", "Even-(2022-23)"),
    ("O23", "Odd-(2022-23)"),
    ("S22", "Supplementary 2021-22"),
    ("R22", "Re-ExamOdd (2021-22)"),
    ("E22", "Even-(2021-22)"),
    ("O22", "Odd-(2021-22)"),
    ("S21", "Supplementary 2020-21"),
    ("E21", "Even-(2020-21)"),
    ("O21", "Odd-(2020-21)"),
    ("S20", "Supplementary 2019-20"),
    ("E20", "Even-(2019-20)"),
    ("O20", "Odd-(2019-20)"),
    ("S18", "Special (2018-19)"),
    ("E18", "Even-(2018-19)"),
    ("O18", "Odd-(2018-19)"),
    ("S17", "Special-(2017-18)"),
    ("E17", "Even-(2017-18)"),
    ("O17", "Odd-(2017-18)"),
    ("S16", "Special-(2016-17)"),
    ("E16", "Even-(2016-17)"),
    ("O16", "Odd-(2016-17)"),
    ("S15", "Special-(2015-16)"),
    ("E15", "Even-(2015-16)"),
    ("O15", "Odd-(2015-16)"),
)


class SessionCodeTable:
    """Immutable bidirectional mapping between session codes and display names.

    Lookups in either direction fall back to returning the input unchanged,
    so sessions the portal adds later can still be requested by full name.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]]):
        forward: dict[str, str] = {}
        reverse: dict[str, str] = {}
        for code, name in pairs:
            if code in forward:
                raise ValueError(f"Duplicate session code: {code}")
            if name in reverse:
                raise ValueError(f"Duplicate session name: {name}")
            forward[code] = name
            reverse[name] = code

        self._by_code = MappingProxyType(forward)
        self._by_name = MappingProxyType(reverse)

    def to_display_name(self, code: str) -> str:
        """Resolve a short code (``E24``) to the portal's display name."""
        return self._by_code.get(code, code)

    def to_short_code(self, name: str) -> str:
        """Resolve a portal display name back to its short code."""
        return self._by_name.get(name, name)

    def codes(self) -> list[str]:
        return list(self._by_code)

    def names(self) -> list[str]:
        return list(self._by_name)

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._by_code.items())


DEFAULT_SESSION_TABLE = SessionCodeTable(SESSION_PAIRS)
