"""Kernel security – Authority, Principal."""
from __future__ import annotations

import dataclasses
from typing import Iterable


@dataclasses.dataclass(frozen=True)
class Authority:
    """Opaque, case-sensitive capability token (e.g. ``ROLE_ADMIN``)."""
    value: str

    def __str__(self) -> str:
        return self.value


def authorities_of(*values: str | Authority | Iterable[str | Authority]) -> frozenset[Authority]:
    """Build an authority set from strings, :class:`Authority` or iterables of either.

    Duplicates collapse::

        authorities_of("ROLE_1", "ROLE_2", "ROLE_1")  # two authorities
        authorities_of(["ROLE_1", Authority("ROLE_2")])
    """
    result: set[Authority] = set()
    for value in values:
        if isinstance(value, Authority):
            result.add(value)
        elif isinstance(value, str):
            result.add(Authority(value))
        else:
            result.update(authorities_of(*value))
    return frozenset(result)


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity as handed over by the authentication layer."""
    subject: str
    authorities: frozenset[Authority] = frozenset()

    @classmethod
    def of(cls, subject: str, *authorities: str | Authority) -> Principal:
        return cls(subject=subject, authorities=authorities_of(*authorities))

    def has_authority(self, authority: str | Authority) -> bool:
        value = authority.value if isinstance(authority, Authority) else authority
        return Authority(value) in self.authorities


__all__ = ["Authority", "Principal", "authorities_of"]
