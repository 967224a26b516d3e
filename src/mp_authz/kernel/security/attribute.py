"""Kernel security – ConfigAttribute."""
from __future__ import annotations

import dataclasses
from typing import Iterable


@dataclasses.dataclass(frozen=True)
class ConfigAttribute:
    """One requirement attached to a protected resource or operation.

    The value is opaque to the engine; voters decide whether they are
    competent to judge it (see :meth:`mp_authz.voting.Voter.supports`).
    """
    value: str

    def __str__(self) -> str:
        return self.value


def attributes_of(
    *values: str | ConfigAttribute | Iterable[str | ConfigAttribute],
) -> tuple[ConfigAttribute, ...]:
    """Build an ordered attribute tuple, flattening nested iterables.

    Order is kept and duplicates are not removed::

        attributes_of("ROLE_1", "DENY_FOR_SURE")
        attributes_of(["ROLE_1", "ROLE_2"])
    """
    result: list[ConfigAttribute] = []
    for value in values:
        if isinstance(value, ConfigAttribute):
            result.append(value)
        elif isinstance(value, str):
            result.append(ConfigAttribute(value))
        else:
            result.extend(attributes_of(*value))
    return tuple(result)


__all__ = ["ConfigAttribute", "attributes_of"]
