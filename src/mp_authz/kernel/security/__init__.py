"""Kernel security – Authority, Principal, ConfigAttribute, Vote."""
from mp_authz.kernel.security.attribute import ConfigAttribute, attributes_of
from mp_authz.kernel.security.principal import Authority, Principal, authorities_of
from mp_authz.kernel.security.vote import Vote

__all__ = [
    "Authority",
    "ConfigAttribute",
    "Principal",
    "Vote",
    "attributes_of",
    "authorities_of",
]
