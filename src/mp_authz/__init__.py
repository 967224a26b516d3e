"""
mp_authz – voting-based access decision engine.

Import path convention::

    from mp_authz.kernel.security import Principal, attributes_of
    from mp_authz.voting import AccessDecisionManager, RoleVoter, UnanimousPolicy
    from mp_authz.kernel.errors import AccessDeniedError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
