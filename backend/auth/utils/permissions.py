# auth/utils/permissions.py
from typing import Any, Iterable, Set
from fastapi import Depends, HTTPException, status

from backend.user.models.user import User, Role
from backend.auth.services.auth_service import get_current_user


def _to_str_set(items: Iterable[Any]) -> Set[str]:
    """
    Normaliza una colección de roles (str o Enum) a un set[str].
    """
    out: Set[str] = set()
    for x in items:
        if x is None:
            continue
        if hasattr(x, "value"):
            out.add(str(getattr(x, "value")))
        else:
            out.add(str(x))
    return out


def require_roles(*allowed: Any):

    allowed_set = _to_str_set(allowed)
    if not allowed_set:
        raise ValueError("require_roles needs at least one allowed role")
    unknown = allowed_set - {r.value for r in Role}
    if unknown:
        raise ValueError(f"Unknown roles: {', '.join(sorted(unknown))}")

    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role.value not in allowed_set:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return current_user

    return checker


def require_admin():
    """Guard que exige rol 'admin'."""
    return require_roles(Role.admin)
