"""Caller identity supplied by the upstream gateway.

Token issuance and verification happen before requests reach this service.
The gateway forwards the authenticated caller as trusted headers:

    X-User-Id     required; requests without it are rejected with 401
    X-User-Role   "admin" grants access to admin routes
    X-User-Email  used for order emails
    X-User-Name   used for order emails
"""

from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class Caller:
    user_id: str
    role: str = "user"
    email: str | None = None
    name: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def current_caller(
    x_user_id: str = Header(default=""),
    x_user_role: str = Header(default="user"),
    x_user_email: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
) -> Caller:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authorized, no user")
    return Caller(
        user_id=x_user_id,
        role=(x_user_role or "user").lower(),
        email=x_user_email,
        name=x_user_name,
    )


def admin_caller(caller: Caller = Depends(current_caller)) -> Caller:
    if not caller.is_admin:
        raise HTTPException(status_code=403, detail="Not authorized as an admin")
    return caller
