from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.security import decode_access_token
from rethinking_econ.db.session import get_session
from rethinking_econ.services import profiles as profiles_service

SessionDep = Annotated[AsyncSession, Depends(get_session)]

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class Caller:
    """Identity asserted by the identity provider's bearer token."""

    user_id: str
    name: Optional[str] = None
    picture: Optional[str] = None


async def get_optional_caller(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[Caller]:
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        return None
    subject = payload.get("sub")
    if not subject:
        return None
    return Caller(user_id=str(subject), name=payload.get("name"), picture=payload.get("picture"))


async def get_current_caller(
    caller: Annotated[Optional[Caller], Depends(get_optional_caller)],
) -> Caller:
    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller


OptionalCallerDep = Annotated[Optional[Caller], Depends(get_optional_caller)]
CallerDep = Annotated[Caller, Depends(get_current_caller)]


async def require_admin(caller: CallerDep, session: SessionDep) -> Caller:
    if not await profiles_service.is_admin(session, caller.user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
    return caller


AdminDep = Annotated[Caller, Depends(require_admin)]
