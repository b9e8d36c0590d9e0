from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from domly.auth import get_current_user
from domly.base.dependencies import get_session
from domly.base.schemas import BaseDTO, NonEmptyStr, OptionalStr, PatchModel
from domly.user.models import User

router = APIRouter(prefix="/me")


class ProfileUpdate(PatchModel):
    nullable_fields = frozenset({"company"})

    name: NonEmptyStr | None = None
    company: OptionalStr = None


class ProfileResponse(BaseDTO):
    name: str
    email: str
    company: str | None


@router.get("", response_model=ProfileResponse)
async def get_profile(user: User = Depends(get_current_user)) -> User:
    return user


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> User:
    for key, value in body.changes().items():
        setattr(user, key, value)
    await session.flush()
    return user
