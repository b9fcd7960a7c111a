"""
인증 API입니다.
비밀번호 없이 이메일만으로 로그인/회원가입합니다.
이후 요청은 응답으로 받은 사용자 ID를 X-User-Id 헤더에 담아 보냅니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel

from app.api.deps import get_auth_service
from app.models import User, UserRole
from app.services import AuthService

router = APIRouter()


class LoginRequest(BaseModel):
    email: str


class RegisterRequest(BaseModel):
    name: str
    email: str
    role: UserRole = UserRole.USER


@router.post("/register", status_code=201)
async def register(
    request: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """새 사용자 등록 (등록 후 바로 로그인 상태)"""
    return await auth.register(request.name, request.email, request.role)


@router.post("/login")
async def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """이메일로 로그인"""
    return await auth.login(request.email)


@router.post("/logout")
async def logout(auth: AuthService = Depends(get_auth_service)) -> dict:
    await auth.logout()
    return {"message": "로그아웃되었습니다"}


@router.get("/me")
async def me(
    x_user_id: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """
    현재 사용자 조회.
    X-User-Id 헤더가 있으면 해당 사용자, 없으면 마지막으로 로그인한 사용자를 반환합니다.
    """
    if x_user_id:
        return await auth.get_user(x_user_id)

    user = await auth.current_user()
    if user is None:
        raise HTTPException(status_code=401, detail="로그인이 필요합니다")
    return user
