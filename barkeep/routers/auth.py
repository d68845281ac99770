from __future__ import annotations

from fastapi import APIRouter, Request

from barkeep.services import session_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/demo")
def demo_login(request: Request):
    account = session_service.login_demo(request)
    return account.to_dict()


@router.post("/logout")
def logout(request: Request):
    session_service.logout(request)
    return {"ok": True}
