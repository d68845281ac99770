from __future__ import annotations

from fastapi import APIRouter, Depends

from barkeep.schemas import AccountOut, PreferencesIn
from barkeep.services.account_service import AccountContext
from barkeep.services.session_service import current_account

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=AccountOut)
def me(account: AccountContext = Depends(current_account)):
    return account.to_dict()


@router.put("/me/preferences", response_model=AccountOut)
def update_preferences(payload: PreferencesIn, account: AccountContext = Depends(current_account)):
    account.saved_search_time_period = payload.saved_search_time_period
    return account.to_dict()
