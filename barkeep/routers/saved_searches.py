from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from barkeep.schemas import SavedSearchIn, SavedSearchOut, SavedSearchUpdate
from barkeep.services.account_service import AccountContext
from barkeep.services.session_service import current_account

router = APIRouter(prefix="/saved_searches", tags=["saved_searches"])
_NOT_NULL_FIELDS = {"user_order", "unapproved_only", "email_changes", "email_comments"}


def _find_or_404(account: AccountContext, saved_search_id: str):
    search = account.saved_searches.find(saved_search_id)
    if search is None:
        raise HTTPException(404, "Saved search not found")
    return search


@router.get("", response_model=list[SavedSearchOut])
def list_saved_searches(account: AccountContext = Depends(current_account)):
    return account.saved_searches.list_all()


@router.post("", response_model=SavedSearchOut, status_code=201)
def create_saved_search(payload: SavedSearchIn, account: AccountContext = Depends(current_account)):
    store = account.saved_searches
    search = store.create(payload.model_dump(exclude_none=True))
    return store.save(search)


@router.get("/{saved_search_id}", response_model=SavedSearchOut)
def get_saved_search(saved_search_id: str, account: AccountContext = Depends(current_account)):
    return _find_or_404(account, saved_search_id)


@router.patch("/{saved_search_id}", response_model=SavedSearchOut)
def update_saved_search(
    saved_search_id: str,
    payload: SavedSearchUpdate,
    account: AccountContext = Depends(current_account),
):
    search = _find_or_404(account, saved_search_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        if value is None and key in _NOT_NULL_FIELDS:
            continue
        setattr(search, key, value)
    return account.saved_searches.save(search)


@router.delete("/{saved_search_id}", status_code=204)
def delete_saved_search(saved_search_id: str, account: AccountContext = Depends(current_account)):
    if not account.saved_searches.delete(saved_search_id):
        raise HTTPException(404, "Saved search not found")
