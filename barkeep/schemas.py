from typing import Optional

from pydantic import BaseModel, StrictInt


class SavedSearchIn(BaseModel):
    repos: Optional[str] = None
    authors: Optional[str] = None
    paths: Optional[str] = None
    messages: Optional[str] = None
    branches: Optional[str] = None
    unapproved_only: bool = False
    email_changes: bool = False
    email_comments: bool = False
    time_period: Optional[StrictInt] = None
    user_order: Optional[int] = None


class SavedSearchUpdate(BaseModel):
    repos: Optional[str] = None
    authors: Optional[str] = None
    paths: Optional[str] = None
    messages: Optional[str] = None
    branches: Optional[str] = None
    unapproved_only: Optional[bool] = None
    email_changes: Optional[bool] = None
    email_comments: Optional[bool] = None
    time_period: Optional[StrictInt] = None
    user_order: Optional[int] = None


class SavedSearchOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    user_order: int
    repos: Optional[str] = None
    authors: Optional[str] = None
    paths: Optional[str] = None
    messages: Optional[str] = None
    branches: Optional[str] = None
    unapproved_only: bool = False
    email_changes: bool = False
    email_comments: bool = False
    time_period: Optional[int] = None

    model_config = {"from_attributes": True}


class AccountOut(BaseModel):
    id: int
    email: str
    username: Optional[str] = None
    permission: str
    avatar_url: str
    saved_search_time_period: Optional[int] = None


class PreferencesIn(BaseModel):
    saved_search_time_period: Optional[StrictInt] = None
