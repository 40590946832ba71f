from fastapi import Request
from pymongo.database import Database
from app.core.config import Settings
from app.core.email import EmailNotifier
from app.core.security import TokenSigner


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialised")
    return db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_signer(request: Request) -> TokenSigner:
    return request.app.state.token_signer


def get_notifier(request: Request) -> EmailNotifier:
    return request.app.state.notifier
