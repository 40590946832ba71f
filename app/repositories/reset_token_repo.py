from bson import ObjectId
from pymongo.database import Database
from app.core.mongo import RESET_TOKENS_COLLECTION
from app.models.reset_token_model import new_reset_token_document


def _tokens(db: Database):
    return db[RESET_TOKENS_COLLECTION]


def replace_reset_token(db: Database, user_id: ObjectId, token: str) -> dict:
    """Store ``token`` as the user's only reset token, dropping any previous one.

    A single upserting ``replace_one`` keyed on ``userId`` so that no window
    exists in which two tokens are valid for the same user.
    """
    doc = new_reset_token_document(user_id, token)
    _tokens(db).replace_one({"userId": user_id}, doc, upsert=True)
    return doc


def consume_reset_token(db: Database, user_id: ObjectId, token: str) -> dict | None:
    return _tokens(db).find_one_and_delete({"userId": user_id, "token": token})


def delete_reset_tokens(db: Database, user_id: ObjectId) -> int:
    return _tokens(db).delete_many({"userId": user_id}).deleted_count
