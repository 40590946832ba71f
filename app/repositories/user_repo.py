from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from app.core.errors import ConflictError
from app.core.mongo import USERS_COLLECTION
from app.models.user_model import new_user_document


def _users(db: Database):
    return db[USERS_COLLECTION]


def to_object_id(value: str | ObjectId) -> ObjectId | None:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def get_user_by_email(db: Database, email: str) -> dict | None:
    return _users(db).find_one({"email": email})


def get_user_by_id(db: Database, user_id: str | ObjectId) -> dict | None:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    return _users(db).find_one({"_id": oid})


def create_user(db: Database, name: str, email: str, password_hash: str) -> dict:
    doc = new_user_document(name, email, password_hash)
    try:
        result = _users(db).insert_one(doc)
    except DuplicateKeyError:
        raise ConflictError("User already exists")
    doc["_id"] = result.inserted_id
    return doc


def update_password(db: Database, user_id: ObjectId, password_hash: str) -> bool:
    result = _users(db).update_one({"_id": user_id}, {"$set": {"password": password_hash}})
    return result.matched_count == 1
