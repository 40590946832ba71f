from datetime import datetime, timezone
from bson import ObjectId


def new_reset_token_document(user_id: ObjectId, token: str) -> dict:
    return {
        "userId": user_id,
        "token": token,
        "created_at": datetime.now(timezone.utc),
    }
