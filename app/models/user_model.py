from datetime import datetime, timezone


def new_user_document(name: str, email: str, password_hash: str) -> dict:
    return {
        "name": name,
        "email": email,
        "password": password_hash,
        "created_at": datetime.now(timezone.utc),
    }


def public_user(doc: dict) -> dict:
    """Shape a stored user for API output; the password hash never leaves here."""
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "email": doc["email"],
        "created_at": doc.get("created_at"),
    }
