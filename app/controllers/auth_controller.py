import logging
from jose import JWTError
from pymongo.database import Database
from app.core.config import Settings
from app.core.email import EmailNotifier
from app.core.errors import AuthError, ConflictError, DeliveryError, InvalidTokenError, NotFoundError
from app.core.security import TokenSigner, hash_password, verify_password
from app.models.user_model import public_user
from app.repositories.reset_token_repo import (
    consume_reset_token,
    delete_reset_tokens,
    replace_reset_token,
)
from app.repositories.user_repo import (
    create_user,
    get_user_by_email,
    get_user_by_id,
    to_object_id,
    update_password,
)
from app.schemas.user_schema import UserLogin, UserRegister

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


def register(db: Database, signer: TokenSigner, data: UserRegister) -> dict:
    if get_user_by_email(db, data.email):
        raise ConflictError("User already exists")

    user = create_user(db, data.name, data.email, hash_password(data.password))
    user_id = str(user["_id"])
    logger.info("Registered user %s", user_id)
    return {"token": signer.create_access_token(subject=user_id)}


def login(db: Database, signer: TokenSigner, data: UserLogin) -> dict:
    user = get_user_by_email(db, data.email)
    if not user or not verify_password(data.password, user["password"]):
        raise AuthError(INVALID_CREDENTIALS)
    return {"token": signer.create_access_token(subject=str(user["_id"]))}


def _reset_email_html(reset_link: str) -> str:
    return f"""
    <div style="font-family: Arial, sans-serif; line-height: 1.6;">
      <h1>You requested a password reset</h1>
      <p>Please go to this link to reset your password:</p>
      <p><a href="{reset_link}" clicktracking="off">{reset_link}</a></p>
      <p>If you did not request this, you can ignore this email.</p>
    </div>
    """


def forgot_password(
    db: Database,
    signer: TokenSigner,
    notifier: EmailNotifier,
    settings: Settings,
    email: str,
) -> dict:
    user = get_user_by_email(db, email)
    if not user:
        raise NotFoundError("User not found")

    token = signer.create_reset_token(subject=str(user["_id"]))
    replace_reset_token(db, user["_id"], token)

    reset_link = f"{settings.frontend_base_url}/reset-password/{token}"
    try:
        notifier.send(user["email"], "Password Reset Request", _reset_email_html(reset_link))
    except DeliveryError:
        delete_reset_tokens(db, user["_id"])
        raise
    except Exception as exc:
        logger.exception("Reset email for user %s could not be sent", user["_id"])
        delete_reset_tokens(db, user["_id"])
        raise DeliveryError() from exc
    logger.info("Password reset email sent for user %s", user["_id"])
    return {"msg": "Email sent"}


def reset_password(db: Database, signer: TokenSigner, token: str, new_password: str) -> dict:
    try:
        subject = signer.decode_reset_token(token)
    except JWTError:
        raise AuthError("Invalid or expired token")

    user_id = to_object_id(subject)
    if user_id is None or not consume_reset_token(db, user_id, token):
        raise InvalidTokenError("Invalid token")

    if not update_password(db, user_id, hash_password(new_password)):
        raise NotFoundError("User not found")
    delete_reset_tokens(db, user_id)
    logger.info("Password reset for user %s", user_id)
    return {"msg": "Password reset successful"}


def get_profile(user: dict) -> dict:
    return public_user(user)
