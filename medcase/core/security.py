import base64
import io
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import pyotp
import qrcode
import qrcode.image.svg
from jose import jwt, JWTError
from passlib.context import CryptContext

from medcase.core.config import settings
from medcase.core.exceptions import Unauthenticated

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed hash or a password bcrypt refuses
        return False

def generate_two_factor_secret(email: str) -> Tuple[str, str]:
    """
    Generate a TOTP secret and its provisioning URI.

    The URI is what authenticator apps scan as a QR code.
    """
    secret = pyotp.random_base32()
    uri = pyotp.TOTP(secret).provisioning_uri(
        name=email,
        issuer_name=settings.TWO_FACTOR_ISSUER,
    )
    return secret, uri

def render_qr_data_url(data: str) -> str:
    """
    Encode ``data`` as a QR code and return it as an SVG data URL.
    """
    image = qrcode.make(data, image_factory=qrcode.image.svg.SvgImage)
    buffer = io.BytesIO()
    image.save(buffer)
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"

def create_access_token(claims: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = dict(claims)
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise Unauthenticated()
