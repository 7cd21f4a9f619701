from fastapi import HTTPException

from app.core.security import decode_access_token


def decode_token(token: str) -> dict:
    """Claims of a bearer token, or 401 when it is unusable."""
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if "sub" not in payload or "role" not in payload:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    return payload
