from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.core.auth_utils import decode_token
from app.core.security import ADMIN_ROLE
from app.models.admin import Admin

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _resolve_admin(token: str, db: Session) -> Admin:
    payload = decode_token(token)

    if payload["role"] != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admins only"
        )

    admin = db.query(Admin).filter(Admin.email == payload["sub"]).first()
    if not admin:
        raise HTTPException(status_code=401, detail="Admin not found")

    return admin


def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> Admin:
    return _resolve_admin(credentials.credentials, db)


def get_optional_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_security),
    db: Session = Depends(get_db)
) -> Admin | None:
    """Resolve the admin when a bearer token is sent, otherwise None."""
    if credentials is None:
        return None
    return _resolve_admin(credentials.credentials, db)
