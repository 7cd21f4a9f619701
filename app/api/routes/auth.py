from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.schemas.admin import AdminCreate, AdminLogin, TokenOut
from app.models.admin import Admin
from app.core.security import ADMIN_ROLE, create_admin_token, hash_password, verify_password
from app.core.logging_config import get_logger

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
logger = get_logger()


# =====================================================================
#                           ADMIN REGISTER
# =====================================================================
@router.post("/admin/register", status_code=201)
def admin_register(data: AdminCreate, db: Session = Depends(get_db)):
    email = data.email.lower()
    if db.query(Admin).filter(Admin.email == email).first():
        raise HTTPException(status_code=400, detail="Admin already exists")

    hashed = hash_password(data.password)
    admin = Admin(name=data.name, email=email, password_hash=hashed)

    db.add(admin)
    db.commit()

    logger.bind(log_type="admin").info(f"Admin Registered | Admin={email}")

    return {"message": "Admin registered successfully"}


# =====================================================================
#                           ADMIN LOGIN
# =====================================================================
@router.post("/admin/login", response_model=TokenOut)
def admin_login(data: AdminLogin, db: Session = Depends(get_db)):
    admin = db.query(Admin).filter(Admin.email == data.email.lower()).first()

    if not admin or not verify_password(data.password, admin.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_admin_token(admin.email)

    return {
        "access_token": token,
        "role": ADMIN_ROLE,
        "token_type": "bearer"
    }
