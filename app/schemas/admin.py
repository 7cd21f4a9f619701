from pydantic import BaseModel, EmailStr, Field

class AdminBase(BaseModel):
    name: str
    email: EmailStr

    class Config:
        from_attributes = True


class AdminCreate(AdminBase):
    password: str = Field(min_length=6)


class AdminLogin(BaseModel):
    email: EmailStr
    password: str


class AdminOut(AdminBase):
    id: int


class TokenOut(BaseModel):
    access_token: str
    role: str
    token_type: str = "bearer"
