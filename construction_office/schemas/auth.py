from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class Identity(BaseModel):
    id: int
    username: str


class LogoutResponse(BaseModel):
    success: bool = True
