from typing import Optional, Union

from pydantic import BaseModel

# --------------------------
# Auth
# --------------------------
class RegisterIn(BaseModel):
    name: str
    email: str
    password: str

class LoginIn(BaseModel):
    email: str
    password: str

# --------------------------
# Donors
# --------------------------
class DonorIn(BaseModel):
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    amount: Union[int, float]

# --------------------------
# Comments
# --------------------------
class CommentIn(BaseModel):
    comments: str
    email: str
