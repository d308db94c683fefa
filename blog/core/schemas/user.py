from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    id: str
    email: str
    user_name: str
    model_config = ConfigDict(from_attributes=True)
