from pydantic import BaseModel, ConfigDict


# Identity encoded into the session token; everything sent is kept.
class SessionIdentity(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str


class SuccessResponse(BaseModel):
    success: bool = True
