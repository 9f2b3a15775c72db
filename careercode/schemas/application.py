# ========================================
# careercode/schemas/application.py
# ========================================

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

# 1. Input: Create Application
class ApplicationCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    job_id: Any
    application_email: Optional[Any] = None
    status: Optional[Any] = None

# 2. Input: Update Status (free-form: pending, accepted, rejected, ...)
class ApplicationStatusUpdate(BaseModel):
    status: Any = None

# 3. Output: update acknowledgement
class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int

# 4. Output: delete acknowledgement
class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int
