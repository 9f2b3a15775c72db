# ========================================
# careercode/schemas/job.py
# ========================================

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

# 1. Input: What the poster sends.
# Stored as-is: no field is required and no type is enforced.
class JobCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    hr_email: Optional[Any] = None
    company: Optional[Any] = None
    category: Optional[Any] = None
    jobType: Optional[Any] = None
    location: Optional[Any] = None

# 2. Output: insert acknowledgement
class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str
