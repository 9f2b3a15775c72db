# ========================================
# careercode/routes/application.py
# ========================================

from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Optional

from careercode.dependencies import get_application_repository
from careercode.repositories.application import ApplicationRepository
from careercode.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    DeleteResult,
    UpdateResult,
)
from careercode.schemas.job import InsertResult
from careercode.utils.auth import verify_token

router = APIRouter(tags=["Applications"])

# ===========================
# APPLICANT ENDPOINTS
# ===========================

# ✅ 1. GET MY APPLICATIONS (session required)
@router.get("/jobApplications", response_model=List[Dict[str, Any]])
async def get_my_applications(
    email: Optional[str] = Query(None, description="Applicant email; must match the session"),
    decoded: Dict[str, Any] = Depends(verify_token),
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """Applications filed under `email`, with company, jobType, category and location of each job."""
    return await applications.list_by_applicant(email, decoded)


# ✅ 2. APPLY FOR JOB
@router.post("/jobApplications", response_model=InsertResult)
async def apply_job(
    application: ApplicationCreate,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """Store the application and bump the job's applicationCount."""
    inserted_id = await applications.create_application(application.model_dump(exclude_unset=True))
    return {"acknowledged": True, "insertedId": inserted_id}


# ✅ 3. WITHDRAW APPLICATION
# No ownership check: any caller holding the id can delete.
@router.delete("/jobApplications/{application_id}", response_model=DeleteResult)
async def withdraw_application(
    application_id: str,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    return await applications.delete_application(application_id)

# ===========================
# POSTER ENDPOINTS
# ===========================

# ✅ 4. GET APPLICATIONS FOR A JOB
# Searches by job_id, not _id. Open to unauthenticated callers.
@router.get("/jobApplications/jobs/{job_id}", response_model=List[Dict[str, Any]])
async def get_job_applications(
    job_id: str,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    return await applications.list_for_job(job_id)


# ✅ 5. UPDATE APPLICATION STATUS
@router.patch("/jobApplications/{application_id}", response_model=UpdateResult)
async def update_application_status(
    application_id: str,
    status_update: ApplicationStatusUpdate,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """Set `status` only; any value is accepted."""
    return await applications.update_status(application_id, status_update.status)
