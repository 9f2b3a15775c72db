# ========================================
# careercode/routes/job.py
# ========================================

from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Optional

from careercode.dependencies import get_job_repository
from careercode.repositories.job import JobRepository
from careercode.schemas.job import InsertResult, JobCreate

router = APIRouter()


# ✅ 1. GET ALL JOBS (optionally only one poster's)
@router.get("/jobs", response_model=List[Dict[str, Any]])
async def get_all_jobs(
    email: Optional[str] = Query(None, description="Only jobs posted by this HR email"),
    jobs: JobRepository = Depends(get_job_repository),
):
    return await jobs.list_jobs(email)


# ✅ 2. GET SINGLE JOB
@router.get("/jobs/{job_id}", response_model=Dict[str, Any])
async def get_job_details(job_id: str, jobs: JobRepository = Depends(get_job_repository)):
    """Get a specific job. 404 when it does not exist."""
    return await jobs.get_job(job_id)


# ✅ 3. POST A JOB
@router.post("/jobs", response_model=InsertResult)
async def create_job(job: JobCreate, jobs: JobRepository = Depends(get_job_repository)):
    inserted_id = await jobs.create_job(job.model_dump(exclude_unset=True))
    return {"acknowledged": True, "insertedId": inserted_id}
