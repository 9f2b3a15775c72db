from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from careercode.database import get_db
from careercode.repositories.application import ApplicationRepository
from careercode.repositories.job import JobRepository


def get_job_repository(
    request: Request,
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> JobRepository:
    settings = request.app.state.settings
    return JobRepository(db, atomic_increment=settings.atomic_application_count)


def get_application_repository(
    db: AsyncIOMotorDatabase = Depends(get_db),
    jobs: JobRepository = Depends(get_job_repository),
) -> ApplicationRepository:
    return ApplicationRepository(db, jobs)
