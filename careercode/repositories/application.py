import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from careercode.repositories.base import serialize, to_object_id
from careercode.repositories.job import JobRepository
from careercode.utils.auth import authorize_ownership
from careercode.utils.errors import InvalidIdentifier

logger = logging.getLogger(__name__)

# Job fields copied onto each application when listing an applicant's submissions.
ENRICHED_JOB_FIELDS = ("company", "jobType", "category", "location")


class ApplicationRepository:
    """Job applications stored in the `applications` collection.

    Applications point at their job through `job_id`, the job's id as a hex
    string. Nothing checks that reference on write, so readers must expect it
    to dangle.
    """

    def __init__(self, db: AsyncIOMotorDatabase, jobs: JobRepository):
        self.collection = db.applications
        self.jobs = jobs

    async def create_application(self, application: Dict[str, Any]) -> str:
        result = await self.collection.insert_one(dict(application))
        inserted_id = str(result.inserted_id)

        # The count is denormalized on the job; failing to bump it must not
        # undo the insert.
        job_id = application.get("job_id")
        try:
            count = await self.jobs.increment_application_count(job_id)
        except (InvalidIdentifier, PyMongoError) as e:
            logger.warning(f"Application {inserted_id}: could not update count for job {job_id!r}: {e}")
        else:
            if count is None:
                logger.warning(f"Application {inserted_id} references missing job {job_id!r}")

        return inserted_id

    async def list_by_applicant(self, email: str, decoded: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Applications filed under `email`, each joined with fields of its job.

        The caller's decoded identity must own `email`. Applications whose job
        cannot be found are left out.
        """
        authorize_ownership(decoded.get("email"), email)

        applications = await self.collection.find({"application_email": email}).to_list(length=None)

        result = []
        for application in applications:
            job_id = application.get("job_id")
            try:
                job = await self.jobs.find_job(job_id)
            except InvalidIdentifier:
                job = None

            if not job:  # Job might be deleted or never existed
                logger.warning(f"Skipping application {application['_id']}: job {job_id!r} not found")
                continue

            for field in ENRICHED_JOB_FIELDS:
                if field in job:
                    application[field] = job[field]
            result.append(serialize(application))

        return result

    async def list_for_job(self, job_id: str) -> List[Dict[str, Any]]:
        applications = await self.collection.find({"job_id": job_id}).to_list(length=None)
        return [serialize(application) for application in applications]

    async def update_status(self, application_id: str, status: Any) -> Dict[str, Any]:
        result = await self.collection.update_one(
            {"_id": to_object_id(application_id, "application ID")},
            {"$set": {"status": status}},
        )
        return {
            "acknowledged": result.acknowledged,
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
        }

    async def delete_application(self, application_id: str) -> Dict[str, Any]:
        result = await self.collection.delete_one({"_id": to_object_id(application_id, "application ID")})
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
