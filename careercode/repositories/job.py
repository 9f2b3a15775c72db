from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from careercode.repositories.base import serialize, to_object_id
from careercode.utils.errors import NotFound


class JobRepository:
    """Job postings stored in the `jobs` collection."""

    def __init__(self, db: AsyncIOMotorDatabase, atomic_increment: bool = False):
        self.collection = db.jobs
        self.atomic_increment = atomic_increment

    async def list_jobs(self, email: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {"hr_email": email} if email else {}
        jobs = await self.collection.find(query).to_list(length=None)
        return [serialize(job) for job in jobs]

    async def find_job(self, job_id: Any) -> Optional[Dict[str, Any]]:
        """Raw lookup; None when the id does not resolve."""
        return await self.collection.find_one({"_id": to_object_id(job_id, "job ID")})

    async def get_job(self, job_id: str) -> Dict[str, Any]:
        job = await self.find_job(job_id)
        if not job:
            raise NotFound("Job not found")
        return serialize(job)

    async def create_job(self, job: Dict[str, Any]) -> str:
        result = await self.collection.insert_one(dict(job))
        return str(result.inserted_id)

    async def increment_application_count(self, job_id: Any) -> Optional[int]:
        """Bump `applicationCount` by one and return the new value.

        The default path reads the job and writes back count + 1, so two
        concurrent calls can both read the same count and one increment is
        lost. With `atomic_increment` a single `$inc` is issued instead.
        Returns None when the job does not exist.
        """
        object_id = to_object_id(job_id, "job ID")

        if self.atomic_increment:
            job = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$inc": {"applicationCount": 1}},
                return_document=ReturnDocument.AFTER,
            )
            return job["applicationCount"] if job else None

        job = await self.collection.find_one({"_id": object_id})
        if not job:
            return None

        new_count = (job.get("applicationCount") or 0) + 1
        await self.collection.update_one(
            {"_id": object_id},
            {"$set": {"applicationCount": new_count}},
        )
        return new_count
