"""Job listing and application endpoints."""

from pathlib import Path
from typing import Any

from jobboard.api.client import ApiClient
from jobboard.api.schemas import Application, JobListing, JobListingCreate, Page, StatusUpdate
from jobboard.services.base import clean_params, unwrap


def _file_part(handle: Any) -> Any:
    """Turn a file handle into an httpx multipart entry.

    Paths are read from disk; tuples and open binary files are passed through.
    """
    if isinstance(handle, (str, Path)):
        path = Path(handle)
        return (path.name, path.read_bytes())
    return handle


class JobService:
    """Job listings (/job-listings) and applications (/applications)."""

    def __init__(self, client: ApiClient):
        self.client = client

    # Job listings
    async def get_all_jobs(self, params: dict | None = None) -> Page[JobListing]:
        """
        Fetch one page of job listings.

        Args:
            params: Filters, sort options and the `page` number

        Returns:
            The listings with pagination metadata
        """
        payload = await self.client.get("/job-listings", params=clean_params(params))
        return Page[JobListing].model_validate(payload)

    async def get_job_by_id(self, job_id: int) -> JobListing:
        return JobListing.model_validate(unwrap(await self.client.get(f"/job-listings/{job_id}")))

    async def create_job(self, job_data: JobListingCreate) -> JobListing:
        payload = await self.client.post("/job-listings", json=job_data.model_dump(mode="json"))
        return JobListing.model_validate(unwrap(payload))

    async def update_job(self, job_id: int, job_data: JobListingCreate) -> JobListing:
        payload = await self.client.put(f"/job-listings/{job_id}", json=job_data.model_dump(mode="json"))
        return JobListing.model_validate(unwrap(payload))

    async def delete_job(self, job_id: int) -> Any:
        return await self.client.delete(f"/job-listings/{job_id}")

    # Applications
    async def apply_for_job(
        self,
        job_listing_id: int,
        cv: Any,
        cover_letter: Any = None,
        notes: str | None = None,
    ) -> Application:
        """
        Submit an application as multipart form data.

        Args:
            job_listing_id: Listing being applied for
            cv: Resume file (path, open binary file or (name, content) tuple)
            cover_letter: Optional cover letter file
            notes: Optional free-text notes

        Returns:
            The created application
        """
        data = {"job_listing_id": str(job_listing_id)}
        if notes:
            data["notes"] = notes

        files = {}
        if cv is not None:
            files["cv"] = _file_part(cv)
        if cover_letter is not None:
            files["cover_letter"] = _file_part(cover_letter)

        payload = await self.client.post("/applications", data=data, files=files or None)
        return Application.model_validate(unwrap(payload))

    async def get_applications(self, params: dict | None = None) -> Page[Application]:
        """Applications to the recruiter's listings, paged."""
        payload = await self.client.get("/applications", params=clean_params(params))
        return Page[Application].model_validate(payload)

    async def get_my_applications(self) -> list[Application]:
        """The candidate's own applications."""
        payload = unwrap(await self.client.get("/applications/my"))
        return [Application.model_validate(a) for a in payload or []]

    async def update_application_status(self, application_id: int, status: str) -> Application:
        body = StatusUpdate(status=status).model_dump()
        payload = await self.client.put(f"/applications/{application_id}/status", json=body)
        return Application.model_validate(unwrap(payload))

    async def withdraw_application(self, application_id: int) -> Any:
        return await self.client.delete(f"/applications/{application_id}")
