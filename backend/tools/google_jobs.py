"""
Job listings search via the Google Jobs API.

Results are cached per query so repeated searches (paging back, refreshes)
do not hit the provider again within ``settings.search_cache_ttl``.
"""

import logging
import threading
from typing import Any

import httpx
from cachetools import TTLCache

from backend.config import settings
from backend.errors import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)

# (query, location, radius, filters, page_token) -> normalized result
_search_cache: TTLCache = TTLCache(maxsize=settings.search_cache_size, ttl=settings.search_cache_ttl)
# Searches run in the threadpool; TTLCache is not thread-safe
_search_cache_lock = threading.Lock()


def clear_search_cache() -> None:
    with _search_cache_lock:
        _search_cache.clear()


def search_jobs(
    query: str,
    location: str,
    radius: int = 25,
    filters: dict[str, Any] | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    """
    Search job postings.

    Args:
        query: Search query (e.g., "React developer")
        location: City or region
        radius: Search radius in miles
        filters: Optional work_type, date_posted, min_salary, max_salary
        page_token: Token of the page to fetch

    Returns:
        {"jobs": [normalized postings], "total_count": int, "next_page_token": str | None}
    """
    if not settings.google_jobs_api_key:
        raise ConfigurationError("Google Jobs API key not configured")

    params = _build_params(query, location, radius, filters or {}, page_token)
    cache_key = tuple(sorted(params.items()))
    with _search_cache_lock:
        cached = _search_cache.get(cache_key)
    if cached is not None:
        logger.debug("Job search cache hit: %s", query)
        return cached

    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {settings.google_jobs_api_key}",
    }
    try:
        with httpx.Client(timeout=settings.search_timeout) as client:
            response = client.get(settings.google_jobs_api_url, headers=headers, params=params)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.warning("Job search HTTP error: %s", e.response.status_code)
        raise ExternalServiceError(f"Job search failed: HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Job search error: %s", e)
        raise ExternalServiceError("Job search failed") from e

    postings = data.get("matchingJobs") or data.get("jobs") or []
    jobs = [normalize_job(p) for p in postings if isinstance(p, dict)]
    jobs = [j for j in jobs if j["title"] and j["company"]]

    result = {
        "jobs": jobs,
        "total_count": int(data.get("totalSize") or data.get("total_count") or len(jobs)),
        "next_page_token": data.get("nextPageToken") or None,
    }
    with _search_cache_lock:
        _search_cache[cache_key] = result
    return result


def _build_params(
    query: str,
    location: str,
    radius: int,
    filters: dict[str, Any],
    page_token: str | None,
) -> dict[str, str]:
    params = {"query": query, "location": location, "radius": str(radius)}

    work_type = filters.get("work_type")
    if work_type and work_type != "all":
        params["workType"] = work_type

    date_posted = filters.get("date_posted")
    if date_posted and date_posted != "all":
        params["datePosted"] = date_posted

    if filters.get("min_salary"):
        params["minSalary"] = str(filters["min_salary"])
    if filters.get("max_salary"):
        params["maxSalary"] = str(filters["max_salary"])

    if page_token:
        params["pageToken"] = page_token
    return params


def normalize_job(data: dict) -> dict:
    """Normalize a posting to the stored job fields.

    Accepts the API's ``{"job": {...}}`` envelope as well as flat postings.
    """
    job = data.get("job") if isinstance(data.get("job"), dict) else data

    addresses = job.get("addresses") or []
    location = job.get("location", "") or (addresses[0] if addresses else "")

    application_info = job.get("applicationInfo") or {}
    uris = application_info.get("uris") or []

    return {
        "title": job.get("title", "") or job.get("job_title", ""),
        "company": job.get("company", "") or job.get("companyDisplayName", "") or job.get("company_name", ""),
        "location": str(location),
        "description": job.get("description", ""),
        "requirements": _join(job.get("requirements") or job.get("qualifications") or ""),
        "salary": _normalize_salary(job),
        "application_url": job.get("application_url", "") or job.get("applicationUrl", "") or (uris[0] if uris else ""),
        "source": "google",
    }


def _join(value: Any) -> str:
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)


def _normalize_salary(job: dict) -> dict | None:
    salary = job.get("salary")
    if isinstance(salary, dict) and ("min" in salary or "max" in salary):
        return {"min": salary.get("min"), "max": salary.get("max")}

    # compensationInfo.entries[].range.{minCompensation,maxCompensation}.units
    entries = (job.get("compensationInfo") or {}).get("entries") or []
    for entry in entries:
        rng = entry.get("range") or {}
        low = (rng.get("minCompensation") or {}).get("units")
        high = (rng.get("maxCompensation") or {}).get("units")
        if low or high:
            return {"min": int(low) if low else None, "max": int(high) if high else None}
    return None
