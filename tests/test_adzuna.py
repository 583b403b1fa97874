import httpx
import pytest
from conftest import FakeStore

from job_scraper_pkg import adzuna
from job_scraper_pkg.errors import SetupError
from job_scraper_pkg.models import AdzunaRequest
from job_scraper_pkg.skills import SkillExtractor
from scraper import import_adzuna_jobs

PAYLOAD = {
    "results": [
        {
            "title": "Python Developer",
            "company": {"display_name": "Acme Ltd"},
            "location": {"display_name": "London, UK"},
            "description": "Flask, React and Docker experience wanted",
            "salary_min": 45000,
            "salary_max": 60000.5,
        },
        {
            "title": "Java Engineer",
            "description": "",
            "salary_min": 50000,
        },
    ]
}


def _client(payload=PAYLOAD, status=200, seen=None) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "low, high, expected",
    [
        (30000, 40000, "30000-40000"),
        (30000.0, 30000.0, "30000"),
        (30000, None, "30000+"),
        (None, 42000.5, "up to 42000.5"),
        (None, None, ""),
    ],
)
def test_salary_text(low, high, expected):
    assert adzuna.salary_text(low, high) == expected


def test_map_result_uses_title_when_description_is_empty():
    job = adzuna.map_result({"title": "Java Engineer", "description": ""}, SkillExtractor())
    assert job.source == "adzuna"
    assert job.company == "" and job.location == ""
    assert job.skills == ["Java"]


@pytest.mark.asyncio
async def test_fetch_jobs_builds_request_and_maps_results():
    seen = []
    async with _client(seen=seen) as client:
        jobs = await adzuna.fetch_jobs(AdzunaRequest(country="gb", query="developer"), client=client)

    request = seen[0]
    assert request.url.path == "/v1/api/jobs/gb/search/1"
    assert request.url.params["what"] == "developer"
    assert request.url.params["content-type"] == "application/json"
    assert [j.title for j in jobs] == ["Python Developer", "Java Engineer"]
    assert jobs[0].company == "Acme Ltd"
    assert jobs[0].location == "London, UK"
    assert jobs[0].salary == "45000-60000.5"
    assert jobs[0].skills == ["React", "Docker"]
    assert jobs[1].salary == "50000+"
    assert jobs[1].salary_max is None


@pytest.mark.asyncio
async def test_http_error_is_a_setup_error():
    async with _client(payload={"error": "unauthorised"}, status=401) as client:
        with pytest.raises(SetupError):
            await adzuna.fetch_jobs(AdzunaRequest(), client=client)


@pytest.mark.asyncio
async def test_import_runner_writes_one_batch_and_closes_store():
    store = FakeStore()
    async with _client() as client:
        result = await import_adzuna_jobs(AdzunaRequest(), store=store, client=client)

    assert result["found"] is True
    assert result["inserted"] == 2
    assert len(store.insert_calls) == 1
    assert store.close_calls == 1


@pytest.mark.asyncio
async def test_import_runner_reports_source_failure():
    store = FakeStore()
    async with _client(status=500) as client:
        result = await import_adzuna_jobs(AdzunaRequest(), store=store, client=client)

    assert result["state"] == "failed"
    assert store.insert_calls == []
    assert store.close_calls == 1
