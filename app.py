from fastapi import FastAPI

from job_scraper_pkg.models import AdzunaRequest, CrawlRequest
from job_scraper_pkg.scraper_logging import setup_logging
from scraper import import_adzuna_jobs, scrape_boss_jobs

setup_logging()

app = FastAPI(title="Job Posting Scraper")


@app.post("/scrape/boss")
async def scrape_boss(data: CrawlRequest):
    return await scrape_boss_jobs(data)


@app.post("/import/adzuna")
async def import_adzuna(data: AdzunaRequest):
    return await import_adzuna_jobs(data)


@app.get("/health")
def health(): return {"status": "ok"}


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host=os.environ.get("APP_HOST", "127.0.0.1"), port=int(os.environ.get("APP_PORT", "8787")))
