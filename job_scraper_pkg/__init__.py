"""Scraper package providing modular components for the job-posting scraper.

Link discovery, detail extraction, skill tagging and persistence each live in
a small module so the crawl orchestrator in `scraper.py` stays readable.
"""
