#!/usr/bin/env python
"""
Data validation and quality checks for the job postings relation.

Usage:
    python scripts/validate_data.py
"""

import asyncio
import sys
from collections import Counter
from datetime import date, datetime, timezone

sys.path.insert(0, '.')

from gulfjobs.services.job_store import JobStore
from gulfjobs.services.search import filter_options
from gulfjobs.sources.factory import build_source


async def validate_data():
    """Load postings the way the site does and report on them"""

    print("=" * 60)
    print("JOB POSTINGS VALIDATION REPORT")
    print("=" * 60)
    print(f"Generated: {datetime.now(timezone.utc).isoformat()}\n")

    source = build_source()
    await source.connect()
    try:
        listing = await JobStore(source).load_jobs()
    finally:
        await source.disconnect()

    if listing.failed:
        print(f"❌ {listing.error}")
        return

    jobs = listing.jobs
    print(f"📊 Total Jobs: {len(jobs):,}")
    if not jobs:
        print("\n⚠️  WARNING: No jobs found!")
        return

    print("\n" + "=" * 60)
    print("JOBS BY COUNTRY")
    print("=" * 60)
    for country, count in Counter(job.country or "(none)" for job in jobs).most_common():
        print(f"  {country:20s}: {count:5,}")

    print("\n" + "=" * 60)
    print("JOBS BY CATEGORY")
    print("=" * 60)
    for category, count in Counter(job.category or "(none)" for job in jobs).most_common():
        print(f"  {category:20s}: {count:5,}")

    print("\n" + "=" * 60)
    print("DATA QUALITY")
    print("=" * 60)
    today = date.today()
    checks = {
        "missing city": sum(1 for job in jobs if not job.city),
        "missing salary": sum(1 for job in jobs if not job.salary),
        "no requirements": sum(1 for job in jobs if not job.requirements),
        "no benefits": sum(1 for job in jobs if not job.benefits),
        "no deadline": sum(1 for job in jobs if job.deadline is None),
        "deadline passed": sum(1 for job in jobs if job.deadline and job.deadline < today),
    }
    for label, count in checks.items():
        marker = "✅" if count == 0 else "⚠️ "
        print(f"  {marker} {label:18s}: {count:5,}")

    options = filter_options(jobs)
    print(f"\nSelectors: {len(options['countries'])} countries, {len(options['categories'])} categories")


if __name__ == "__main__":
    asyncio.run(validate_data())
