#!/usr/bin/env python
"""
Seed the SQL backend with sample Gulf job postings.

Usage:
    DATABASE_URL=sqlite+aiosqlite:///./gulfjobs.db python scripts/seed_jobs.py
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone

sys.path.insert(0, '.')

from gulfjobs.database.operations import Database


def sample_jobs():
    now = datetime.now(timezone.utc)
    rows = [
        ("Heavy Truck Driver", "Al Futtaim Logistics", "UAE", "Dubai", "Driver", "3500", "AED", 12),
        ("Light Vehicle Driver", "Careem Fleet", "UAE", "Abu Dhabi", "Driver", "3000", "AED", 20),
        ("Hotel Receptionist", "Rotana Hotels", "Qatar", "Doha", "Hospitality", "4000", "QAR", 4),
        ("Waiter / Waitress", "Marriott Doha", "Qatar", "Doha", "Hospitality", "2500", "QAR", 15),
        ("Construction Helper", "Saudi Binladin Group", "Saudi Arabia", "Riyadh", "Construction", "1500", "SAR", 50),
        ("Electrician", "Nesma & Partners", "Saudi Arabia", "Jeddah", "Construction", "2800", "SAR", 10),
        ("Security Guard", "G4S Kuwait", "Kuwait", "Kuwait City", "Security", "180", "KWD", 25),
        ("Cleaner", "Emrill Services", "Bahrain", None, "Cleaning", "180", "BHD", 30),
        ("Cook", "Americana Foods", "Oman", "Muscat", "Hospitality", "250", "OMR", 6),
        ("Warehouse Assistant", "Aramex", "UAE", "Sharjah", "Logistics", "2200", "AED", 8),
    ]

    jobs = []
    for index, (title, company, country, city, category, salary, currency, positions) in enumerate(rows, start=1):
        jobs.append({
            "id": f"job-{index:03d}",
            "title": title,
            "company": company,
            "country": country,
            "city": city,
            "category": category,
            "experience": "1-2 years",
            "type": "Full-time",
            "salary": salary,
            "currency": currency,
            "positions": positions,
            "deadline": (now + timedelta(days=30)).date(),
            "description": f"{company} is hiring a {title.lower()} in {city or country}. Visa and ticket provided.",
            "requirements": {"items": ["Valid passport", "Basic English"]},
            "benefits": {"items": ["Free accommodation", "Transport", "Medical insurance"]},
            "posted_at": now - timedelta(days=index),
        })
    return jobs


async def seed():
    db = Database()
    await db.connect()
    try:
        stats = await db.save_jobs(sample_jobs())
        print(f"Seeded jobs: new={stats['new']} updated={stats['updated']}")
    finally:
        await db.disconnect()


if __name__ == "__main__":
    asyncio.run(seed())
