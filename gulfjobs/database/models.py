from sqlalchemy import Column, String, Text, DateTime, Date, JSON, Index, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from gulfjobs.utils.config import settings

Base = declarative_base()


class JobPostingRow(Base):
    __tablename__ = settings.jobs_table

    # ── Identity ──
    id = Column(String(100), primary_key=True)

    # ── Core Job Info ──
    title = Column(String(500), nullable=False, index=True)
    company = Column(String(255), nullable=False, index=True)
    description = Column(Text)

    # ── Location ──
    country = Column(String(100))
    city = Column(String(200))  # optional

    # ── Employment Details ──
    category = Column(String(100))  # driver / hospitality / construction / ...
    experience = Column(String(100))  # free text, e.g. "2+ years"
    type = Column(String(50))  # Full-time / Part-time / Contract

    # ── Compensation ──
    salary = Column(String(50))  # not guaranteed numeric
    currency = Column(String(10))
    positions = Column(Integer, default=1)

    # ── Requirements & Benefits ──
    requirements = Column(JSON)  # {"items": [...]}
    benefits = Column(JSON)  # {"items": [...]}

    # ── Dates ──
    deadline = Column(Date)
    posted_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_jobs_posted_at", "posted_at"),
        Index("idx_jobs_country_category", "country", "category"),
    )


class ApplicationRow(Base):
    __tablename__ = settings.applications_table

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(String(100), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    message = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
