from typing import Dict, Iterable, List, Optional

from gulfjobs.services.models import ALL, FilterCriteria, JobPosting


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle in haystack.lower()


def matches(job: JobPosting, criteria: FilterCriteria) -> bool:
    """True when the job satisfies the free-text term and both selectors."""

    term = criteria.term.lower()
    matches_search = (
        _contains(job.title, term)
        or _contains(job.company, term)
        or _contains(job.city, term)
    )
    matches_country = criteria.country == ALL or job.country == criteria.country
    matches_category = criteria.category == ALL or job.category == criteria.category

    return matches_search and matches_country and matches_category


def filter_jobs(jobs: Iterable[JobPosting], criteria: FilterCriteria) -> List[JobPosting]:
    """Return the matching jobs in their original order."""

    return [job for job in jobs if matches(job, criteria)]


def filter_options(jobs: Iterable[JobPosting]) -> Dict[str, List[str]]:
    """Distinct countries and categories, first-seen order, for the selectors."""

    countries: Dict[str, None] = {}
    categories: Dict[str, None] = {}
    for job in jobs:
        if job.country:
            countries.setdefault(job.country)
        if job.category:
            categories.setdefault(job.category)

    return {"countries": list(countries), "categories": list(categories)}
