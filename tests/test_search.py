from gulfjobs.services.models import FilterCriteria, JobPosting
from gulfjobs.services.search import filter_jobs, filter_options, matches


def _jobs(job_factory):
    return [
        JobPosting.model_validate(job_factory(1, title="Heavy Truck Driver", company="Al Futtaim", country="UAE", city="Dubai", category="Driver")),
        JobPosting.model_validate(job_factory(2, title="Hotel Receptionist", company="Rotana", country="Qatar", city="Doha", category="Hospitality")),
        JobPosting.model_validate(job_factory(3, title="Cleaner", company="Emrill", country="Bahrain", city=None, category="Cleaning")),
        JobPosting.model_validate(job_factory(4, title="Cook", company="Marriott Doha", country="Qatar", city="Doha", category="Hospitality")),
    ]


def test_empty_criteria_is_identity(job_factory):
    """No term and both selectors on "all" returns every job in order"""
    jobs = _jobs(job_factory)

    assert filter_jobs(jobs, FilterCriteria()) == jobs


def test_filter_never_fabricates_or_duplicates(job_factory):
    jobs = _jobs(job_factory)

    for criteria in [
        FilterCriteria(term="doha"),
        FilterCriteria(country="Qatar"),
        FilterCriteria(term="o", category="Hospitality"),
        FilterCriteria(term="nothing-matches"),
    ]:
        result = filter_jobs(jobs, criteria)
        ids = [job.id for job in result]
        assert len(ids) == len(set(ids))
        assert all(job in jobs for job in result)


def test_search_is_case_insensitive(job_factory):
    jobs = _jobs(job_factory)

    result = filter_jobs(jobs, FilterCriteria(term="driver"))
    assert [job.title for job in result] == ["Heavy Truck Driver"]

    result = filter_jobs(jobs, FilterCriteria(term="ROTANA"))
    assert [job.company for job in result] == ["Rotana"]


def test_search_matches_city(job_factory):
    jobs = _jobs(job_factory)

    result = filter_jobs(jobs, FilterCriteria(term="doha"))
    assert {job.id for job in result} == {"job-2", "job-4"}


def test_missing_city_is_skipped(job_factory):
    job = JobPosting.model_validate(job_factory(9, title="Cleaner", company="Emrill", city=None))

    assert matches(job, FilterCriteria(term="clean"))
    assert not matches(job, FilterCriteria(term="dubai"))


def test_country_and_category_selectors(job_factory):
    jobs = _jobs(job_factory)

    assert [job.id for job in filter_jobs(jobs, FilterCriteria(country="Qatar"))] == ["job-2", "job-4"]
    assert [job.id for job in filter_jobs(jobs, FilterCriteria(category="Cleaning"))] == ["job-3"]
    assert filter_jobs(jobs, FilterCriteria(country="Qatar", category="Driver")) == []


def test_selectors_compare_exactly(job_factory):
    jobs = _jobs(job_factory)

    assert filter_jobs(jobs, FilterCriteria(country="qatar")) == []


def test_filter_options_first_seen_order(job_factory):
    options = filter_options(_jobs(job_factory))

    assert options["countries"] == ["UAE", "Qatar", "Bahrain"]
    assert options["categories"] == ["Driver", "Hospitality", "Cleaning"]


def test_filter_over_empty_list():
    assert filter_jobs([], FilterCriteria(term="driver")) == []
    assert filter_options([]) == {"countries": [], "categories": []}
