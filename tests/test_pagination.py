import pytest

from gulfjobs.services.models import JobPosting
from gulfjobs.services.pagination import paginate, total_pages


def test_ten_jobs_seven_per_page(job_rows):
    """Page 1 holds jobs 1-7, page 2 holds jobs 8-10"""
    jobs = [JobPosting.model_validate(row) for row in job_rows]

    first = paginate(jobs, 7, 1)
    second = paginate(jobs, 7, 2)

    assert first.total_pages == 2
    assert [job.id for job in first.items] == [f"job-{i}" for i in range(1, 8)]
    assert [job.id for job in second.items] == ["job-8", "job-9", "job-10"]
    assert first.has_next and not first.has_prev
    assert second.has_prev and not second.has_next


@pytest.mark.parametrize("count,page_size", [(0, 7), (1, 7), (7, 7), (8, 7), (23, 5), (10, 3)])
def test_pages_reconstruct_sequence(count, page_size):
    items = list(range(count))
    pages = total_pages(count, page_size)

    rebuilt = []
    for number in range(1, pages + 1):
        rebuilt.extend(paginate(items, page_size, number).items)

    assert rebuilt == items


def test_empty_sequence_has_one_page():
    page = paginate([], 7, 1)

    assert page.total == 0
    assert page.total_pages == 1
    assert page.items == []
    assert not page.has_next


def test_page_number_is_clamped():
    items = list(range(10))

    assert paginate(items, 7, 5).page == 2
    assert paginate(items, 7, 5).items == [7, 8, 9]
    assert paginate(items, 7, 0).page == 1
    assert paginate(items, 7, -3).items == list(range(7))


def test_invalid_page_size():
    with pytest.raises(ValueError):
        paginate([1, 2, 3], 0, 1)
