import pytest

from jobly.core.exceptions import (
    BadRequestException,
    CompanyNotFoundException,
    DuplicateCompanyException,
    DuplicateCompanyNameException,
)
from jobly.repositories import CompanyRepository, JobRepository

companies = CompanyRepository()


def test_create(run_db, seeded):
    company = run_db(lambda db: companies.create(
        db, handle="new", name="New", description="New Description",
        num_employees=1, logo_url="http://new.img",
    ))

    assert company == {
        "handle": "new",
        "name": "New",
        "description": "New Description",
        "numEmployees": 1,
        "logoUrl": "http://new.img",
    }
    assert run_db(lambda db: companies.exists(db, "new"))


def test_create_duplicate_handle(run_db, seeded):
    with pytest.raises(DuplicateCompanyException) as exc_info:
        run_db(lambda db: companies.create(db, handle="c1", name="Other", description="x"))

    assert exc_info.value.status_code == 409


def test_create_duplicate_name(run_db, seeded):
    with pytest.raises(DuplicateCompanyNameException) as exc_info:
        run_db(lambda db: companies.create(db, handle="c4", name="C1", description="x"))

    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Duplicate company name: C1"


def test_create_duplicate_name_past_name_check(run_db, seeded, monkeypatch):
    async def never_taken(self, db, name):
        return False

    monkeypatch.setattr(CompanyRepository, "_name_taken", never_taken)

    with pytest.raises(DuplicateCompanyNameException):
        run_db(lambda db: companies.create(db, handle="c4", name="C1", description="x"))


def test_find_all_ordered_by_name(run_db, seeded):
    rows = run_db(lambda db: companies.find_all(db))

    assert [row["handle"] for row in rows] == ["c1", "c2", "c3"]
    assert rows[0] == {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


def test_find_all_name_filter_ignores_case(run_db, seeded):
    rows = run_db(lambda db: companies.find_all(db, {"name": "c2"}))

    assert [row["handle"] for row in rows] == ["c2"]


def test_find_all_employee_range(run_db, seeded):
    rows = run_db(lambda db: companies.find_all(db, {"minEmployees": 2}))
    assert [row["handle"] for row in rows] == ["c2", "c3"]

    rows = run_db(lambda db: companies.find_all(db, {"minEmployees": 2, "maxEmployees": 2}))
    assert [row["handle"] for row in rows] == ["c2"]


def test_find_all_min_greater_than_max(run_db, seeded):
    with pytest.raises(BadRequestException) as exc_info:
        run_db(lambda db: companies.find_all(db, {"minEmployees": 3, "maxEmployees": 1}))

    assert exc_info.value.message == "Min employees cannot be greater than max"


def test_get_with_jobs(run_db, seeded):
    company = run_db(lambda db: companies.get_with_jobs(db, "c1"))

    assert company["handle"] == "c1"
    assert company["jobs"] == [{
        "id": seeded["Full Stack Developer"],
        "title": "Full Stack Developer",
        "salary": 110000,
        "equity": "0.25",
    }]


def test_get_not_found(run_db, seeded):
    with pytest.raises(CompanyNotFoundException) as exc_info:
        run_db(lambda db: companies.get(db, "nope"))

    assert exc_info.value.message == "No company: nope"


def test_update(run_db, seeded):
    company = run_db(lambda db: companies.update(
        db, "c1", {"name": "New", "numEmployees": 10, "logoUrl": None},
    ))

    assert company == {
        "handle": "c1",
        "name": "New",
        "description": "Desc1",
        "numEmployees": 10,
        "logoUrl": None,
    }


def test_update_no_data(run_db, seeded):
    with pytest.raises(BadRequestException):
        run_db(lambda db: companies.update(db, "c1", {}))


def test_update_handle_rejected(run_db, seeded):
    with pytest.raises(BadRequestException) as exc_info:
        run_db(lambda db: companies.update(db, "c1", {"handle": "c9"}))

    assert exc_info.value.message == "handle cannot be changed"


def test_update_not_found(run_db, seeded):
    with pytest.raises(CompanyNotFoundException):
        run_db(lambda db: companies.update(db, "nope", {"name": "x"}))


def test_remove_takes_jobs_with_it(run_db, seeded):
    run_db(lambda db: companies.remove(db, "c1"))

    assert not run_db(lambda db: companies.exists(db, "c1"))
    titles = [job["title"] for job in run_db(lambda db: JobRepository().find_all(db))]
    assert "Full Stack Developer" not in titles


def test_remove_not_found(run_db, seeded):
    with pytest.raises(CompanyNotFoundException):
        run_db(lambda db: companies.remove(db, "nope"))
