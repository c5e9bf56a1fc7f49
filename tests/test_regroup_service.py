# tests/test_regroup_service.py
import pytest

from app.infrastructure.repositories.group_repo import GroupRepo
from app.infrastructure.repositories.student_repo import StudentRepo
from app.services.regroup_service import RegroupService


@pytest.fixture
def service(db_session):
    return RegroupService(StudentRepo(db_session), GroupRepo(db_session), trials=20, workers=0, seed=5)


def test_regroup_persists_plan(db_session, service):
    repo = StudentRepo(db_session)
    for i in range(9):
        repo.create("uni", f"s{i}", "chess", "go")
    repo.create("uni", "lonely", "knitting", "knitting")
    repo.create("other", "elsewhere", "chess", "chess")

    result = service.regroup_university("uni")

    assert result.summary.total_students == 10
    assert result.summary.ungrouped_students == 1
    assert [len(g.members) for g in result.groups] == [5, 4]
    assert {g.interest for g in result.groups} == {"chess"}

    stored = service.list_groups("uni")
    assert [g.id for g in stored] == [g.id for g in result.groups]
    assert service.list_groups("other") == []

def test_regroup_replaces_groups(db_session, service):
    repo = StudentRepo(db_session)
    for i in range(6):
        repo.create("uni", f"s{i}", "chess")

    service.regroup_university("uni")
    second = service.regroup_university("uni")

    stored = GroupRepo(db_session).list_by_university("uni")
    assert len(stored) == 1
    assert [m.student_id for m in stored[0].members] == [m.id for m in second.groups[0].members]

def test_threaded_trials_match_in_process(db_session):
    repo = StudentRepo(db_session)
    for i in range(12):
        repo.create("uni", f"a{i}", "chess", "go")
    for i in range(2):
        repo.create("uni", f"b{i}", "go", "go")

    in_process = RegroupService(StudentRepo(db_session), GroupRepo(db_session), trials=10, workers=0, seed=3)
    threaded = RegroupService(StudentRepo(db_session), GroupRepo(db_session), trials=10, workers=3, seed=3)

    a = in_process.regroup_university("uni")
    b = threaded.regroup_university("uni")

    members = lambda r: [[m.id for m in g.members] for g in r.groups]
    assert members(a) == members(b)
    assert a.summary == b.summary

def test_blank_university_rejected(service):
    with pytest.raises(ValueError):
        service.regroup_university("")
