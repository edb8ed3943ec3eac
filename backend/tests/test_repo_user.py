from exercise_tracker.repositories.user_repo import UserRepository
import uuid

def uniq_name():
    return f"user_{uuid.uuid4().hex[:8]}"

def test_user_repo_create_and_get(db):
    repo = UserRepository(db)
    name = uniq_name()
    result = repo.create(username=name)
    assert not result.duplicate
    u = result.entity
    assert u.id and u.username == name
    assert len(u.id) == 32
    assert repo.get(u.id).username == name
    assert repo.get_by_username(name).id == u.id

def test_user_repo_unique_username_reports_duplicate(db):
    repo = UserRepository(db)
    name = uniq_name()
    first = repo.create(username=name)
    second = repo.create(username=name)
    assert second.duplicate
    assert second.entity is None
    # session is still usable after the rollback
    assert repo.get_by_username(name).id == first.entity.id

def test_user_repo_list_and_missing(db):
    repo = UserRepository(db)
    names = {uniq_name() for _ in range(3)}
    for n in names:
        repo.create(username=n)
    assert {u.username for u in repo.list()} == names
    assert repo.get("does-not-exist") is None
