from backoffice import models
from backoffice.crud import crud_counter


def test_counter_starts_at_one(db):
    assert crud_counter.next_value(db, crud_counter.JOB) == 1
    assert crud_counter.next_value(db, crud_counter.JOB) == 2
    db.commit()
    assert db.get(models.Counter, "job").value == 2


def test_counters_are_independent(db):
    crud_counter.next_value(db, crud_counter.JOB)
    crud_counter.next_value(db, crud_counter.JOB)
    assert crud_counter.next_value(db, crud_counter.BUDGET) == 1


def test_seed_is_used_only_once(db):
    seeds = []

    def seed():
        seeds.append(1)
        return 99

    assert crud_counter.next_value(db, crud_counter.BUDGET, seed=seed) == 100
    assert crud_counter.next_value(db, crud_counter.BUDGET, seed=seed) == 101
    assert seeds == [1]


def test_rollback_releases_the_number(db):
    crud_counter.next_value(db, crud_counter.JOB)
    db.commit()
    crud_counter.next_value(db, crud_counter.JOB)
    db.rollback()
    assert crud_counter.next_value(db, crud_counter.JOB) == 2
