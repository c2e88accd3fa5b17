import io
from datetime import datetime

import pytest
from sqlalchemy import inspect

from store import ScoreStore


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'scores.db'}"


@pytest.fixture
def store(db_url):
    s = ScoreStore(db_url)
    assert s.initialize() is True
    yield s
    s.close()


def test_initialize_is_idempotent(db_url):
    s = ScoreStore(db_url)
    try:
        assert s.initialize() is True
        assert s.initialize() is True
        assert s.initialize() is True
        cols = {c["name"] for c in inspect(s._engine).get_columns("Scores")}
        assert cols == {"id", "totalQuestions", "correctAnswers", "percentage", "timestamp"}
    finally:
        s.close()


def test_save_zero_writes_nothing(store, capsys):
    before = store.list_all()
    assert store.save(0, 0) is None
    assert store.list_all() == before
    assert "No questions answered. Score will not be saved." in capsys.readouterr().out


def test_save_five_three(store, capsys):
    store.save(2, 2)
    rec = store.save(5, 3)
    assert rec is not None
    assert rec.total_questions == 5 and rec.correct_answers == 3
    assert rec.percentage == pytest.approx(60.0)
    assert isinstance(rec.timestamp, datetime)
    assert "Score saved successfully." in capsys.readouterr().out

    rows = store.list_all()
    assert [r.id for r in rows] == sorted((r.id for r in rows), reverse=True)
    assert rows[0].id == rec.id
    assert len(rows) == 2


def test_list_all_empty(store):
    assert store.list_all() == []


def test_records_survive_reopen(db_url):
    first = ScoreStore(db_url)
    first.initialize()
    first.save(4, 1)
    first.close()

    second = ScoreStore(db_url)
    try:
        second.initialize()
        rows = second.list_all()
        assert len(rows) == 1
        assert rows[0].percentage == pytest.approx(25.0)
    finally:
        second.close()


@pytest.mark.parametrize("total, correct", [(-1, 0), (3, 4), (3, -1)])
def test_save_rejects_inconsistent_counts(store, total, correct):
    with pytest.raises(ValueError):
        store.save(total, correct)


def test_unreachable_database_degrades(tmp_path):
    err = io.StringIO()
    s = ScoreStore(f"sqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}", err=err)
    assert s.initialize() is False
    assert s.save(3, 1) is None
    assert s.list_all() == []
    s.close()
    msgs = err.getvalue()
    assert "Error initializing the database" in msgs
    assert "Error saving score to database" in msgs
    assert "Error retrieving scores" in msgs


def test_bad_url_is_reported_not_raised():
    err = io.StringIO()
    s = ScoreStore("definitely not a url", err=err)
    assert "Error connecting to the database" in err.getvalue()
    assert s.initialize() is False
    assert s.list_all() == []
    s.close()


def test_close_is_idempotent_and_final(db_url):
    err = io.StringIO()
    s = ScoreStore(db_url, err=err)
    s.initialize()
    s.close()
    s.close()
    assert s.closed is True
    assert s.save(1, 1) is None
    assert "connection is closed" in err.getvalue()
