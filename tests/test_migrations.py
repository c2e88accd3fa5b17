from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, inspect

from store import ScoreStore

INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def test_single_alembic_head():
    script = ScriptDirectory.from_config(Config(str(INI)))
    assert list(script.get_heads()) == ["0001_scores"]


def test_upgrade_matches_initialize(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config(str(INI))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        cols = {c["name"] for c in inspect(engine).get_columns("Scores")}
    finally:
        engine.dispose()
    assert cols == {"id", "totalQuestions", "correctAnswers", "percentage", "timestamp"}

    # store on top of a migrated database: create_all is a no-op, writes still work
    s = ScoreStore(url)
    try:
        assert s.initialize() is True
        assert s.save(5, 3).percentage == 60.0
    finally:
        s.close()
