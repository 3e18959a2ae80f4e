from student_crud.core.config import Settings


def test_database_url_built_from_postgres_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings(
        _env_file=None,
        POSTGRES_USER="crud",
        POSTGRES_PASSWORD="secret",
        POSTGRES_HOST="db",
        POSTGRES_PORT="5433",
        POSTGRES_DB="school",
    )

    assert settings.DATABASE_URL == "postgresql://crud:secret@db:5433/school"


def test_explicit_database_url_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./students.db")

    assert Settings(_env_file=None).DATABASE_URL == "sqlite:///./students.db"
