from bookshelf.settings import Settings


def test_defaults(monkeypatch):
    for name in ("BOOKSHELF_CATALOG_URL", "BOOKSHELF_FETCH_TIMEOUT", "BOOKSHELF_PORT", "BOOKSHELF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.CATALOG_URL == "https://fakerapi.it/api/v1/books"
    assert settings.FETCH_TIMEOUT is None
    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_CATALOG_URL", "http://catalog.test/books")
    monkeypatch.setenv("BOOKSHELF_FETCH_TIMEOUT", "3")
    monkeypatch.setenv("BOOKSHELF_PORT", "9000")
    monkeypatch.setenv("BOOKSHELF_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.CATALOG_URL == "http://catalog.test/books"
    assert settings.FETCH_TIMEOUT == 3.0
    assert settings.PORT == 9000
    assert settings.LOG_LEVEL == "DEBUG"


def test_malformed_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_FETCH_TIMEOUT", "soon")
    monkeypatch.setenv("BOOKSHELF_PORT", "eighty")

    settings = Settings()

    assert settings.FETCH_TIMEOUT is None
    assert settings.PORT == 8080
