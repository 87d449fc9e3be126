import config


def test_env_number_reads_value(monkeypatch):
    monkeypatch.setenv("EMI_TEST_VALUE", "7.25")
    assert config._env_number("EMI_TEST_VALUE", 1.0) == 7.25


def test_env_number_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("EMI_TEST_VALUE", "lots")
    assert config._env_number("EMI_TEST_VALUE", 20, int) == 20


def test_env_number_missing(monkeypatch):
    monkeypatch.delenv("EMI_TEST_VALUE", raising=False)
    assert config._env_number("EMI_TEST_VALUE", 30, int) == 30
