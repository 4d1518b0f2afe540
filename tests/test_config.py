from pass_client.config import ISS_NORAD_ID, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.satellite_id == ISS_NORAD_ID
    assert settings.service_url.endswith("/api/passes")
    assert settings.request_timeout is None


def test_environment_overrides():
    settings = Settings.from_env({
        "PASS_CLIENT_SERVICE_URL": "http://localhost:3000/api/passes",
        "PASS_CLIENT_REQUEST_TIMEOUT": "15",
        "PASS_CLIENT_PORT": "9000",
        "UNRELATED": "x",
    })
    assert settings.service_url == "http://localhost:3000/api/passes"
    assert settings.request_timeout == 15.0
    assert settings.port == 9000


def test_blank_timeout_means_none():
    settings = Settings.from_env({"PASS_CLIENT_REQUEST_TIMEOUT": ""})
    assert settings.request_timeout is None
