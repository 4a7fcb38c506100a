import pytest

from logseq_graph.config import load_settings
from logseq_graph.constants import DEFAULT_API_URL, DEFAULT_PORT
from logseq_graph.exceptions import ConfigurationError


@pytest.fixture
def missing_config(tmp_path):
    return tmp_path / "absent.yaml"


def test_defaults_with_token_only(missing_config):
    """Only the token is required; everything else has a default."""
    settings = load_settings({"LOGSEQ_API_TOKEN": "secret"}, missing_config)
    assert settings.api_url == DEFAULT_API_URL
    assert settings.api_token == "secret"
    assert settings.transport == "stdio"
    assert settings.port == DEFAULT_PORT
    assert settings.log_level == "INFO"


def test_missing_token_explains_setup(missing_config):
    """A missing token raises with step-by-step setup instructions."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings({}, missing_config)
    assert "LOGSEQ_API_TOKEN" in str(exc_info.value)
    assert "HTTP APIs server" in str(exc_info.value)


def test_blank_token_is_missing(missing_config):
    with pytest.raises(ConfigurationError):
        load_settings({"LOGSEQ_API_TOKEN": "   "}, missing_config)


def test_environment_overrides_yaml(tmp_path):
    """Environment variables take precedence over the YAML file."""
    config = tmp_path / "logseq.yaml"
    config.write_text(
        "api_url: http://yaml-host:12315/\n"
        "api_token: from-yaml\n"
        "transport: http\n"
        "port: 4000\n",
        encoding="utf-8",
    )
    settings = load_settings({"LOGSEQ_API_TOKEN": "from-env", "PORT": "5000"}, config)
    assert settings.api_token == "from-env"
    assert settings.port == 5000
    assert settings.transport == "http"
    assert settings.api_url == "http://yaml-host:12315"


def test_config_path_from_environment(tmp_path):
    """LOGSEQ_CONFIG points at an alternative YAML file."""
    config = tmp_path / "custom.yaml"
    config.write_text("api_token: custom\n", encoding="utf-8")
    settings = load_settings({"LOGSEQ_CONFIG": str(config)})
    assert settings.api_token == "custom"


def test_unknown_yaml_key_rejected(tmp_path):
    config = tmp_path / "logseq.yaml"
    config.write_text("api_token: t\ngraph_dir: /notes\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="graph_dir"):
        load_settings({}, config)


def test_non_mapping_yaml_rejected(tmp_path):
    config = tmp_path / "logseq.yaml"
    config.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_settings({}, config)


def test_invalid_yaml_rejected(tmp_path):
    config = tmp_path / "logseq.yaml"
    config.write_text("api_token: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="invalid YAML"):
        load_settings({}, config)


def test_transport_is_case_insensitive(missing_config):
    settings = load_settings({"LOGSEQ_API_TOKEN": "t", "TRANSPORT": "HTTP"}, missing_config)
    assert settings.transport == "http"


@pytest.mark.parametrize(
    "env, message",
    [
        ({"TRANSPORT": "sse"}, "TRANSPORT must be one of"),
        ({"PORT": "abc"}, "PORT must be an integer"),
        ({"PORT": "70000"}, "between 1 and 65535"),
        ({"LOG_LEVEL": "chatty"}, "not a valid logging level"),
    ],
)
def test_invalid_values_rejected(missing_config, env, message):
    """Invalid transport, port or log level values are reported clearly."""
    with pytest.raises(ConfigurationError, match=message):
        load_settings({"LOGSEQ_API_TOKEN": "t", **env}, missing_config)


def test_payload_redacts_token(missing_config):
    settings = load_settings({"LOGSEQ_API_TOKEN": "secret", "LOG_LEVEL": "debug"}, missing_config)
    payload = settings.as_payload()
    assert payload["api_token"] == "***"
    assert payload["log_level"] == "DEBUG"
    assert "secret" not in str(payload)


@pytest.mark.parametrize("api_url", ["ftp://logseq.local/", "http://", "not a url"])
def test_invalid_api_url_rejected(missing_config, api_url):
    """The Logseq URL must be an http(s) URL with a host."""
    with pytest.raises(ConfigurationError, match="LOGSEQ_API_URL"):
        load_settings({"LOGSEQ_API_TOKEN": "t", "LOGSEQ_API_URL": api_url}, missing_config)


def test_https_api_url_accepted(missing_config):
    settings = load_settings(
        {"LOGSEQ_API_TOKEN": "t", "LOGSEQ_API_URL": "https://logseq.example.com:8443/"},
        missing_config,
    )
    assert settings.api_url == "https://logseq.example.com:8443"


def test_null_port_in_yaml_uses_default(tmp_path):
    """An empty port key in the YAML file means the default port."""
    config = tmp_path / "logseq.yaml"
    config.write_text("api_token: t\nport:\n", encoding="utf-8")
    settings = load_settings({}, config)
    assert settings.port == DEFAULT_PORT
