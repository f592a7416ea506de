import pytest

from pokedex_proxy.config import DEFAULT_PORT, ServiceConfig, load_config


class TestLoadConfig:
    """Test suite for configuration loading"""

    @pytest.fixture
    def config_file(self, tmp_path):
        """Create a config file with non-default values"""
        config_content = """
server:
  host: "127.0.0.1"
  port: 8080
  log_level: DEBUG

pokeapi:
  base_url: "http://localhost:9000/api/v2/pokemon"
  request_timeout_s: 5
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)
        return config_file

    def test_defaults_without_file_or_env(self, tmp_path):
        """
        Test: Loading with an empty config file and no environment
        How: Point at an empty YAML file
        Ensures: Built-in defaults apply, including no outbound timeout
        """
        empty = tmp_path / "empty.yaml"
        empty.write_text("")

        config = load_config(empty, environ={})

        assert config == ServiceConfig()
        assert config.port == DEFAULT_PORT
        assert config.request_timeout_s is None
        assert config.pokeapi_base_url == "https://pokeapi.co/api/v2/pokemon/"

    def test_yaml_values(self, config_file):
        config = load_config(config_file, environ={})

        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.log_level == "debug"
        assert config.pokeapi_base_url == "http://localhost:9000/api/v2/pokemon/"
        assert config.request_timeout_s == 5.0

    def test_env_overrides_yaml(self, config_file):
        environ = {
            "PORT": "4321",
            "HOST": "0.0.0.0",
            "POKEAPI_BASE_URL": "https://mirror.example/pokemon/",
            "POKEAPI_TIMEOUT_S": "1.5",
            "LOG_LEVEL": "warning",
        }

        config = load_config(config_file, environ=environ)

        assert config.port == 4321
        assert config.host == "0.0.0.0"
        assert config.pokeapi_base_url == "https://mirror.example/pokemon/"
        assert config.request_timeout_s == 1.5
        assert config.log_level == "warning"

    def test_empty_env_values_are_ignored(self, config_file):
        config = load_config(config_file, environ={"PORT": ""})
        assert config.port == 8080

    def test_config_path_from_env(self, config_file):
        config = load_config(environ={"POKEDEX_CONFIG": str(config_file)})
        assert config.port == 8080

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_missing_env_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(environ={"POKEDEX_CONFIG": str(tmp_path / "nope.yaml")})

    @pytest.mark.parametrize("environ, message", [
        ({"PORT": "abc"}, "Invalid port"),
        ({"PORT": "70000"}, "out of range"),
        ({"POKEAPI_TIMEOUT_S": "0"}, "must be positive"),
        ({"POKEAPI_TIMEOUT_S": "soon"}, "Invalid request timeout"),
        ({"POKEAPI_BASE_URL": "ftp://pokeapi.co/"}, "http"),
        ({"LOG_LEVEL": "chatty"}, "Unknown log level"),
    ])
    def test_invalid_values(self, tmp_path, environ, message):
        empty = tmp_path / "empty.yaml"
        empty.write_text("")

        with pytest.raises(ValueError, match=message):
            load_config(empty, environ=environ)

    def test_non_mapping_yaml_rejected(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(bad, environ={})
