import pytest
from pydantic import ValidationError

from item_parser.config import ConfigLoader, ParserConfig
from item_parser.config import settings
from item_parser.domain.exceptions import ParsingConfigurationError


MOCK_CONFIG_YAML = """
stopwords:
  - Knife
  - ' Rope '

list_labels:
  - Loot

default_separator: " | "
min_name_length: 3
max_input_length: 500
"""


@pytest.fixture
def config_file(tmp_path):
    """Creates a temporary parser.yaml."""
    path = tmp_path / "parser.yaml"
    path.write_text(MOCK_CONFIG_YAML, encoding="utf-8")
    return path


def test_load_packaged_config():
    config = ConfigLoader.load(settings.CONFIG_DIR / "parser.yaml")
    assert "the" in config.stopwords
    assert "On Person" in config.list_labels
    assert config.default_separator == ", "
    assert config.min_name_length == 2


def test_load_custom_config(config_file):
    config = ConfigLoader.load(config_file)
    assert config.stopwords == ("knife", "rope")
    assert config.stopword_set == frozenset({"knife", "rope"})
    assert config.list_labels == ("Loot",)
    assert config.default_separator == " | "
    assert config.min_name_length == 3
    assert config.max_input_length == 500


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = ConfigLoader.load(tmp_path / "missing.yaml")
    assert config == ParserConfig()
    assert config.stopwords == settings.FALLBACK_STOPWORDS


def test_empty_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "parser.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader.load(path) == ParserConfig()


@pytest.mark.parametrize("content", [
    "stopwords: [a, b",
    "- just\n- a list\n",
    "min_name_length: abc\n",
    "max_input_length: 0\n",
    "list_labels: []\n",
])
def test_broken_config_raises(tmp_path, content):
    path = tmp_path / "parser.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ParsingConfigurationError) as exc_info:
        ConfigLoader.load(path)
    assert "ConfigLoader" in str(exc_info.value)


def test_config_is_frozen():
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.min_name_length = 5
