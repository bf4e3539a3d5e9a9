import pytest

from depcollapse.config import CollapseConfig, View, config_from_env, get_view, parse_bool


class TestGetView:
    def test_by_value(self):
        assert get_view("collapsed") is View.COLLAPSED

    def test_dashes_and_case(self):
        assert get_view("CC-Processed") is View.CC_PROCESSED
        assert get_view("collapsed-tree") is View.COLLAPSED_TREE

    def test_unknown_lists_available(self):
        with pytest.raises(ValueError, match="Available"):
            get_view("enhanced")


class TestConfigFromEnv:
    def test_defaults(self):
        config = config_from_env({})
        assert config == CollapseConfig()
        assert config.view is View.CC_PROCESSED
        assert config.output_format == "plain"
        assert config.keep_punct

    def test_values(self):
        config = config_from_env({
            "DEPCOLLAPSE_VIEW": "basic",
            "DEPCOLLAPSE_KEEP_PUNCT": "no",
            "DEPCOLLAPSE_FORMAT": "CONLLX",
            "DEPCOLLAPSE_CHECK_CONNECTED": "1",
            "DEPCOLLAPSE_SKIP_BAD_SENTENCES": "true",
            "DEPCOLLAPSE_LOG_LEVEL": "debug",
        })
        assert config.view is View.BASIC
        assert not config.keep_punct
        assert config.output_format == "conllx"
        assert config.check_connected
        assert config.skip_bad_sentences
        assert config.log_level == "DEBUG"

    def test_bad_view(self):
        with pytest.raises(ValueError):
            config_from_env({"DEPCOLLAPSE_VIEW": "nope"})

    def test_bad_format(self):
        with pytest.raises(ValueError, match="output format"):
            config_from_env({"DEPCOLLAPSE_FORMAT": "xml"})


def test_override_ignores_none():
    config = CollapseConfig().override(keep_punct=False, output_format=None)
    assert not config.keep_punct
    assert config.output_format == "plain"


def test_bad_log_level():
    with pytest.raises(ValueError):
        CollapseConfig(log_level="LOUD")


@pytest.mark.parametrize("value,expected", [("true", True), ("ON", True), ("0", False), ("", False)])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_view_headings_distinct():
    assert len({v.heading for v in View}) == 4
