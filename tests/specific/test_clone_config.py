"""Tests for loading and validating the clone configuration files"""

import json

import pytest

from glueclone.core.clone_config import (
    ConfigError,
    PrefixCopyConfig,
    RegionCopyConfig,
    load_prefix_config,
    load_region_config,
)


def write_config(tmp_path, data, name="conf.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


class TestRegionConfig:
    """Cross-region copy configuration"""

    def test_load_valid(self, tmp_path):
        path = write_config(
            tmp_path,
            {
                "workflow_name": "eu_etl",
                "workflow_region": "eu-west-1",
                "workflow_target_region": "us-east-1",
                "replacer": {"eu_": "us_"},
            },
        )
        config = load_region_config(path)
        assert isinstance(config, RegionCopyConfig)
        assert config.workflow_name == "eu_etl"
        assert config.workflow_region == "eu-west-1"
        assert config.workflow_target_region == "us-east-1"
        assert config.name_replacer().replace("eu_etl") == "us_etl"

    def test_replacer_is_optional(self, tmp_path):
        path = write_config(
            tmp_path,
            {"workflow_name": "etl", "workflow_region": "eu-west-1", "workflow_target_region": "us-east-1"},
        )
        config = load_region_config(path)
        assert config.replacer == {}
        assert config.name_replacer().replace("etl") == "etl"

    def test_null_replacer(self, tmp_path):
        path = write_config(
            tmp_path,
            {
                "workflow_name": "etl",
                "workflow_region": "eu-west-1",
                "workflow_target_region": "us-east-1",
                "replacer": None,
            },
        )
        assert load_region_config(path).replacer == {}

    @pytest.mark.parametrize("missing", ["workflow_name", "workflow_region", "workflow_target_region"])
    def test_missing_required_key(self, tmp_path, missing):
        data = {"workflow_name": "etl", "workflow_region": "eu-west-1", "workflow_target_region": "us-east-1"}
        del data[missing]
        with pytest.raises(ConfigError, match=missing):
            load_region_config(write_config(tmp_path, data))

    def test_blank_workflow_name(self, tmp_path):
        data = {"workflow_name": "   ", "workflow_region": "eu-west-1", "workflow_target_region": "us-east-1"}
        with pytest.raises(ConfigError, match="workflow_name parameter not provided"):
            load_region_config(write_config(tmp_path, data))

    def test_to_dict(self):
        config = RegionCopyConfig(
            workflow_name="etl", workflow_region="eu-west-1", workflow_target_region="us-east-1"
        )
        assert config.to_dict() == {
            "workflow_name": "etl",
            "replacer": {},
            "workflow_region": "eu-west-1",
            "workflow_target_region": "us-east-1",
        }
        assert json.loads(str(config)) == config.to_dict()


class TestPrefixConfig:
    """Prefixed duplication configuration"""

    def test_load_valid(self, tmp_path):
        path = write_config(
            tmp_path, {"workflow_name": "etl", "workflow_prefix": "copy_", "replacer": {"prod": "test"}}
        )
        config = load_prefix_config(path)
        assert isinstance(config, PrefixCopyConfig)
        assert config.workflow_prefix == "copy_"
        assert config.workflow_region is None

    def test_missing_prefix(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl"})
        with pytest.raises(ConfigError, match="workflow_prefix"):
            load_prefix_config(path)

    def test_empty_prefix(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": ""})
        with pytest.raises(ConfigError, match="workflow_prefix"):
            load_prefix_config(path)

    def test_bad_region_type(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": "x_", "workflow_region": 42})
        with pytest.raises(ConfigError, match="workflow_region"):
            load_prefix_config(path)


class TestConfigErrors:
    """File and replacer level errors"""

    def test_file_not_found(self, tmp_path):
        missing = str(tmp_path / "nope.json")
        with pytest.raises(ConfigError, match="not found"):
            load_region_config(missing)

    def test_blank_path(self):
        with pytest.raises(ConfigError, match="-conf parameter not provided"):
            load_prefix_config("")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_prefix_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = write_config(tmp_path, ["workflow_name"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_prefix_config(path)

    def test_empty_replacer_key(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": "x_", "replacer": {"": "y"}})
        with pytest.raises(ConfigError, match="non-empty"):
            load_prefix_config(path)

    def test_non_string_replacer_value(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": "x_", "replacer": {"a": 1}})
        with pytest.raises(ConfigError, match="must be a string"):
            load_prefix_config(path)

    def test_replacer_not_a_map(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": "x_", "replacer": ["a", "b"]})
        with pytest.raises(ConfigError, match="replacer must be a map"):
            load_prefix_config(path)

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = write_config(tmp_path, {"workflow_name": "etl", "workflow_prefix": "x_", "colour": "blue"})
        config = load_prefix_config(path)
        assert not hasattr(config, "colour")


class TestReplacerOrder:
    """Overlapping replacer keys are tried in the order they appear in the file"""

    @pytest.mark.parametrize(
        "replacer, expected",
        [
            ({"ab": "X", "abc": "Y"}, "Xcd_Xcd"),
            ({"abc": "Y", "ab": "X"}, "Yd_Yd"),
        ],
        ids=["short_key_first", "long_key_first"],
    )
    def test_file_order_priority(self, tmp_path, replacer, expected):
        data = {
            "workflow_name": "abcd_abcd",
            "workflow_region": "eu-west-1",
            "workflow_target_region": "us-east-1",
            "replacer": replacer,
        }
        path = write_config(tmp_path, data)
        config = load_region_config(path)
        assert list(config.replacer) == list(replacer)
        assert config.name_replacer().replace(config.workflow_name) == expected

    def test_file_order_reaches_clone_names(self, tmp_path):
        from glueclone.core.workflow_cloner import PrefixNaming

        path = tmp_path / "conf.json"
        # Written by hand so the key order on disk is explicit
        path.write_text('{"workflow_name": "etl", "workflow_prefix": "copy_", "replacer": {"dev": "A", "dev_ingest": "B"}}')
        config = load_prefix_config(str(path))
        naming = PrefixNaming(config.workflow_prefix, config.name_replacer())
        assert naming.job_name("dev_ingest") == "A_ingest"
        assert naming.workflow_name("dev_ingest") == "copy_dev_ingest"
