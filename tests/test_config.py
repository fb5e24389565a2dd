# tests/test_config.py
import io
import json

import pytest
from rich.console import Console

from word_counter.utils.config_manager import DEFAULTS, Config


def test_missing_file_gives_defaults(tmp_path):
    cfg = Config(str(tmp_path / "absent.json"))
    assert cfg.data == DEFAULTS
    # loading never creates the file
    assert not (tmp_path / "absent.json").exists()


def test_file_values_override_and_are_coerced(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"table_size": "50", "probing": "double", "unknown": 1}))
    cfg = Config(str(path))
    assert cfg["table_size"] == 50
    assert cfg["probing"] == "double"
    assert "unknown" not in cfg.data
    assert cfg["snapshots"] == DEFAULTS["snapshots"]


def test_malformed_file_is_an_error(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="bad config file"):
        Config(str(path))


def test_non_object_file_is_an_error(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        Config(str(path))


def test_set_saves(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("snapshots", "4")
    cfg.set("log_echo", "yes")
    saved = json.loads(path.read_text())
    assert saved["snapshots"] == 4
    assert saved["log_echo"] is True
    assert Config(str(path))["snapshots"] == 4


def test_set_rejects_unknown_key_and_bad_probing(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(KeyError):
        cfg.set("colour", "blue")
    with pytest.raises(ValueError):
        cfg.set("probing", "quadratic")
    with pytest.raises(ValueError):
        cfg.set("table_size", "lots")


def test_show_lists_every_option(tmp_path):
    buf = io.StringIO()
    Config(str(tmp_path / "cfg.json")).show(Console(file=buf, width=120))
    text = buf.getvalue()
    for key in DEFAULTS:
        assert key in text
    assert "table_size      = 113" in text


@pytest.mark.parametrize(
    "body, key",
    [({"table_size": None}, "table_size"), ({"snapshots": [1]}, "snapshots"), ({"probing": 3}, "probing")],
)
def test_wrongly_typed_value_names_file_and_key(tmp_path, body, key):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps(body))
    with pytest.raises(ValueError) as exc:
        Config(str(path))
    assert str(path) in str(exc.value)
    assert key in str(exc.value)


def test_set_turns_type_errors_into_value_errors(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(ValueError, match="table_size"):
        cfg.set("table_size", None)
