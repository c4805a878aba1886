"""Tests for SlopegraphPresets load/save and preset validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slopegraph import presets as presets_module
from slopegraph.config import LabelPosition, SlopegraphConfig
from slopegraph.errors import InvalidInputError, InvalidStyleError
from slopegraph.presets import SCHEMA_VERSION, SlopegraphPresets, validate_config


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_default_path_creates_nothing(tmp_path: Path, monkeypatch) -> None:
    cfg_dir = tmp_path / "cfgdir"
    monkeypatch.setattr(presets_module, "user_config_dir", lambda app_name: str(cfg_dir))
    path = SlopegraphPresets.default_path()
    assert path == cfg_dir / "slopegraph_presets.json"
    assert not cfg_dir.exists()


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "presets.json"
    store = SlopegraphPresets.load(path)
    assert store.names() == []
    assert store.get_default() == SlopegraphConfig()
    assert not path.exists()


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "presets.json"
    store = SlopegraphPresets.load(path)
    gray = SlopegraphConfig(col_lines="gray", decimals=1, xlim=(-0.5, 5.5))
    dashed = SlopegraphConfig(lty=["solid", "dashed"], lwd=[1, 2], labpos_left=LabelPosition.ABOVE)
    store.put("gray", gray, make_default=True)
    store.put("dashed", dashed)
    store.save()

    loaded = SlopegraphPresets.load(path)
    assert loaded.names() == ["dashed", "gray"]
    assert loaded.get("gray") == gray
    assert loaded.get("dashed") == dashed
    assert loaded.default_name == "gray"
    assert loaded.get_default() == gray


def test_remove_clears_default(tmp_path: Path) -> None:
    store = SlopegraphPresets(path=tmp_path / "presets.json")
    store.put("a", SlopegraphConfig(), make_default=True)
    store.remove("a")
    assert store.names() == []
    assert store.default_name is None
    with pytest.raises(KeyError):
        store.get("a")


@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_unusable_document_is_empty(tmp_path: Path, text: str) -> None:
    path = tmp_path / "presets.json"
    path.write_text(text, encoding="utf-8")
    assert SlopegraphPresets.load(path).names() == []


@pytest.mark.parametrize("version", [999, "v1", None, [1]])
def test_bad_schema_version_is_empty(tmp_path: Path, version) -> None:
    path = _write(
        tmp_path / "presets.json",
        {"schema_version": version, "default": "a", "presets": {"a": {"decimals": 3}}},
    )
    store = SlopegraphPresets.load(path)
    assert store.names() == []
    assert store.get_default() == SlopegraphConfig()


def test_invalid_presets_are_dropped(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "presets.json",
        {
            "schema_version": SCHEMA_VERSION,
            "default": "flat_ylim",
            "presets": {
                "good": {"col_lines": "gray", "decimals": 2},
                "flat_ylim": {"ylim": [5, 5]},
                "short_xlim": {"xlim": [1]},
                "nan_ylim": {"ylim": [0, "nan"]},
                "negative_decimals": {"decimals": -1},
                "fractional_decimals": {"decimals": 1.5},
                "wavy": {"lty": ["solid", "wavy"]},
                "empty_colors": {"col_lines": []},
                "negative_lwd": {"lwd": -2},
                "font": {"font_lab": 7},
                "labpos": {"labpos_left": "sideways"},
                "not_an_object": [1, 2],
            },
        },
    )
    store = SlopegraphPresets.load(path)
    assert store.names() == ["good"]
    assert store.get("good").decimals == 2
    assert store.default_name is None


def test_put_rejects_invalid_config(tmp_path: Path) -> None:
    store = SlopegraphPresets(path=tmp_path / "presets.json")
    with pytest.raises(InvalidStyleError):
        store.put("bad", SlopegraphConfig(decimals=-1))
    with pytest.raises(InvalidInputError):
        store.put("bad", SlopegraphConfig(ylim=(3.0, 3.0)))
    assert store.names() == []


def test_validate_config_accepts_defaults_and_vectors() -> None:
    cfg = SlopegraphConfig(
        xlim=(0.0, 4.0),
        ylim=(38.0, 0.0),
        decimals=0,
        col_lines=["red", "blue"],
        lty=[1, "dashed", "dash"],
        lwd=[1, 2.5],
        font_lab=4,
    )
    assert validate_config(cfg) is cfg
    assert validate_config(SlopegraphConfig()) == SlopegraphConfig()
