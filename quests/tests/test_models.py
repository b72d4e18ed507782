"""Tests for the data models."""

import json

import pytest

from quests.errors import ValidationError
from quests.models import Body, ClassificationResult, LightIntensity, StarSystem


def test_light_intensity_values():
    assert [l.value for l in LightIntensity] == [
        "Full", "Partial", "None", "None (Multiple Shadows)",
    ]
    assert LightIntensity("Partial") is LightIntensity.PARTIAL
    assert all(l.explanation for l in LightIntensity)


def test_result_to_dict_basic():
    r = ClassificationResult(
        body=Body("Marsia", 1.5, 6779),
        light=LightIntensity.MULTIPLE_SHADOWS,
        shadow_count=2,
        closer_count=3,
        shadow_casters=["Venusia", "Earthia"],
    )
    d = r.to_dict()
    assert d["name"] == "Marsia"
    assert d["light"] == "None (Multiple Shadows)"
    assert d["shadow_casters"] == ["Venusia", "Earthia"]
    assert "light_fraction" not in d
    json.dumps(d)


def test_result_properties():
    r = ClassificationResult(body=Body("Mercuria", 0.4, 4879), light=LightIntensity.FULL)
    assert (r.name, r.distance, r.size) == ("Mercuria", 0.4, 4879)
    assert r.explanation == LightIntensity.FULL.explanation


def test_system_save_and_load(tmp_path):
    system = StarSystem("Custom", (Body("A", 0.5, 100.0), Body("B", 1.0, 200.0)))
    path = tmp_path / "systems" / "custom.json"
    system.save(path)
    assert StarSystem.load(path) == system


def test_system_load_validates(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "name": "Bad",
        "bodies": [{"name": "Zero", "distance": 0, "size": 10}, {"name": "", "distance": 1, "size": 1}],
    }), encoding="utf-8")
    with pytest.raises(ValidationError) as exc:
        StarSystem.load(path)
    assert len(exc.value.violations) == 2


def test_system_load_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValidationError) as exc:
        StarSystem.load(path)
    assert exc.value.fields == {"file"}


def test_system_load_missing_file(tmp_path):
    with pytest.raises(ValidationError):
        StarSystem.load(tmp_path / "missing.json")


def test_system_load_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValidationError):
        StarSystem.load(path)


@pytest.mark.parametrize("bodies", [5, "Mercuria", {"name": "Mercuria"}, None])
def test_system_load_rejects_non_list_bodies(tmp_path, bodies):
    path = tmp_path / "scalar.json"
    path.write_text(json.dumps({"name": "Scalar", "bodies": bodies}), encoding="utf-8")
    with pytest.raises(ValidationError) as exc:
        StarSystem.load(path)
    assert exc.value.fields == {"bodies"}
    assert len(exc.value.violations) == 1
