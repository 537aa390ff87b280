#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for JSON persistence of cube states
"""
import json

import pytest

from cube_colors import FaceName
from cube_state import Cube
from cube_storage import (
    FORMAT_VERSION,
    InvalidStateError,
    MalformedPayloadError,
    SerializationError,
    UnsupportedVersionError,
    cube_from_json,
    cube_to_dict,
    cube_to_json,
    load_cube,
    save_cube,
)
from random_cube_generator import ScrambleConfig, generate_scramble


def test_document_layout():
    data = json.loads(cube_to_json(Cube(2)))
    assert data["version"] == FORMAT_VERSION
    assert data["cube"]["size"] == 2
    assert set(data["cube"]["faces"]) == {name.value for name in FaceName}
    assert data["cube"]["faces"]["U"] == [["White", "White"], ["White", "White"]]
    assert data["cube"]["faces"]["R"][0][0] == "Red"


def test_scrambled_cube_survives_json():
    cube = generate_scramble(ScrambleConfig(length=30, size=4, seed=11)).cube
    assert cube_from_json(cube_to_json(cube)) == cube


def test_pretty_output():
    text = cube_to_json(Cube(3), pretty=True)
    assert "\n" in text
    assert "\n" not in cube_to_json(Cube(3))


def test_save_and_load(tmp_path):
    cube = Cube(3)
    cube.apply_algorithm("R U R' F2")
    path = tmp_path / "cube.json"
    save_cube(path, cube)
    assert load_cube(path) == cube


def test_unsupported_version():
    data = cube_to_dict(Cube(3))
    data["version"] = 2
    with pytest.raises(UnsupportedVersionError) as excinfo:
        cube_from_json(json.dumps(data))
    assert excinfo.value.found == 2
    assert excinfo.value.supported == FORMAT_VERSION


@pytest.mark.parametrize("version", [True, 1.0, "1"])
def test_version_must_be_an_integer(version):
    data = cube_to_dict(Cube(3))
    data["version"] = version
    with pytest.raises(UnsupportedVersionError) as excinfo:
        cube_from_json(json.dumps(data))
    assert excinfo.value.found == version


@pytest.mark.parametrize("text", [
    "not json",
    "[]",
    '{"cube": {}}',
    '{"version": 1}',
    '{"version": 1, "cube": {"size": 3}}',
    '{"version": 1, "cube": {"size": 1, "faces": {}}}',
])
def test_malformed_documents(text):
    with pytest.raises(MalformedPayloadError):
        cube_from_json(text)


def test_unknown_color():
    data = cube_to_dict(Cube(2))
    data["cube"]["faces"]["F"][0][1] = "Purple"
    with pytest.raises(MalformedPayloadError):
        cube_from_json(json.dumps(data))


def test_unknown_face_and_bad_grid():
    data = cube_to_dict(Cube(2))
    data["cube"]["faces"]["X"] = data["cube"]["faces"]["U"]
    with pytest.raises(MalformedPayloadError):
        cube_from_json(json.dumps(data))

    data = cube_to_dict(Cube(2))
    data["cube"]["faces"]["D"][1] = ["Yellow"]
    with pytest.raises(MalformedPayloadError):
        cube_from_json(json.dumps(data))

    data = cube_to_dict(Cube(2))
    del data["cube"]["faces"]["B"]
    with pytest.raises(MalformedPayloadError):
        cube_from_json(json.dumps(data))


def test_invalid_state_rejected():
    data = cube_to_dict(Cube(3))
    data["cube"]["faces"]["U"][0][0] = "Red"
    with pytest.raises(InvalidStateError):
        cube_from_json(json.dumps(data))
    assert issubclass(InvalidStateError, SerializationError)
