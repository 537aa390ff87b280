#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Save and load cube states as versioned JSON.

Document layout:
    {"version": 1,
     "cube": {"size": 3,
              "faces": {"U": [["White", "White", "White"], ...], ...}}}

Loading rejects unknown versions and re-checks color counts, so a file that
was edited by hand cannot produce an impossible cube.
"""

import json
import logging

from cube_colors import Color, FaceName
from cube_state import Cube, CubeError, Face, MAX_SIZE, MIN_SIZE
from cube_validation import ValidationError, validate

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class SerializationError(CubeError):
    """A cube document could not be read or written"""


class MalformedPayloadError(SerializationError):
    pass


class UnsupportedVersionError(SerializationError):
    def __init__(self, found, supported=FORMAT_VERSION):
        super().__init__(f"Unsupported format version {found!r} (supported: {supported})")
        self.found = found
        self.supported = supported


class InvalidStateError(SerializationError):
    def __init__(self, cause):
        super().__init__(f"Stored cube is not a valid state: {cause}")
        self.cause = cause


def cube_to_dict(cube):
    faces = {
        name.value: [[color.display_name for color in row] for row in cube.face(name).stickers()]
        for name in FaceName.all()
    }
    return {"version": FORMAT_VERSION, "cube": {"size": cube.size, "faces": faces}}


def cube_to_json(cube, pretty=False):
    return json.dumps(cube_to_dict(cube), indent=2 if pretty else None)


def _read_face(size, rows, name):
    if not isinstance(rows, list) or len(rows) != size:
        raise MalformedPayloadError(f"Face {name} must have {size} rows")
    stickers = []
    for row in rows:
        if not isinstance(row, list) or len(row) != size:
            raise MalformedPayloadError(f"Every row of face {name} must have {size} colors")
        try:
            stickers.append([Color.from_name(value) for value in row])
        except ValueError as e:
            raise MalformedPayloadError(f"Face {name}: {e}") from e
    return Face.from_stickers(stickers)


def cube_from_dict(data):
    if not isinstance(data, dict):
        raise MalformedPayloadError("Document must be a JSON object")
    if "version" not in data:
        raise MalformedPayloadError("Missing key: version")
    version = data["version"]
    if not isinstance(version, int) or isinstance(version, bool) or version != FORMAT_VERSION:
        raise UnsupportedVersionError(version)

    body = data.get("cube")
    if not isinstance(body, dict):
        raise MalformedPayloadError("Missing key: cube")

    size = body.get("size")
    if not isinstance(size, int) or isinstance(size, bool) or not MIN_SIZE <= size <= MAX_SIZE:
        raise MalformedPayloadError(f"Cube size must be an integer between {MIN_SIZE} and {MAX_SIZE}")

    faces = body.get("faces")
    if not isinstance(faces, dict):
        raise MalformedPayloadError("Missing key: faces")
    unknown = set(faces) - {name.value for name in FaceName}
    if unknown:
        raise MalformedPayloadError(f"Unknown face name(s): {', '.join(sorted(unknown))}")

    cube = Cube(size)
    for name in FaceName.all():
        if name.value not in faces:
            raise MalformedPayloadError(f"Missing face: {name.value}")
        cube.faces[name] = _read_face(size, faces[name.value], name.value)

    try:
        validate(cube)
    except ValidationError as e:
        raise InvalidStateError(e) from e
    return cube


def cube_from_json(text):
    """
    Parse a JSON document into a Cube

    Raises:
        MalformedPayloadError, UnsupportedVersionError, InvalidStateError
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"Invalid JSON: {e}") from e
    return cube_from_dict(data)


def save_cube(path, cube):
    with open(path, "w", encoding="utf-8") as f:
        f.write(cube_to_json(cube, pretty=True))
    logger.info("Saved %dx%d cube to %s", cube.size, cube.size, path)


def load_cube(path):
    with open(path, encoding="utf-8") as f:
        cube = cube_from_json(f.read())
    logger.info("Loaded %dx%d cube from %s", cube.size, cube.size, path)
    return cube
