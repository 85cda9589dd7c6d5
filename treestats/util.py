# Copyright (C) 2019-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains utility functions for common operations, including:
- Checking file extensions
- Opening files for reading
- Checking paths
- Loading and validating input files
"""

import functools
import json
import logging
import os
import pkgutil
import tomllib
import typing
from collections.abc import Iterable
from pathlib import Path

import jsonschema
import yaml

log = logging.getLogger(__name__)


def ensure_ext(path: os.PathLike[str], extensions: Iterable[str]) -> None:
    """
    Ensure that a path has one of the specified extensions.

    Parameters
    ----------
    path: os.PathLike[str]
        The path to test.

    extensions: Iterable[str]
        The valid extensions to test against.

    Raises
    ------
    TypeError
        If `path` is not a string or PathLike.
        If `extensions` is not a string or an Iterable of strings.

    ValueError
        If `path` does not have one of the specified extensions.
    """
    path = Path(path)
    if isinstance(extensions, str):
        extensions = [extensions]
    if not all(isinstance(ext, str) for ext in extensions):
        raise TypeError("'extensions' must be 'str' or 'Iterable[str]'")

    extension = "".join(path.suffixes)
    if extension not in extensions:
        exts = ", ".join([f"'{ext}'" for ext in extensions])
        raise ValueError(f"{path} does not have a valid extension: {exts}")


def safe_open_read_nofollow(fname: os.PathLike[str], mode: str):
    """Open fname for reading. Refuse to follow a symlink."""
    flags = os.O_RDONLY | os.O_NOFOLLOW
    fpid = os.open(fname, flags)
    return os.fdopen(fpid, mode)


def valid_path(path: os.PathLike[str]) -> bool:
    """
    Check if a given file path is valid.

    The path must not contain null bytes (`\x00`), carriage returns or
    line feeds (`\n`, `\r`).

    Parameters
    ----------
    path : os.PathLike[str]
        The file path to be validated.

    Returns
    -------
    bool
        True if the path is valid and False otherwise.

    Examples
    --------
    >>> valid_path("/home/user/tree.json")
    True
    >>> valid_path("/home/user/\x00tree.json")
    False
    """
    valid = True
    path = str(path)

    # Check for null byte character(s)
    if "\x00" in path:
        log.critical("Null byte character in file request.")
        valid = False

    # Check for carriage returns or line feed character(s)
    if ("\n" in path) or ("\r" in path):
        log.critical("Carriage return or line feed character in file request.")
        valid = False

    return valid


_schema_paths = {
    "tree": "schema/tree.schema",
    "tree-node": "schema/tree-node.schema",
    "config": "schema/config.schema",
}


@functools.cache
def _validator(schema_name: str) -> jsonschema.protocols.Validator:
    """
    Load the named schema and return a validator for it. Validators are
    cached, so that validating many small objects (e.g. the nodes of a
    tree) does not reload the schema each time.

    Raises
    ------
    RuntimeError
        If the schema file cannot be located, or the schema is invalid.
    """
    schema_path = _schema_paths[schema_name]
    schema_string = pkgutil.get_data("treestats", schema_path)
    if not schema_string:
        msg = f"Could not locate schema file {schema_path}"
        raise RuntimeError(msg)

    schema = json.loads(schema_string)

    cls = jsonschema.validators.validator_for(schema)
    try:
        cls.check_schema(schema)
    except jsonschema.exceptions.SchemaError:
        msg = f"{schema_path} is not a valid schema"
        raise RuntimeError(msg)

    return cls(schema)


def _validate_json(json_object: object, schema_name: str) -> bool:
    """
    Validate JSON against a schema.

    Parameters
    ----------
    json_object : Object
        The JSON to validate.

    schema_name : {'tree', 'tree-node', 'config'}
        The schema to validate against.

    Returns
    -------
    bool
        True if the JSON is valid.

    Raises
    ------
    ValueError
        If the JSON fails to validate, or the schema name is unrecognized.

    RuntimeError
        If the schema file cannot be located, or the schema is invalid.
    """
    if schema_name not in _schema_paths.keys():
        raise ValueError("Unrecognized schema name.")

    validator = _validator(schema_name)
    error = jsonschema.exceptions.best_match(
        validator.iter_errors(json_object),
    )
    if error is not None:
        schema_path = _schema_paths[schema_name]
        msg = (
            f"Failed schema validation against {schema_path}: "
            + f"{error.message}"
        )
        raise ValueError(msg)

    return True


def _load_json(file_object: typing.TextIO, schema_name: str) -> object:
    """
    Load JSON from file and validate it against a schema.

    Parameters
    ----------
    file_object : typing.TextIO
        The file object to load from.

    schema_name : {'tree'}
        The schema to validate against.

    Returns
    -------
    Object
        The loaded JSON.

    Raises
    ------
    ValueError
        If the JSON fails to parse or validate, or the schema name is
        unrecognized.
    """
    try:
        json_object = json.load(file_object)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}")
    except RecursionError:
        raise ValueError("Invalid JSON: too deeply nested.")
    _validate_json(json_object, schema_name)
    return json_object


def _load_yaml(file_object: typing.TextIO, schema_name: str) -> object:
    """
    Load YAML from file and validate it against a schema.

    Parameters
    ----------
    file_object : typing.TextIO
        The file object to load from.

    schema_name : {'tree'}
        The schema to validate against.

    Returns
    -------
    Object
        The loaded YAML.

    Raises
    ------
    ValueError
        If the YAML fails to parse or validate, or the schema name is
        unrecognized.
    """
    try:
        yaml_object = yaml.safe_load(file_object)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}")
    except RecursionError:
        raise ValueError("Invalid YAML: too deeply nested.")
    _validate_json(yaml_object, schema_name)
    return yaml_object


def _load_toml(file_object: typing.BinaryIO, schema_name: str) -> object:
    """
    Load TOML from file and validate it against a schema.

    Parameters
    ----------
    file_object : typing.BinaryIO
        The file object to load from.

    schema_name : {'config'}
        The schema to validate against.

    Returns
    -------
    Object
        The loaded TOML.

    Raises
    ------
    ValueError
        If the TOML fails to parse or validate, or the schema name is
        unrecognized.
    """
    try:
        toml_object = tomllib.load(file_object)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML: {e}")
    _validate_json(toml_object, schema_name)
    return toml_object
