# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for module:attribute schema reference loading."""

import sys
from pathlib import Path

import pytest

from schemashape.model import ObjectSchema, StringSchema
from schemashape.workspace.loader import SchemaLoadError, load_schema, split_reference

# ###############
# Helpers
# ###############

_MODULE = """\
from schemashape.model import NumberSchema, ObjectSchema, StringSchema

User = ObjectSchema(shape={"name": StringSchema()})


class Catalog:
    price = NumberSchema()


not_a_schema = {"kind": "string"}
"""


def _write_module(root: Path, name: str) -> None:
    (root / f"{name}.py").write_text(_MODULE, encoding="utf-8")


# ###############
# Reference syntax
# ###############


class TestSplitReference:
    def test_simple(self) -> None:
        assert split_reference("myapp.schemas:User") == ("myapp.schemas", ["User"])

    def test_dotted_attribute(self) -> None:
        assert split_reference("myapp:Catalog.price") == ("myapp", ["Catalog", "price"])

    @pytest.mark.parametrize("reference", ["myapp", "myapp:", ":User", "myapp:1st", "myapp:User.", " :User"])
    def test_invalid(self, reference: str) -> None:
        with pytest.raises(SchemaLoadError, match="expected 'module:attribute'"):
            split_reference(reference)


# ###############
# Loading
# ###############


class TestLoadSchema:
    def test_loads_module_attribute(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_a")
        schema = load_schema("loader_schemas_a:User", search_paths=[tmp_path])
        assert schema == ObjectSchema(shape={"name": StringSchema()})

    def test_loads_dotted_attribute(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_b")
        schema = load_schema("loader_schemas_b:Catalog.price", search_paths=[tmp_path])
        assert schema.kind == "number"

    def test_search_path_is_restored(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_c")
        before = list(sys.path)
        load_schema("loader_schemas_c:User", search_paths=[tmp_path])
        assert sys.path == before

    def test_module_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaLoadError, match="Cannot import module 'loader_schemas_missing'"):
            load_schema("loader_schemas_missing:User", search_paths=[tmp_path])

    def test_module_import_error(self, tmp_path: Path) -> None:
        (tmp_path / "loader_schemas_broken.py").write_text("import loader_schemas_nowhere\n", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="Cannot import module"):
            load_schema("loader_schemas_broken:User", search_paths=[tmp_path])

    def test_missing_attribute(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_d")
        with pytest.raises(SchemaLoadError, match="no attribute 'Account'"):
            load_schema("loader_schemas_d:Account", search_paths=[tmp_path])

    def test_not_a_schema(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_e")
        with pytest.raises(SchemaLoadError, match="is not a schema node"):
            load_schema("loader_schemas_e:not_a_schema", search_paths=[tmp_path])

    def test_class_is_not_a_schema(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "loader_schemas_f")
        with pytest.raises(SchemaLoadError, match="is not a schema node"):
            load_schema("loader_schemas_f:Catalog", search_paths=[tmp_path])

    def test_installed_module_without_search_path(self) -> None:
        with pytest.raises(SchemaLoadError, match="is not a schema node"):
            load_schema("json:dumps")
