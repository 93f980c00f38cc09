"""Unit tests for the manifest model and loader (qtgen.manifest) and the
target lookup table (qtgen.targets).

Tests cover:
- Field definitions given as a mapping or as a list of groups
- Literal vs expression values
- Scalar coercion of ``in``/``out``/``when``
- Defaults for missing or null sections
- ManifestLoadError for unreadable, malformed or mis-shaped manifests
- Target type resolution and manifest paths
- The bundled manifests
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from qtgen.errors import ManifestLoadError
from qtgen.manifest import FieldDefinition, Manifest, load_manifest, parse_manifest
from qtgen.sources import DirectorySource, bundled_source
from qtgen.targets import (
    TargetCategory,
    TargetType,
    find_target_type,
    parse_category,
    resolve_manifest_path,
    supported_type_names,
)

pytestmark = pytest.mark.unit


SAMPLE_MANIFEST = """\
version: "1"
global:
  header: |
    // header
  fields:
    className: "{{ qArgName }}"
    debug: false
files:
  - in: class.h
    out: "{{ className | lower }}.h"
    fields:
      fileName: "{{ className | lower }}.h"
  - in: class.cpp
    out: "{{ className | lower }}.cpp"
    when: "{{ qArgQObject }}"
"""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseManifest:
    def test_sample(self):
        manifest = parse_manifest(SAMPLE_MANIFEST)
        assert manifest.version == "1"
        assert manifest.global_section.header == "// header\n"
        assert [f.name for f in manifest.global_section.fields] == ["className", "debug"]
        assert [e.input for e in manifest.files] == ["class.h", "class.cpp"]
        assert manifest.files[0].output == "{{ className | lower }}.h"
        assert manifest.files[0].when is None
        assert manifest.files[1].when == "{{ qArgQObject }}"

    def test_expression_and_literal_values(self):
        fields = parse_manifest(SAMPLE_MANIFEST).global_section.fields
        assert fields[0].is_expression
        assert not fields[1].is_expression
        assert fields[1].value is False

    def test_fields_as_list_of_groups(self):
        manifest = parse_manifest(
            textwrap.dedent(
                """\
                global:
                  fields:
                    - a: "1"
                      b: "2"
                    - c: "{{ a }}"
                """
            )
        )
        assert [f.name for f in manifest.global_section.fields] == ["a", "b", "c"]

    def test_fields_bad_shape(self):
        with pytest.raises(ManifestLoadError, match="mapping or a list of mappings"):
            parse_manifest("global:\n  fields: 5\n")

    def test_scalar_coercion(self):
        manifest = parse_manifest(
            "version: 2\nfiles:\n  - in: 1\n    out: x\n    when: true\n"
        )
        assert manifest.version == "2"
        assert manifest.files[0].input == "1"
        assert manifest.files[0].when == "true"

    def test_empty_document(self):
        manifest = parse_manifest("")
        assert manifest.version == ""
        assert manifest.global_section.fields == ()
        assert manifest.global_section.header == ""
        assert manifest.files == ()

    def test_null_sections(self):
        manifest = parse_manifest("global:\nfiles:\n")
        assert manifest.global_section.fields == ()
        assert manifest.files == ()

    def test_unknown_keys_ignored(self):
        manifest = parse_manifest("extra: 1\nfiles:\n  - in: a\n    out: b\n    note: x\n")
        assert manifest.files[0].input == "a"

    def test_malformed_yaml(self):
        with pytest.raises(ManifestLoadError, match="malformed YAML"):
            parse_manifest("files: [unclosed", "cfg.yml")

    def test_top_level_not_mapping(self):
        with pytest.raises(ManifestLoadError, match="top level must be a mapping"):
            parse_manifest("- a\n- b\n")

    def test_wrong_shape(self):
        with pytest.raises(ManifestLoadError) as exc_info:
            parse_manifest("files: 3\n", "cfg.yml")
        assert exc_info.value.path == "cfg.yml"

    def test_frozen(self):
        manifest = parse_manifest(SAMPLE_MANIFEST)
        with pytest.raises(ValidationError):
            manifest.version = "9"

    def test_constructed_from_definitions(self):
        manifest = Manifest.model_validate(
            {"global": {"fields": [FieldDefinition(name="a", value="x")]}}
        )
        assert manifest.global_section.fields[0].value == "x"


class TestLoadManifest:
    def test_loads_from_source(self, tmp_path: Path):
        (tmp_path / "config.yml").write_text(SAMPLE_MANIFEST, encoding="utf-8")
        manifest = load_manifest(DirectorySource(tmp_path), "config.yml")
        assert len(manifest.files) == 2

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestLoadError, match="cannot read file info"):
            load_manifest(DirectorySource(tmp_path), "config.yml")

    def test_directory_instead_of_file(self, tmp_path: Path):
        (tmp_path / "config.yml").mkdir()
        with pytest.raises(ManifestLoadError, match="non-regular file"):
            load_manifest(DirectorySource(tmp_path), "config.yml")

    @pytest.mark.parametrize(
        "target, inputs",
        [
            (TargetType.CPP_CLASS, ["class.h.j2", "class.cpp.j2"]),
            (TargetType.PYTHON_CLASS, ["class.py.j2"]),
        ],
    )
    def test_bundled_manifests(self, target, inputs):
        manifest = load_manifest(bundled_source(), resolve_manifest_path(target))
        assert [e.input for e in manifest.files] == inputs


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------


class TestTargets:
    def test_parse_category(self):
        assert parse_category("CLASS") is TargetCategory.CLASS
        assert parse_category(TargetCategory.FILE) is TargetCategory.FILE
        assert parse_category("widget") is None

    @pytest.mark.parametrize(
        "type_name, expected",
        [
            ("cpp", TargetType.CPP_CLASS),
            ("CPP", TargetType.CPP_CLASS),
            ("python", TargetType.PYTHON_CLASS),
            ("Python", TargetType.PYTHON_CLASS),
            ("rust", None),
        ],
    )
    def test_find_class_types(self, type_name, expected):
        assert find_target_type("class", type_name) is expected

    def test_project_and_file_have_no_types(self):
        assert find_target_type("project", "cpp") is None
        assert find_target_type(TargetCategory.FILE, "cpp") is None

    def test_unknown_category(self):
        assert find_target_type("widget", "cpp") is None

    def test_manifest_paths(self):
        assert resolve_manifest_path(TargetType.CPP_CLASS) == "templates/classes/cpp/config.yml"
        assert (
            resolve_manifest_path(TargetType.PYTHON_CLASS)
            == "templates/classes/python/config.yml"
        )

    def test_supported_type_names(self):
        assert supported_type_names("class") == ["cpp", "python"]
        assert supported_type_names("project") == []
        assert supported_type_names("bogus") == []
