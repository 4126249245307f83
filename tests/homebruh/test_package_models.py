"""
Tests for the package manifest and catalog entry models.
"""

import pytest

from homebruh.bruh_exceptions import (
    InvalidCatalogEntry,
    InvalidFieldType,
    MalformedManifest,
    MissingRequiredField,
)
from homebruh.package_models import parse_catalog_entry, parse_manifest


class TestParseManifest:
    """Tests for parse_manifest."""

    def test_full_manifest(self):
        manifest = parse_manifest(
            """
            name = "demo"
            version = "1.0"
            files = "bin"
            startup_script = "setup.sh"
            cleanup_script = "post.sh"
            to_export = ["a", "b"]
            """
        )
        assert manifest.name == "demo"
        assert manifest.version == "1.0"
        assert manifest.files == "bin"
        assert manifest.startup_script == "setup.sh"
        assert manifest.cleanup_script == "post.sh"
        assert manifest.exports() == ["a", "b"]

    def test_optional_fields_are_absent_not_empty(self):
        manifest = parse_manifest('name = "demo"\nversion = "1.0"\nfiles = "bin"\n')
        assert manifest.startup_script is None
        assert manifest.cleanup_script is None
        assert manifest.to_export is None
        assert manifest.exports() == []

    def test_unknown_keys_are_ignored(self):
        manifest = parse_manifest(
            'name = "demo"\nversion = "1.0"\nfiles = "bin"\nauthor = "someone"\n'
        )
        assert manifest.name == "demo"

    @pytest.mark.parametrize("missing", ["name", "version", "files"])
    def test_missing_required_field(self, missing):
        fields = {"name": '"demo"', "version": '"1.0"', "files": '"bin"'}
        del fields[missing]
        text = "\n".join(f"{k} = {v}" for k, v in fields.items())

        with pytest.raises(MissingRequiredField) as excinfo:
            parse_manifest(text)
        assert excinfo.value.field == missing
        assert missing in str(excinfo.value)

    def test_missing_field_reported_before_type_errors(self):
        with pytest.raises(MissingRequiredField):
            parse_manifest('name = 1\nversion = "1.0"\n')

    def test_to_export_must_be_a_list(self):
        with pytest.raises(InvalidFieldType) as excinfo:
            parse_manifest('name = "demo"\nversion = "1.0"\nfiles = "bin"\nto_export = "demo"\n')
        assert excinfo.value.field == "to_export"

    def test_to_export_entries_must_be_strings(self):
        with pytest.raises(InvalidFieldType) as excinfo:
            parse_manifest('name = "demo"\nversion = "1.0"\nfiles = "bin"\nto_export = [1, 2]\n')
        assert excinfo.value.field == "to_export"

    def test_version_must_be_a_string(self):
        with pytest.raises(InvalidFieldType) as excinfo:
            parse_manifest('name = "demo"\nversion = 1.0\nfiles = "bin"\n')
        assert excinfo.value.field == "version"

    def test_malformed_document(self):
        with pytest.raises(MalformedManifest):
            parse_manifest("name = = demo")


class TestParseCatalogEntry:
    """Tests for parse_catalog_entry."""

    def test_valid_entry(self):
        entry = parse_catalog_entry(
            'link = "https://example.test/demo.bpkg"\nsha256 = "abc123"\n'
        )
        assert entry.link == "https://example.test/demo.bpkg"
        assert entry.sha256 == "abc123"

    @pytest.mark.parametrize(
        "text",
        [
            'sha256 = "abc123"\n',
            'link = "https://example.test/demo.bpkg"\n',
            "not toml at all [",
        ],
    )
    def test_invalid_entry(self, text):
        with pytest.raises(InvalidCatalogEntry) as excinfo:
            parse_catalog_entry(text)
        assert "Invalid package manifest" in str(excinfo.value)


class TestManifestDecoding:
    """Tests for manifests given as raw file bytes."""

    def test_utf8_bytes(self):
        manifest = parse_manifest('name = "démo"\nversion = "1.0"\nfiles = "bin"\n'.encode())
        assert manifest.name == "démo"

    def test_undecodable_bytes(self):
        with pytest.raises(MalformedManifest):
            parse_manifest(b'name = "\xff\xfe"\nversion = "1.0"\nfiles = "bin"\n')

    def test_undecodable_catalog_entry(self):
        with pytest.raises(InvalidCatalogEntry):
            parse_catalog_entry(b'link = "\xff"\nsha256 = "abc"\n')


class TestManifestPaths:
    """Paths in the manifest must stay inside the package tree."""

    @pytest.mark.parametrize(
        "key, value",
        [
            ("files", '"/usr/bin"'),
            ("files", '"../elsewhere"'),
            ("startup_script", '"/tmp/outside.sh"'),
            ("startup_script", '"scripts/../../outside.sh"'),
            ("cleanup_script", '"/bin/true"'),
            ("to_export", '["demo", "/etc/passwd"]'),
            ("to_export", '["../../bin/sh"]'),
        ],
    )
    def test_unsafe_paths_rejected(self, key, value):
        fields = {
            "name": '"demo"',
            "version": '"1.0"',
            "files": '"bin"',
        }
        fields[key] = value
        text = "\n".join(f"{k} = {v}" for k, v in fields.items())

        with pytest.raises(InvalidFieldType) as excinfo:
            parse_manifest(text)
        assert excinfo.value.field == key

    def test_nested_relative_paths_allowed(self):
        manifest = parse_manifest(
            'name = "demo"\nversion = "1.0"\nfiles = "dist/bin"\n'
            'startup_script = "scripts/setup.sh"\nto_export = ["tools/demo"]\n'
        )
        assert manifest.files == "dist/bin"
        assert manifest.exports() == ["tools/demo"]
