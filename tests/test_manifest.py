"""Tests for manifest placeholder injection."""

import pytest

from applabel.manifest import PlaceholderInjector, render_placeholders


MANIFEST = '''<manifest xmlns:android="http://schemas.android.com/apk/res/android">
    <application
        android:label="${appLabel}"
        android:name="${applicationName}"
        android:icon="@mipmap/ic_launcher">
    </application>
</manifest>
'''


def test_render_replaces_known_keys_only():
    rendered, count = render_placeholders(MANIFEST, {"appLabel": "Acme 2.1.0"})
    assert count == 1
    assert 'android:label="Acme 2.1.0"' in rendered
    assert "${applicationName}" in rendered


def test_render_replaces_every_occurrence():
    rendered, count = render_placeholders("${a}-${a}-${b}", {"a": "x", "b": "y"})
    assert (rendered, count) == ("x-x-y", 3)


def test_render_value_not_treated_as_regex_template():
    rendered, _ = render_placeholders("${a}", {"a": r"\1 $0"})
    assert rendered == r"\1 $0"


class TestPlaceholderInjector:
    def test_inject(self):
        result = PlaceholderInjector().inject(MANIFEST, "Acme 2.1.0")
        assert result.status == "UPDATED"
        assert result.replacements == 1

    def test_inject_missing_placeholder(self):
        result = PlaceholderInjector("otherLabel").inject(MANIFEST, "Acme")
        assert result.status == "MISSING"
        assert result.content == MANIFEST

    def test_invalid_placeholder_name(self):
        with pytest.raises(ValueError):
            PlaceholderInjector("has space")

    def test_inject_file_in_place(self, tmp_path):
        path = tmp_path / "AndroidManifest.xml"
        path.write_text(MANIFEST, encoding="utf-8")
        result = PlaceholderInjector().inject_file(path, "Acme 2.1.0")
        assert result.status == "UPDATED"
        assert result.output_path == path
        assert 'android:label="Acme 2.1.0"' in path.read_text(encoding="utf-8")

    def test_inject_file_to_output(self, tmp_path):
        template = tmp_path / "AndroidManifest.xml"
        template.write_text(MANIFEST, encoding="utf-8")
        output = tmp_path / "build" / "AndroidManifest.xml"

        first = PlaceholderInjector().inject_file(template, "Acme", output_path=output)
        assert first.status == "UPDATED"
        assert template.read_text(encoding="utf-8") == MANIFEST
        assert 'android:label="Acme"' in output.read_text(encoding="utf-8")

        second = PlaceholderInjector().inject_file(template, "Acme", output_path=output)
        assert second.status == "UNCHANGED"

    def test_inject_file_dry_run(self, tmp_path):
        path = tmp_path / "AndroidManifest.xml"
        path.write_text(MANIFEST, encoding="utf-8")
        result = PlaceholderInjector().inject_file(path, "Acme", dry_run=True)
        assert 'android:label="Acme"' in result.content
        assert path.read_text(encoding="utf-8") == MANIFEST

    def test_inject_file_missing_template(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PlaceholderInjector().inject_file(tmp_path / "missing.xml", "Acme")
