"""Tests for installing generated icons into an app project."""

from __future__ import annotations

import json
import logging

import pytest

from icongen.plugin import InstallError, install_android_icons, install_icons, install_ios_icons
from icongen.plugin.installer import ANDROID_DRAWABLE_DIR


@pytest.fixture
def project(tmp_path):
    """App project with generated icons in the default locations."""
    android = tmp_path / "assets" / "generated-icons" / "android"
    android.mkdir(parents=True)
    (android / "ic_home.xml").write_text("<vector/>")
    (android / "ic_arrow_left.xml").write_text("<vector/>")
    (android / "nested").mkdir()
    (android / "nested" / "ignored.xml").write_text("<vector/>")

    catalog = tmp_path / "assets" / "generated-icons" / "ios" / "Icons.xcassets"
    (catalog / "home.symbolset").mkdir(parents=True)
    (catalog / "Contents.json").write_text(json.dumps({"info": {"author": "xcode", "version": 1}}))
    (catalog / "home.symbolset" / "home.svg").write_text("<svg/>")

    xcodeproj = tmp_path / "ios" / "MyApp.xcodeproj"
    xcodeproj.mkdir(parents=True)
    (xcodeproj / "project.pbxproj").write_text("// !$*UTF8*$!\n{ objects = {}; }\n")
    return tmp_path


# ---------------------------------------------------------------------------
# Android
# ---------------------------------------------------------------------------


def test_android_copies_files_only(project):
    copied = install_android_icons(project, "./assets/generated-icons/android")

    drawable = project / ANDROID_DRAWABLE_DIR
    assert sorted(p.name for p in copied) == ["ic_arrow_left.xml", "ic_home.xml"]
    assert sorted(p.name for p in drawable.iterdir()) == ["ic_arrow_left.xml", "ic_home.xml"]


def test_android_skipped_without_source(project):
    assert install_android_icons(project, None) == []
    assert not (project / ANDROID_DRAWABLE_DIR).exists()


def test_android_missing_source(project):
    with pytest.raises(InstallError, match="not found"):
        install_android_icons(project, "./missing")


def test_android_source_not_directory(project):
    (project / "file.xml").write_text("")
    with pytest.raises(InstallError, match="not a directory"):
        install_android_icons(project, "file.xml")


# ---------------------------------------------------------------------------
# iOS
# ---------------------------------------------------------------------------


def test_ios_copies_catalog(project):
    dest = install_ios_icons(project, "./assets/generated-icons/ios/Icons.xcassets", "MyApp")

    assert dest == project / "ios" / "MyApp" / "Icons.xcassets"
    assert (dest / "home.symbolset" / "home.svg").read_text() == "<svg/>"


def test_ios_replaces_previous_copy(project):
    stale = project / "ios" / "MyApp" / "Icons.xcassets" / "old.symbolset"
    stale.mkdir(parents=True)

    dest = install_ios_icons(project, "./assets/generated-icons/ios/Icons.xcassets", "MyApp")

    assert not (dest / "old.symbolset").exists()


def test_ios_warns_when_project_lacks_reference(project, caplog):
    with caplog.at_level(logging.WARNING, logger="icongen.plugin.installer"):
        install_ios_icons(project, "./assets/generated-icons/ios/Icons.xcassets", "MyApp")
    assert "not referenced" in caplog.text


def test_ios_no_warning_when_referenced(project, caplog):
    pbxproj = project / "ios" / "MyApp.xcodeproj" / "project.pbxproj"
    pbxproj.write_text("/* Icons.xcassets in Resources */")
    with caplog.at_level(logging.WARNING, logger="icongen.plugin.installer"):
        install_ios_icons(project, "./assets/generated-icons/ios/Icons.xcassets", "MyApp")
    assert "not referenced" not in caplog.text


def test_ios_missing_source(project):
    with pytest.raises(InstallError, match="iOS resource source directory not found"):
        install_ios_icons(project, "./nope.xcassets", "MyApp")


def test_ios_reinstall_from_installed_location_keeps_catalog(project):
    dest = install_ios_icons(project, "./assets/generated-icons/ios/Icons.xcassets", "MyApp")

    again = install_ios_icons(project, "ios/MyApp/Icons.xcassets", "MyApp")

    assert again == dest
    assert (dest / "home.symbolset" / "home.svg").read_text() == "<svg/>"
    assert (dest / "Contents.json").exists()


# ---------------------------------------------------------------------------
# Combined
# ---------------------------------------------------------------------------


def test_install_icons_defaults(project):
    copied, catalog = install_icons(project)

    assert len(copied) == 2
    assert catalog == project / "ios" / "MyApp" / "Icons.xcassets"


def test_install_icons_skip_ios(project):
    copied, catalog = install_icons(project, ios=None)
    assert len(copied) == 2
    assert catalog is None


def test_install_icons_ambiguous_project_name(project):
    (project / "ios" / "Other.xcodeproj").mkdir()
    with pytest.raises(InstallError, match="project name"):
        install_icons(project, android=None)
