from __future__ import annotations

import pytest

from readiness.checkers import FormatterChecker
from readiness.checkers import base as checker_base
from tests._fixtures.repo_builder import POM_WITH_CHECKSTYLE


def test_prettier_config_file(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web"})
    repo_builder.write({".prettierrc": "{}"})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"] == {"present": True, "config_file": ".prettierrc"}
    assert result["java"] == {}


def test_prettier_embedded_in_package_json(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web", "prettier": {"semi": False}})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"] == {"present": True, "config_file": "package.json"}


@pytest.mark.parametrize("embedded", [{}, [], "prettier-config-standard"])
def test_embedded_prettier_counts_even_when_empty(repo_builder, embedded) -> None:
    repo_builder.write_json("package.json", {"name": "web", "prettier": embedded})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"] == {"present": True, "config_file": "package.json"}


@pytest.mark.parametrize("embedded", [None, False, "", 0])
def test_falsy_embedded_prettier_is_ignored(repo_builder, embedded) -> None:
    repo_builder.write_json("package.json", {"name": "web", "prettier": embedded})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"] == {"present": False, "config_file": None}


def test_prettier_missing(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web"})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"] == {"present": False, "config_file": None}


def test_checkstyle_in_pom(repo_builder) -> None:
    repo_builder.write({"pom.xml": POM_WITH_CHECKSTYLE})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"] == {}
    assert result["java"]["checkstyle"] == {"present": True, "build_file": "pom.xml"}
    assert result["java"]["spotless"] == {"present": False}
    assert result["java"]["google_java_format"] == {"present": False}


def test_spotless_in_kotlin_gradle_build(repo_builder) -> None:
    repo_builder.write(
        {
            "build.gradle.kts": """
            plugins {
                java
                id("com.diffplug.spotless") version "6.25.0"
            }
            """
        }
    )

    result = FormatterChecker().check(repo_builder.context())

    assert result["java"]["spotless"] == {"present": True, "build_file": "build.gradle.kts"}
    assert result["java"]["checkstyle"] == {"present": False}


def test_maven_match_is_not_overwritten_by_gradle(repo_builder) -> None:
    repo_builder.write(
        {
            "pom.xml": POM_WITH_CHECKSTYLE,
            "build.gradle": "plugins {\n    id 'checkstyle'\n    id 'com.google.googlejavaformat'\n}\n",
        }
    )

    result = FormatterChecker().check(repo_builder.context())

    assert result["java"]["checkstyle"] == {"present": True, "build_file": "pom.xml"}
    assert result["java"]["google_java_format"] == {
        "present": True,
        "build_file": "build.gradle",
    }


def test_monorepo_reports_both_ecosystems(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web"})
    repo_builder.write({".prettierrc.json": "{}", "pom.xml": POM_WITH_CHECKSTYLE})

    result = FormatterChecker().check(repo_builder.context())

    assert result["javascript"]["prettier"]["config_file"] == ".prettierrc.json"
    assert result["java"]["checkstyle"]["present"] is True


def test_no_languages_yields_empty_sections(repo_builder) -> None:
    assert FormatterChecker().check(repo_builder.context()) == {"javascript": {}, "java": {}}


@pytest.mark.parametrize(
    ("files", "expected"),
    [
        ({"package.json": "{}"}, {"javascript": {"prettier": {"present": False, "config_file": None}}, "java": {}}),
        (
            {"pom.xml": "<project/>"},
            {
                "javascript": {},
                "java": {
                    "checkstyle": {"present": False},
                    "spotless": {"present": False},
                    "google_java_format": {"present": False},
                },
            },
        ),
    ],
)
def test_default_follows_detected_languages(repo_builder, files, expected) -> None:
    repo_builder.write(files)

    assert FormatterChecker().default(repo_builder.context()) == expected


def test_latin1_gradle_build_still_reports_plugins(repo_builder) -> None:
    repo_builder.write({"pom.xml": POM_WITH_CHECKSTYLE})
    (repo_builder.path() / "build.gradle").write_bytes(
        b"// Autor: J\xfcrgen\nplugins {\n    id 'com.diffplug.spotless'\n}\n"
    )

    result = FormatterChecker().check(repo_builder.context())

    assert result["java"]["checkstyle"] == {"present": True, "build_file": "pom.xml"}
    assert result["java"]["spotless"] == {"present": True, "build_file": "build.gradle"}


def test_gradle_build_is_not_read_when_pom_covers_every_tool(repo_builder, monkeypatch) -> None:
    def fail(files):
        raise AssertionError("Gradle build should not be loaded")

    monkeypatch.setattr(checker_base, "load_gradle_build", fail)
    probe = checker_base.JavaPluginProbe({"checkstyle": (("maven-checkstyle-plugin",), ("checkstyle",))})
    repo_builder.write({"pom.xml": POM_WITH_CHECKSTYLE})

    assert probe.probe(repo_builder.files()) == {
        "checkstyle": {"present": True, "build_file": "pom.xml"}
    }
