from __future__ import annotations

from readiness.checkers import LintingChecker


def test_eslint_flat_config(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web"})
    repo_builder.write({"eslint.config.mjs": "export default [];\n"})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"] == {"present": True, "config_file": "eslint.config.mjs"}


def test_eslint_legacy_config_wins_in_candidate_order(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web"})
    repo_builder.write({".eslintrc.json": "{}", "eslint.config.js": "module.exports = [];\n"})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"]["config_file"] == ".eslintrc.json"


def test_eslint_config_embedded_in_package_json(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web", "eslintConfig": {"extends": "next"}})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"] == {"present": True, "config_file": "package.json"}


def test_eslint_missing(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web", "eslintConfig": None})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"] == {"present": False, "config_file": None}


def test_empty_embedded_eslint_config_counts_as_present(repo_builder) -> None:
    repo_builder.write_json("package.json", {"name": "web", "eslintConfig": {}})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"] == {"present": True, "config_file": "package.json"}


def test_spotbugs_and_pmd_in_pom(repo_builder) -> None:
    repo_builder.write(
        {
            "pom.xml": """
            <project>
              <build>
                <plugins>
                  <plugin><artifactId>spotbugs-maven-plugin</artifactId></plugin>
                  <plugin><artifactId>maven-pmd-plugin</artifactId></plugin>
                </plugins>
              </build>
            </project>
            """
        }
    )

    result = LintingChecker().check(repo_builder.context())

    assert result["java"] == {
        "spotbugs": {"present": True, "build_file": "pom.xml"},
        "pmd": {"present": True, "build_file": "pom.xml"},
    }


def test_spotbugs_via_gradle_plugin_id(repo_builder) -> None:
    repo_builder.write(
        {"build.gradle": "plugins {\n    id 'java'\n    id 'com.github.spotbugs' version '6.0.0'\n}\n"}
    )

    result = LintingChecker().check(repo_builder.context())

    assert result["java"]["spotbugs"] == {"present": True, "build_file": "build.gradle"}
    assert result["java"]["pmd"] == {"present": False}


def test_pmd_via_apply_plugin(repo_builder) -> None:
    repo_builder.write({"build.gradle": "apply plugin: 'java'\napply plugin: 'pmd'\n"})

    result = LintingChecker().check(repo_builder.context())

    assert result["java"]["pmd"] == {"present": True, "build_file": "build.gradle"}


def test_typescript_project_gets_eslint_probe(repo_builder) -> None:
    repo_builder.write_json("tsconfig.json", {})
    repo_builder.write({".eslintrc.cjs": "module.exports = {};\n"})

    result = LintingChecker().check(repo_builder.context())

    assert result["javascript"]["eslint"]["config_file"] == ".eslintrc.cjs"
