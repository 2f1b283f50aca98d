from __future__ import annotations

from readiness.checkers import SastChecker


def test_codeql_workflow(repo_builder) -> None:
    repo_builder.write({".github/workflows/codeql-analysis.yml": "name: CodeQL\n"})

    result = SastChecker().check(repo_builder.context())

    assert result["codeql"] == {
        "present": True,
        "workflow_file": ".github/workflows/codeql-analysis.yml",
    }
    assert result["semgrep"] == {"present": False}


def test_codeql_workflow_with_yaml_extension(repo_builder) -> None:
    repo_builder.write({".github/workflows/run-codeql.yaml": "name: CodeQL\n"})

    result = SastChecker().check(repo_builder.context())

    assert result["codeql"]["workflow_file"] == ".github/workflows/run-codeql.yaml"


def test_semgrep_config_beats_workflow(repo_builder) -> None:
    repo_builder.write(
        {
            ".semgrep.yml": "rules: []\n",
            ".github/workflows/semgrep.yml": "name: Semgrep\n",
        }
    )

    result = SastChecker().check(repo_builder.context())

    assert result["semgrep"] == {"present": True, "config_file": ".semgrep.yml"}


def test_semgrep_workflow_only(repo_builder) -> None:
    repo_builder.write({".github/workflows/semgrep-scan.yml": "name: Semgrep\n"})

    result = SastChecker().check(repo_builder.context())

    assert result["semgrep"] == {
        "present": True,
        "workflow_file": ".github/workflows/semgrep-scan.yml",
    }


def test_unrelated_workflows_are_ignored(repo_builder) -> None:
    repo_builder.write({".github/workflows/ci.yml": "name: CI\n"})

    assert SastChecker().check(repo_builder.context()) == {
        "codeql": {"present": False},
        "semgrep": {"present": False},
    }
