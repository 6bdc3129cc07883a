"""End-to-end tests for the describe workflow and the command line."""

from pathlib import Path

import pytest

from semverdesc.models.options import DescribeOptions, DescriptorStyle, FormatOptions
from semverdesc.workflow import FATAL_EXIT_CODE, main, run_workflow, split_mark_options

from conftest import create_commit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SEMVERDESC_ABBREV", "SEMVERDESC_CANDIDATES", "SEMVERDESC_DIRTY_MARK", "SEMVERDESC_LEGACY", "SEMVERDESC_TAGS"):
        monkeypatch.delenv(name, raising=False)


def short_head(repo, length=7):
    return repo.head.commit.hexsha[:length]


def test_run_workflow(tagged_repo):
    state = run_workflow({"repo_path": tagged_repo.working_dir})

    assert state["descriptor"] == f"v1.0.0+2.g{short_head(tagged_repo)}"
    assert not state["errors"]


def test_run_workflow_with_options(tagged_repo):
    (Path(tagged_repo.working_dir) / "test.txt").write_text("uncommitted")
    state = run_workflow(
        {
            "repo_path": tagged_repo.working_dir,
            "describe_options": DescribeOptions(include_lightweight=True),
            "format_options": FormatOptions(abbrev=10, dirty_mark="-dirty"),
            "style": DescriptorStyle.LEGACY,
        }
    )

    assert state["descriptor"] == f"v1.1.0-rc-1-g{short_head(tagged_repo, 10)}-dirty"


def test_cli_semver(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir]) == 0
    assert capsys.readouterr().out == f"v1.0.0+2.g{short_head(tagged_repo)}\n"


def test_cli_legacy_tags(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir, "--legacy", "--tags"]) == 0
    assert capsys.readouterr().out == f"v1.1.0-rc-1-g{short_head(tagged_repo)}\n"


def test_cli_exact_tag(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir, "v1.0.0"]) == 0
    assert capsys.readouterr().out == "v1.0.0\n"


def test_cli_long(tagged_repo, capsys):
    sha = tagged_repo.commit("v1.0.0").hexsha
    assert main(["--path", tagged_repo.working_dir, "--long", "--abbrev", "0", "v1.0.0"]) == 0
    assert capsys.readouterr().out == f"v1.0.0+0.g{sha[:7]}\n"


def test_cli_dirty_default_mark(tagged_repo, capsys):
    (Path(tagged_repo.working_dir) / "test.txt").write_text("uncommitted")
    assert main(["--path", tagged_repo.working_dir, "--dirty"]) == 0
    assert capsys.readouterr().out == f"v1.0.0+2.g{short_head(tagged_repo)}-dirty\n"


def test_cli_exact_match_fails(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir, "--exact-match"]) == FATAL_EXIT_CODE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("fatal: no tag exactly matches")


def test_cli_no_names(temp_git_repo, capsys):
    create_commit(temp_git_repo, "Initial content", "Initial commit")

    assert main(["--path", temp_git_repo.working_dir]) == FATAL_EXIT_CODE
    assert "fatal: No names found, cannot describe anything." in capsys.readouterr().err


def test_cli_always(temp_git_repo, capsys):
    create_commit(temp_git_repo, "Initial content", "Initial commit")

    assert main(["--path", temp_git_repo.working_dir, "--always"]) == 0
    assert capsys.readouterr().out == f"{short_head(temp_git_repo)}\n"


def test_cli_match(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir, "--tags", "--exclude", "*-rc"]) == 0
    assert capsys.readouterr().out == f"v1.0.0+2.g{short_head(tagged_repo)}\n"


def test_cli_environment_defaults(tagged_repo, capsys, monkeypatch):
    monkeypatch.setenv("SEMVERDESC_LEGACY", "true")
    monkeypatch.setenv("SEMVERDESC_ABBREV", "9")

    assert main(["--path", tagged_repo.working_dir]) == 0
    assert capsys.readouterr().out == f"v1.0.0-2-g{short_head(tagged_repo, 9)}\n"


def test_cli_bad_environment(tagged_repo, capsys, monkeypatch):
    monkeypatch.setenv("SEMVERDESC_CANDIDATES", "lots")

    assert main(["--path", tagged_repo.working_dir]) == FATAL_EXIT_CODE
    assert "SEMVERDESC_CANDIDATES must be an integer" in capsys.readouterr().err


def test_cli_negative_abbrev(tagged_repo):
    with pytest.raises(SystemExit) as exc_info:
        main(["--path", tagged_repo.working_dir, "--abbrev", "-1"])
    assert exc_info.value.code == 2


def test_split_mark_options():
    argv = ["--dirty=.d", "--broken=-b", "--dirty", "--broken", "v1.0.0"]
    assert split_mark_options(argv) == ["--dirty-mark=.d", "--broken-mark=-b", "--dirty", "--broken", "v1.0.0"]


def test_cli_dirty_flag_does_not_take_commitish(tagged_repo, capsys):
    (Path(tagged_repo.working_dir) / "test.txt").write_text("uncommitted")

    assert main(["--path", tagged_repo.working_dir, "--dirty", "HEAD~1"]) == FATAL_EXIT_CODE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "HEAD~1" in captured.err


def test_cli_dirty_with_commitish_fails(tagged_repo, capsys):
    assert main(["--path", tagged_repo.working_dir, "--dirty=-dirty", "v1.0.0"]) == FATAL_EXIT_CODE
    assert capsys.readouterr().err.startswith("fatal: Cannot check the working tree when describing v1.0.0")


def test_cli_dirty_custom_mark(tagged_repo, capsys):
    (Path(tagged_repo.working_dir) / "test.txt").write_text("uncommitted")

    assert main(["--path", tagged_repo.working_dir, "--dirty=.dirty", "HEAD"]) == 0
    assert capsys.readouterr().out == f"v1.0.0+2.g{short_head(tagged_repo)}.dirty\n"
