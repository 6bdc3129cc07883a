"""Shared fixtures: throwaway git repositories and in-memory histories."""

from pathlib import Path
from typing import List

import pytest
from git import Repo

from semverdesc.types.graph import CommitNode


def create_commit(repo: Repo, content: str, message: str) -> str:
    """Helper function to create a commit in the test repository."""
    test_file = Path(repo.working_dir) / "test.txt"
    test_file.write_text(content)
    repo.index.add(["test.txt"])
    return repo.index.commit(message).hexsha


def linear_history(length: int) -> List[CommitNode]:
    """Commits c0 (root) .. c<length-1> (tip), one second apart."""
    commits = []
    for i in range(length):
        parents = (f"c{i - 1}",) if i else ()
        commits.append(CommitNode(address=f"c{i}", parents=parents, timestamp=1000 + i))
    return commits


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a basic temporary Git repository with a committer identity."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")
    return repo


@pytest.fixture
def tagged_repo(temp_git_repo):
    """v1.0.0 (annotated) two commits back, v1.1.0-rc (lightweight) one back."""
    repo = temp_git_repo
    create_commit(repo, "Initial content", "Initial commit")
    create_commit(repo, "Feature A", "Add feature A")
    repo.create_tag("v1.0.0", message="Release 1.0.0")
    create_commit(repo, "Feature B", "Add feature B")
    repo.create_tag("v1.1.0-rc")
    create_commit(repo, "Feature C", "Add feature C")
    return repo
