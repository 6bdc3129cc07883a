"""
Commit graph backed by an on-disk git repository through GitPython.
"""

from typing import Iterator

from git import Repo, TagReference
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError, ODBError
from loguru import logger

from semverdesc.errors import CorruptObjectError, GraphAccessError, ObjectNotFoundError
from semverdesc.types.graph import CommitNode, Marker


class RepositoryGraph:
    """A CommitGraph reading straight from a git repository."""

    def __init__(self, repo_path: str):
        try:
            self.repo = Repo(repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise ObjectNotFoundError(f"Not a git repository: {repo_path}") from e

    def resolve(self, commitish: str) -> str:
        try:
            return self.repo.commit(commitish).hexsha
        except (BadName, BadObject, ValueError) as e:
            raise ObjectNotFoundError(f"Not a valid object name {commitish}", address=commitish) from e
        except (GitCommandError, ODBError) as e:
            raise CorruptObjectError(f"Could not read {commitish}: {e}", address=commitish) from e

    def get_commit(self, address: str) -> CommitNode:
        try:
            commit = self.repo.commit(address)
            return CommitNode(
                address=commit.hexsha,
                parents=tuple(parent.hexsha for parent in commit.parents),
                timestamp=commit.committed_date,
            )
        except (BadName, BadObject, ValueError) as e:
            raise ObjectNotFoundError(f"Commit {address} not found", address=address) from e
        except (GitCommandError, ODBError) as e:
            raise CorruptObjectError(f"Could not read commit {address}: {e}", address=address) from e

    def iter_markers(self, all_refs: bool = False) -> Iterator[Marker]:
        refs = self.repo.refs if all_refs else self.repo.tags
        for ref in refs:
            if all_refs and ref.path.endswith("/HEAD"):
                continue
            try:
                target = ref.commit.hexsha
            except ValueError:
                # Tags may point at trees or blobs; those cannot describe a commit.
                logger.debug(f"Skipping {ref.path}: does not point at a commit")
                continue

            annotated = isinstance(ref, TagReference) and ref.tag is not None
            name = ref.path[len("refs/"):] if all_refs else ref.name
            yield Marker(name=name, target=target, annotated=annotated)

    def is_dirty(self) -> bool:
        try:
            return self.repo.is_dirty(untracked_files=False)
        except GitCommandError as e:
            raise GraphAccessError(f"Could not check the working tree: {e}") from e
