"""Resolve a local git checkout into a deployable source reference."""

import subprocess
from typing import Callable, Dict, List, Optional, Tuple

from rich.prompt import Prompt

from ..exceptions import GitSourceError
from ..utils import console


def prompt_remote(names: List[str]) -> str:
    """Ask which remote to deploy from."""
    console.warning("Select git remote:")
    return Prompt.ask("Remote", choices=names, default=names[0], console=console)


class GitSource:
    """Checks that a checkout is clean and pushed, then builds its source URL.

    The resulting reference looks like ``<fetch-url>.git#<commit-hash>``.
    """

    def __init__(self, path: str = ".", select_remote: Optional[Callable[[List[str]], str]] = None):
        self.path = path
        self.select_remote = select_remote or prompt_remote

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ["git", *args],
                cwd=self.path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitSourceError("git executable not found") from e

    def _output(self, *args: str) -> str:
        return self._run(*args).stdout.strip()

    def remotes(self) -> Dict[str, str]:
        """Map remote names to their fetch URLs."""
        try:
            output = self._output("remote", "-v")
        except subprocess.CalledProcessError as e:
            raise GitSourceError(f"Not a git repository: {self.path}") from e

        remotes: Dict[str, str] = {}
        for line in output.splitlines():
            parts = line.split()
            if len(parts) == 3 and parts[2] == "(fetch)":
                remotes[parts[0]] = parts[1]
        return remotes

    def resolve_remote(self) -> Tuple[str, str]:
        remotes = self.remotes()
        if not remotes:
            raise GitSourceError("The remotes were not found")
        if len(remotes) == 1:
            return next(iter(remotes.items()))

        try:
            name = self.select_remote(list(remotes))
        except (KeyboardInterrupt, EOFError) as e:
            raise GitSourceError("Canceled") from e
        if name not in remotes:
            raise GitSourceError("Canceled")
        return name, remotes[name]

    def _head(self, ref: str) -> str:
        try:
            return self._output("log", "-n", "1", "--format=%H", ref)
        except subprocess.CalledProcessError:
            return ""

    def build_remote_url(self, remote: Optional[Tuple[str, str]] = None) -> str:
        """Validate the checkout and return ``<url>.git#<hash>``.

        Args:
            remote: Already resolved ``(name, fetch_url)``; resolved here when omitted.

        Raises:
            GitSourceError: If any check fails.
        """
        remote, fetch_url = remote or self.resolve_remote()

        try:
            self._run("ls-remote", remote)
        except subprocess.CalledProcessError as e:
            raise GitSourceError(f"Remote url with name {remote} not exists") from e

        branch = self._output("rev-parse", "--abbrev-ref", "HEAD")
        if self._output("status", "--porcelain"):
            raise GitSourceError("There are unstaged or uncommitted changes")

        try:
            self._run("fetch", remote)
            remote_refs = self._output("ls-remote", remote, branch)
        except subprocess.CalledProcessError as e:
            raise GitSourceError(f"Unable to fetch {remote}: {e.stderr.strip()}") from e
        if not remote_refs:
            raise GitSourceError(f'Remote branch "{remote}/{branch}" not exists')

        local_commit = self._head(branch)
        remote_commit = self._head(f"{remote}/{branch}")
        if not local_commit or not remote_commit or local_commit != remote_commit:
            raise GitSourceError("Head origin commit is not the same as the local origin commit")

        suffix = "" if fetch_url.endswith(".git") else ".git"
        return f"{fetch_url}{suffix}#{remote_commit}"
