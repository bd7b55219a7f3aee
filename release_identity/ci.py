"""CI build providers.

Each provider knows how to make a variable visible to the later steps of the
pipeline that is running this process.
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from typing import Mapping, MutableMapping, Optional, TextIO

from .errors import CIProviderError


class BuildProvider(ABC):
    name: str

    @abstractmethod
    def set_env(self, key: str, value: str) -> None:
        raise NotImplementedError


class GitHubActionsProvider(BuildProvider):
    name = "github"

    def __init__(self, environ: Mapping[str, str]) -> None:
        self.environ = environ

    def set_env(self, key: str, value: str) -> None:
        # Lines appended to $GITHUB_ENV become env vars for the following steps
        env_file = self.environ.get("GITHUB_ENV")
        if not env_file:
            raise CIProviderError("GITHUB_ENV is not set; cannot export variables")
        with open(env_file, "a", encoding="utf-8") as handle:
            handle.write(f"{key}={value}\n")


class AzurePipelinesProvider(BuildProvider):
    name = "azure"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def set_env(self, key: str, value: str) -> None:
        out = self.stream or sys.stdout
        out.write(f"##vso[task.setvariable variable={key}]{value}\n")
        out.flush()


class LocalProvider(BuildProvider):
    name = "local"

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ

    def set_env(self, key: str, value: str) -> None:
        self.environ[key] = value


def detect_build_provider(environ: Optional[Mapping[str, str]] = None) -> BuildProvider:
    env = os.environ if environ is None else environ

    if env.get("GITHUB_ACTIONS", "").lower() == "true":
        return GitHubActionsProvider(env)
    if env.get("TF_BUILD"):
        return AzurePipelinesProvider()
    return LocalProvider()
