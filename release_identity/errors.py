from __future__ import annotations


class ReleaseIdentityError(Exception):
    pass


class GitCommandError(ReleaseIdentityError):
    pass


class CIProviderError(ReleaseIdentityError):
    pass


class ConfigValidationError(ReleaseIdentityError):
    pass
