"""Parsing, validation and normalisation of GitHub repository references.

Accepted forms:

* ``owner/repo`` (for example ``facebook/react``)
* ``https://github.com/owner/repo``
* ``https://github.com/owner/repo.git``
* ``http://github.com/owner/repo`` (normalised to https)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

__all__ = [
    "AutoLaunchError",
    "InvalidUrlError",
    "GitHubRepoInfo",
    "parse",
    "normalize",
    "validate_owner",
    "validate_repo_name",
]

MAX_OWNER_LENGTH = 39
MAX_REPO_LENGTH = 100

_OWNER_REPO_RE = re.compile(r"([a-zA-Z0-9_.-]+)/([a-zA-Z0-9_.-]+)")
_OWNER_CHARS_RE = re.compile(r"[a-zA-Z0-9_-]+")
_REPO_CHARS_RE = re.compile(r"[a-zA-Z0-9_.-]+")
_SCHEME_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*):(.*)", re.DOTALL)

_GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_PATH_SAFE = "!$%&'()*+,-./:;=@[\\]^_|~"
_SINGLE_DOT = frozenset({".", "%2e"})
_DOUBLE_DOT = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})


class AutoLaunchError(Exception):
    """Base class for errors raised by this package."""


class InvalidUrlError(AutoLaunchError, ValueError):
    """Raised when a repository reference is not a valid GitHub repository."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class GitHubRepoInfo:
    """Owner, repository name and canonical URL of a GitHub repository."""

    owner: str
    repo_name: str
    normalized_url: str


def _github_url(owner: str, repo: str) -> str:
    return f"https://github.com/{owner}/{repo}"


def validate_owner(owner: str) -> None:
    """Raise InvalidUrlError unless *owner* is an acceptable GitHub owner name."""
    if not owner:
        raise InvalidUrlError("Имя владельца репозитория не может быть пустым")
    if len(owner.encode("utf-8")) > MAX_OWNER_LENGTH:
        raise InvalidUrlError(
            f"Имя владельца слишком длинное (максимум {MAX_OWNER_LENGTH} символов): {owner}"
        )
    if not _OWNER_CHARS_RE.fullmatch(owner):
        raise InvalidUrlError(
            f"Имя владельца содержит недопустимые символы: '{owner}'. "
            "Разрешены только буквы, цифры, дефисы и подчеркивания"
        )
    if owner.startswith("-") or owner.endswith("-"):
        raise InvalidUrlError(
            f"Имя владельца не может начинаться или заканчиваться дефисом: {owner}"
        )


def validate_repo_name(repo: str) -> None:
    """Raise InvalidUrlError unless *repo* is an acceptable repository name."""
    if not repo:
        raise InvalidUrlError("Имя репозитория не может быть пустым")
    if len(repo.encode("utf-8")) > MAX_REPO_LENGTH:
        raise InvalidUrlError(
            f"Имя репозитория слишком длинное (максимум {MAX_REPO_LENGTH} символов): {repo}"
        )
    if not _REPO_CHARS_RE.fullmatch(repo):
        raise InvalidUrlError(
            f"Имя репозитория содержит недопустимые символы: '{repo}'. "
            "Разрешены только буквы, цифры, дефисы, подчеркивания и точки"
        )


def _parse_owner_repo(text: str) -> GitHubRepoInfo | None:
    match = _OWNER_REPO_RE.fullmatch(text)
    if match is None:
        return None
    owner, repo = match.groups()
    validate_owner(owner)
    validate_repo_name(repo)
    return GitHubRepoInfo(owner, repo, _github_url(owner, repo))


class _UrlSyntaxError(Exception):
    pass


def _split_host(authority: str, special: bool) -> str | None:
    """Return the host of an authority component, without userinfo or port."""
    _, _, hostport = authority.rpartition("@")
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise _UrlSyntaxError("invalid IPv6 address")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            raise _UrlSyntaxError("invalid IPv6 address")
        port = rest[1:]
    else:
        host, _, port = hostport.partition(":")
    if port and (not port.isascii() or not port.isdigit() or int(port) > 65535):
        raise _UrlSyntaxError("invalid port number")
    if not host:
        if special:
            raise _UrlSyntaxError("empty host")
        return None
    return host.lower() if special else host


def _path_segments(path: str) -> list[str]:
    """Split a path into segments, resolving dot segments and escaping."""
    raw = path[1:].split("/") if path.startswith("/") else path.split("/")
    resolved: list[str] = []
    last = len(raw) - 1
    for position, segment in enumerate(raw):
        lowered = segment.lower()
        if lowered in _SINGLE_DOT:
            if position == last:
                resolved.append("")
        elif lowered in _DOUBLE_DOT:
            if resolved:
                resolved.pop()
            if position == last:
                resolved.append("")
        else:
            resolved.append(quote(segment, safe=_PATH_SAFE))
    return resolved or [""]


def _split_url(text: str) -> tuple[str | None, list[str], str]:
    """Return host, path segments and path of an absolute URL."""
    cleaned = re.sub(r"[\t\n\r]", "", text)
    match = _SCHEME_RE.fullmatch(cleaned)
    if match is None:
        raise _UrlSyntaxError("relative URL without a base")
    scheme, rest = match.group(1).lower(), match.group(2)
    special = scheme in _SPECIAL_SCHEMES

    if special:
        rest = rest.replace("\\", "/").lstrip("/")
    elif rest.startswith("//"):
        rest = rest[2:]
    else:
        path = re.split(r"[?#]", rest, maxsplit=1)[0]
        return None, _path_segments(path), path

    authority = re.split(r"[/?#]", rest, maxsplit=1)[0]
    remainder = rest[len(authority) :]
    host = _split_host(authority, special)
    path = re.split(r"[?#]", remainder, maxsplit=1)[0]
    if special and not path:
        path = "/"
    return host, _path_segments(path), path


def _parse_full_url(text: str) -> GitHubRepoInfo:
    try:
        host, segments, path = _split_url(text)
    except _UrlSyntaxError as exc:
        raise InvalidUrlError(f"Невалидный URL '{text}': {exc}") from None

    if host is None:
        raise InvalidUrlError("URL должен содержать хост")
    if host not in _GITHUB_HOSTS:
        raise InvalidUrlError(
            f"URL должен быть GitHub репозиторием (github.com), получен: {host}"
        )
    if len(segments) < 2:
        raise InvalidUrlError(
            "URL должен содержать владельца и имя репозитория "
            f"(формат: github.com/owner/repo), получен путь: {path}"
        )

    owner, repo = segments[0], segments[1]
    repo = repo.removesuffix(".git")
    validate_owner(owner)
    validate_repo_name(repo)
    return GitHubRepoInfo(owner, repo, _github_url(owner, repo))


def parse(text: str) -> GitHubRepoInfo:
    """Parse a GitHub repository reference into its owner, name and canonical URL."""
    trimmed = text.strip()
    if not trimmed:
        raise InvalidUrlError("URL не может быть пустым")
    info = _parse_owner_repo(trimmed)
    if info is not None:
        return info
    return _parse_full_url(trimmed)


def normalize(text: str) -> str:
    """Return the canonical https URL of a GitHub repository reference."""
    return parse(text).normalized_url