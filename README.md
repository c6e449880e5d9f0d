# autolaunch

Parse, validate and normalize references to GitHub repositories.

Accepted input forms:

- `owner/repo`, for example `facebook/react`
- `https://github.com/owner/repo`
- `https://github.com/owner/repo.git`
- `https://www.github.com/owner/repo`
- `http://github.com/owner/repo`

Every accepted form is normalized to `https://github.com/<owner>/<repo>`. The
result always uses https and never has a `.git` suffix. Whitespace at either end
of the input is ignored. In a full URL the host name is compared without regard
to case, so `https://GitHub.COM/owner/repo` is accepted. A query, a fragment or
any path segments after the repository name are ignored.

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the standard library.

## Usage

```python
from autolaunch.url_parser import parse, normalize, InvalidUrlError

info = parse("https://github.com/rust-lang/rust.git")
info.owner           # "rust-lang"
info.repo_name       # "rust"
info.normalized_url  # "https://github.com/rust-lang/rust"

normalize("facebook/react")  # "https://github.com/facebook/react"

try:
    parse("https://gitlab.com/test/repo")
except InvalidUrlError as exc:
    print(exc)
```

`parse` returns a `GitHubRepoInfo`, a frozen dataclass with the fields `owner`,
`repo_name` and `normalized_url`. `normalize` returns only the `normalized_url`,
and applying it to its own result gives the same string again.

## Validation rules

Owner names:

- must not be empty, and are at most 39 characters long
- may contain only letters, digits, hyphens and underscores
- must not start or end with a hyphen

Repository names:

- must not be empty, and are at most 100 characters long
- may contain only letters, digits, hyphens, underscores and dots

These checks can also be run on their own with `validate_owner` and
`validate_repo_name`; each returns `None` when the name is acceptable and raises
`InvalidUrlError` otherwise.

A full URL must also name a host, and that host must be `github.com` or
`www.github.com`; the path must hold at least an owner and a repository name.

## Errors

Invalid input raises `InvalidUrlError`, a subclass of both `AutoLaunchError` and
`ValueError`. The error messages are in Russian and describe the problem that was
found (empty input, a name that is too long, characters that are not allowed, a
host other than GitHub, a missing repository name, or a URL that cannot be
parsed).

## Scope

The package works on text only. It does not contact GitHub, check that a
repository exists, download or clone anything, and it has no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```