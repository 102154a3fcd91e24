"""Value objects for the account domain."""

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

from pydantic import RootModel, field_validator

from vcsauth.domain.shared.error import ValidationError
from vcsauth.domain.shared.model.value import RootValueObject, ValueObject

GITHUB_DOT_COM = "github.com"

_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_PORT_PATTERN = re.compile(r"^:(\d+)")


class AccountId(RootModel[UUID]):
    """Unique identifier for an Account."""

    @classmethod
    def generate(cls) -> "AccountId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class WorkspaceId(RootValueObject[str]):
    """The caller context a default account is tracked for (e.g. a project path)."""

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Workspace id must not be blank")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


def _strip_scheme(url: str) -> str:
    return _SCHEME_PATTERN.sub("", url, count=1)


def _strip_user_info(url: str) -> str:
    # Only the authority part may carry user info, never the path
    slash = url.find("/")
    authority_end = slash if slash != -1 else len(url)
    at = url.rfind("@", 0, authority_end)
    return url[at + 1 :] if at != -1 else url


def _strip_port(host_and_rest: str, host_end: int) -> str:
    match = _PORT_PATTERN.match(host_and_rest[host_end:])
    if match is None:
        return host_and_rest
    return host_and_rest[:host_end] + host_and_rest[host_end + match.end() :]


class ServerPath(ValueObject):
    """A code-hosting server endpoint an account is registered against.

    Examples:
    - github.com: host="github.com"
    - GitHub Enterprise: host="ghe.example.com", port=8443, suffix="/github"

    `suffix` is empty or starts with '/' and never ends with '/'.
    """

    host: str
    port: int | None = None
    suffix: str = ""
    use_https: bool = True

    @field_validator("host")
    @classmethod
    def normalize_host(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v or ":" in v:
            raise ValueError(f"Invalid server host: {v!r}")
        return v.lower()

    @field_validator("suffix")
    @classmethod
    def normalize_suffix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @classmethod
    def from_string(cls, text: str) -> "ServerPath":
        """Parse a server descriptor such as 'github.com' or 'https://ghe.local:8443/gh'.

        Raises:
            ValidationError: If the text has no host part.
        """
        raw = text.strip()
        use_https = not raw.lower().startswith("http://")
        rest = _strip_scheme(raw)

        slash = rest.find("/")
        authority, suffix = (rest, "") if slash == -1 else (rest[:slash], rest[slash:])
        host, _, port_text = authority.partition(":")
        if not host:
            raise ValidationError(f"Server descriptor has no host: {text!r}", field="server")

        port: int | None = None
        if port_text:
            if not port_text.isdigit():
                raise ValidationError(f"Invalid port in server descriptor: {text!r}", field="server")
            port = int(port_text)

        try:
            return cls(host=host, port=port, suffix=suffix, use_https=use_https)
        except ValueError as e:
            raise ValidationError(str(e), field="server") from e

    @property
    def is_github_dot_com(self) -> bool:
        return self.host == GITHUB_DOT_COM

    def matches(self, url: str) -> bool:
        """Check whether a git remote or request URL points at this server.

        Scheme, user info and port of the URL are ignored; host and suffix are
        compared case-insensitively. The match must end on a path or scp-style
        boundary, so 'github.com.evil.io' does not match 'github.com'.
        """
        remainder = _strip_user_info(_strip_scheme(url.strip()))
        prefix = self.host + self.suffix

        host_end = len(self.host)
        if remainder[:host_end].lower() != self.host:
            return False
        remainder = _strip_port(remainder, host_end)

        if remainder[: len(prefix)].lower() != prefix.lower():
            return False
        boundary = remainder[len(prefix) : len(prefix) + 1]
        return boundary in ("", "/", ":")

    def to_url(self) -> str:
        scheme = "https" if self.use_https else "http"
        port = f":{self.port}" if self.port is not None else ""
        return f"{scheme}://{self.host}{port}{self.suffix}"

    def to_api_url(self) -> str:
        """REST API root for this server."""
        if self.is_github_dot_com:
            return f"https://api.{GITHUB_DOT_COM}"
        return f"{self.to_url()}/api/v3"

    def __str__(self) -> str:
        port = f":{self.port}" if self.port is not None else ""
        return f"{self.host}{port}{self.suffix}"


@dataclass(frozen=True)
class AuthData:
    """Username and secret to authenticate a request with."""

    username: str
    secret: str

    def __repr__(self) -> str:
        return f"AuthData(username={self.username!r}, secret='***')"
