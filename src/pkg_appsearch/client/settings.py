from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL_FORMAT = "https://{host}.api.swiftype.com/api/as/v1/"


@dataclass(slots=True)
class ClientSettings:
    """
    App Search connection settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    host_identifier: str
    api_key: str = field(repr=False)
    # "{host}" placeholder; a legacy "%s" placeholder is accepted too
    base_url_format: str = DEFAULT_BASE_URL_FORMAT
    timeout: float = 30.0
    verify_ssl: bool = True

    @property
    def base_url(self) -> str:
        fmt = self.base_url_format.strip()
        if "%s" in fmt:
            b = fmt % self.host_identifier
        else:
            b = fmt.format(host=self.host_identifier)
        return b if b.endswith("/") else b + "/"
