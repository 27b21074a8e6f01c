from collections.abc import Callable
from dataclasses import dataclass

from design_patterns.core.errors.exceptions import InvalidOptionException


@dataclass
class ServerConfig:
    addr: str = ""
    db_uri: str = ""
    timeout: int = 0
    log_file: str = ""

    def __str__(self) -> str:
        return (
            f"config {{addr:{self.addr}, dburi:{self.db_uri}, "
            f"timeout:{self.timeout}, logFile:{self.log_file}}}"
        )


Option = Callable[[ServerConfig], None]


def set_addr(addr: str) -> Option:
    def apply(c: ServerConfig) -> None:
        c.addr = addr

    return apply


def set_db_uri(db_uri: str) -> Option:
    def apply(c: ServerConfig) -> None:
        c.db_uri = db_uri

    return apply


def set_timeout(seconds: int) -> Option:
    if seconds < 0:
        raise InvalidOptionException(
            "Timeout must not be negative", {"timeout": seconds}
        )

    def apply(c: ServerConfig) -> None:
        c.timeout = seconds

    return apply


def set_log_file(path: str) -> Option:
    def apply(c: ServerConfig) -> None:
        c.log_file = path

    return apply


def new_config(*opts: Option) -> ServerConfig:
    """
    Build a config from defaults, applying the options in the given order.
    """
    c = ServerConfig()
    for opt in opts:
        opt(c)
    return c
