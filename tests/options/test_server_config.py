import pytest

from design_patterns.core.errors.exceptions import InvalidOptionException
from design_patterns.options.server_config import (
    ServerConfig,
    new_config,
    set_addr,
    set_db_uri,
    set_log_file,
    set_timeout,
)


def test_new_config_without_options_uses_defaults() -> None:
    assert new_config() == ServerConfig()
    assert str(new_config()) == "config {addr:, dburi:, timeout:0, logFile:}"


def test_new_config_applies_options() -> None:
    config = new_config(set_addr("Some addr"), set_db_uri("db uri"))

    assert str(config) == "config {addr:Some addr, dburi:db uri, timeout:0, logFile:}"


def test_new_config_applies_every_option() -> None:
    config = new_config(
        set_addr("localhost:8080"),
        set_db_uri("postgres://db"),
        set_timeout(30),
        set_log_file("/tmp/app.log"),
    )

    assert config == ServerConfig(
        addr="localhost:8080",
        db_uri="postgres://db",
        timeout=30,
        log_file="/tmp/app.log",
    )


def test_later_options_override_earlier_ones() -> None:
    config = new_config(set_addr("first"), set_addr("second"))

    assert config.addr == "second"


def test_options_are_reusable_across_configs() -> None:
    opt = set_timeout(5)

    first = new_config(opt)
    second = new_config(opt)

    assert first is not second
    assert first.timeout == second.timeout == 5


def test_set_timeout_rejects_negative_values() -> None:
    with pytest.raises(InvalidOptionException) as exc_info:
        set_timeout(-1)

    assert exc_info.value.additional_info == {"timeout": -1}
