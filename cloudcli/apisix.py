"""Gateway configuration files and reloading a gateway running on bare metal."""

from __future__ import annotations

import os
import secrets
import tempfile
from typing import Any, Mapping

import yaml

from cloudcli import commands, options

# Directory the gateway reads its TLS material from.
APISIX_TLS_DIR = "/usr/local/apisix/conf/ssl"

_FILE_MODE = 0o644
_TEMP_ATTEMPTS = 10000


def _load_mapping(data: bytes | str | None, what: str) -> dict[str, Any]:
    if data is None:
        return {}
    try:
        loaded = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ValueError(f"{what}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(
            f"{what}: cannot unmarshal {type(loaded).__name__} into a mapping"
        )
    return loaded


def _merge(target: dict[str, Any], overrides: Mapping[str, Any]) -> None:
    for key, value in overrides.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge(current, value)
        elif value is not None:
            target[key] = value


def merge_config(
    config: bytes | str | None, default_config: bytes | str | None
) -> dict[str, Any]:
    """Merge a user configuration with the essential settings, which win."""
    data = _load_mapping(config, "unmarshal config")
    defaults = _load_mapping(default_config, "unmarshal default config")
    _merge(data, defaults)
    return data


def _dump(config: Mapping[str, Any]) -> str:
    try:
        return yaml.safe_dump(dict(config), default_flow_style=False)
    except yaml.YAMLError as exc:
        raise ValueError(f"marshal config: {exc}") from exc


def _split_pattern(pattern: str) -> tuple[str, str]:
    if os.sep in pattern or (os.altsep and os.altsep in pattern):
        raise ValueError(f"pattern contains path separator: {pattern}")
    prefix, star, suffix = pattern.rpartition("*")
    if not star:
        return pattern, ""
    return prefix, suffix


def save_config_to_temp(config: Mapping[str, Any], pattern: str) -> str:
    """Write the configuration to a new temporary file and return its path.

    The last ``*`` in ``pattern`` is replaced by a random number.
    """
    data = _dump(config)
    prefix, suffix = _split_pattern(pattern)
    directory = tempfile.gettempdir()
    for _ in range(_TEMP_ATTEMPTS):
        name = os.path.join(directory, f"{prefix}{secrets.randbelow(2**32)}{suffix}")
        try:
            fd = os.open(name, os.O_RDWR | os.O_CREAT | os.O_EXCL, 0o600)
        except FileExistsError:
            continue
        # Readable by other users so processes inside a container can read it.
        os.chmod(name, _FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(data)
        return name
    raise FileExistsError(f"could not create a temporary file from pattern {pattern}")


def save_config(config: Mapping[str, Any], filepath: str | os.PathLike[str]) -> None:
    """Write the configuration to ``filepath``, readable by everyone."""
    data = _dump(config)
    with open(filepath, "w", encoding="utf-8") as handle:
        handle.write(data)
    os.chmod(filepath, _FILE_MODE)


def reload(tls_dir: str | os.PathLike[str]) -> None:
    """Install the TLS material from ``tls_dir`` and reload a bare-metal gateway."""
    bin_path = options.GLOBAL.deploy.bare.apisix_bin_path
    dryrun = options.GLOBAL.dry_run
    target = APISIX_TLS_DIR

    remove = commands.Cmd("rm", dryrun)
    remove.append_args("-rf", target)
    remove.execute()

    copy = commands.Cmd("cp", dryrun)
    copy.append_args("-prf", os.fspath(tls_dir), target)
    copy.execute()

    gateway = commands.Cmd(bin_path, dryrun)
    gateway.append_args("reload")
    gateway.execute()