from typing import Any, Self

import toml
from pydantic import BaseModel, SecretStr

DEFAULT_ENDPOINT = "https://cronitor.io"
CONFIG_SECTION = "cronitor"

_config: dict[str, Any] | None = None


class ConfigNotFound(Exception):
    pass


def get_config() -> dict[str, Any] | None:
    return _config


def init(config: dict[str, Any] | None) -> dict[str, Any] | None:
    global _config  # noqa: PLW0603
    _config = config
    return _config


def init_from_toml(configfile: str) -> dict[str, Any] | None:
    return init(toml.load(configfile))


class ProviderSettings(BaseModel):
    """Connection settings shared by every resource of a provider instance."""

    api_key: SecretStr
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_config(cls, section: str = CONFIG_SECTION) -> Self:
        config = get_config()
        try:
            data = (config or {})[section]
        except KeyError:
            raise ConfigNotFound(
                f"section [{section}] not found in config file"
            ) from None
        # an empty endpoint means "use the default", like the provider block does
        if not data.get("endpoint"):
            data = {k: v for k, v in data.items() if k != "endpoint"}
        return cls(**data)
