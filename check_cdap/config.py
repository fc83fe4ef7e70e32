# ============================================================================
# check_cdap/config.py (env + flag resolution)
# ============================================================================
import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from check_cdap.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_URI = "CHECK_CDAP_URI"
ENV_TIMEOUT = "CHECK_CDAP_TIMEOUT"
ENV_TOKEN = "CHECK_CDAP_TOKEN"

DEFAULT_TIMEOUT = 30.0


class CheckConfig(BaseModel):
    uri: str = Field(min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, allow_inf_nan=False)
    token: str | None = None
    insecure: bool = False
    verbose: bool = False

    @field_validator("uri")
    @classmethod
    def _normalize_uri(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("URI is empty")
        if "://" not in v:
            v = "http://" + v
        return v

    @field_validator("token")
    @classmethod
    def _blank_token_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


def load_config(
    uri: str | None = None,
    timeout: str | float | None = None,
    token: str | None = None,
    insecure: bool = False,
    verbose: bool = False,
) -> CheckConfig:
    """
    Merge command-line values with the CHECK_CDAP_* environment.

    Explicit arguments win; anything left as None falls back to the environment.
    Raises ConfigError when the URI is missing or a value does not validate.
    """
    uri = uri if uri is not None else os.getenv(ENV_URI)
    timeout = timeout if timeout is not None else os.getenv(ENV_TIMEOUT)
    token = token if token is not None else os.getenv(ENV_TOKEN)

    if not uri or not uri.strip():
        raise ConfigError(f"No CDAP URI given, use -u or set {ENV_URI}")

    fields = {"uri": uri, "token": token, "insecure": insecure, "verbose": verbose}
    if timeout not in (None, ""):
        fields["timeout"] = timeout

    try:
        cfg = CheckConfig(**fields)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "config"
        raise ConfigError(f"Invalid {field}: {err.get('msg')}") from e

    logger.debug(
        "config uri=%s timeout=%s token=%s insecure=%s",
        cfg.uri,
        cfg.timeout,
        "set" if cfg.token else "unset",
        cfg.insecure,
    )
    return cfg
