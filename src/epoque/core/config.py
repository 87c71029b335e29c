"""Runtime configuration from environment variables.

epoque has no configuration file. Two environment variables adjust the
defaults used when the command line is silent:

- EPOQUE_PRECISION: default number of units shown (1-7)
- EPOQUE_OUTPUT: "auto" (TTY detection), "pretty" or "plain"

Example:
    $ EPOQUE_PRECISION=3 timeago 1700000000000
    $ EPOQUE_OUTPUT=plain timeago --add "2 hours"
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from epoque.core.exceptions import ConfigError
from epoque.core.units import DEFAULT_PRECISION, MAX_PRECISION, MIN_PRECISION

logger = logging.getLogger(__name__)

ENV_PRECISION = "EPOQUE_PRECISION"
ENV_OUTPUT = "EPOQUE_OUTPUT"

OutputMode = Literal["auto", "pretty", "plain"]


class EpoqueConfig(BaseModel):
    """Defaults applied when the command line does not override them.

    Attributes:
        default_precision: Units shown in relative time when no precision
            argument is given.
        output: Output style. "auto" prints labelled lines on a terminal and
            a bare value when piped.

    """

    model_config = ConfigDict(frozen=True)

    default_precision: int = Field(
        default=DEFAULT_PRECISION,
        ge=MIN_PRECISION,
        le=MAX_PRECISION,
        description="Number of time units to display by default",
    )
    output: OutputMode = Field(
        default="auto",
        description="Output style: auto, pretty or plain",
    )

    @field_validator("output", mode="before")
    @classmethod
    def normalize_output(cls, v: Any) -> Any:
        """Accept any case and surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_config(environ: Mapping[str, str] | None = None) -> EpoqueConfig:
    """Build configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ). Empty values
            are treated as unset.

    Returns:
        Validated EpoqueConfig.

    Raises:
        ConfigError: If a variable holds an invalid value.

    """
    env = os.environ if environ is None else environ

    values: dict[str, str] = {}
    if env.get(ENV_PRECISION, "").strip():
        values["default_precision"] = env[ENV_PRECISION].strip()
    if env.get(ENV_OUTPUT, "").strip():
        values["output"] = env[ENV_OUTPUT]

    try:
        config = EpoqueConfig.model_validate(values)
    except ValidationError as e:
        error = e.errors()[0]
        variable = ENV_PRECISION if error["loc"][0] == "default_precision" else ENV_OUTPUT
        raise ConfigError(f"Invalid value for {variable}: {error['msg']}") from e

    logger.debug("Loaded config: %s", config)
    return config
