"""Turn a polyfills configuration into an ordered list of polyfill configs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polyfills_loader.core.errors import (
    PolyfillConfigurationError,
    PolyfillResolutionError,
    SourceNotFoundError,
)
from polyfills_loader.core.rules import POLYFILL_RULES, PolyfillRule
from polyfills_loader.utils.telemetry import ATTR_POLYFILL_COUNT, get_tracer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polyfills_loader.core.locator import SourceLocator
    from polyfills_loader.core.models import PolyfillConfig, PolyfillsLoaderConfig

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


def validate_flags(config: PolyfillsLoaderConfig) -> None:
    """Reject flag combinations that cannot be built.

    Raises:
        PolyfillConfigurationError: If AbortController is requested without fetch.
    """
    polyfills = config.polyfills
    if polyfills.abort_controller and not polyfills.fetch:
        raise PolyfillConfigurationError("Cannot polyfill AbortController without fetch.")


def resolve_polyfill_configs(
    config: PolyfillsLoaderConfig,
    locator: SourceLocator,
    *,
    rules: Sequence[PolyfillRule] = POLYFILL_RULES,
) -> list[PolyfillConfig]:
    """Evaluate the rule table against *config*.

    Flags are validated before any source is located. Matching rules emit
    their configs in table order; user supplied ``custom`` entries follow
    verbatim, in the order given.

    Raises:
        PolyfillConfigurationError: On an invalid flag combination.
        PolyfillResolutionError: If a polyfill's source cannot be located.
    """
    validate_flags(config)

    def resolve(name: str, specifier: str) -> str:
        try:
            return str(locator.resolve(specifier))
        except SourceNotFoundError as exc:
            raise PolyfillResolutionError(name, specifier) from exc

    with _tracer.start_as_current_span("polyfills.resolve") as span:
        configs: list[PolyfillConfig] = []
        for rule in rules:
            if not rule.applies(config):
                continue
            built = rule.build(config, resolve)
            logger.debug("Rule %s added %s", rule.name, ", ".join(str(c.name) for c in built))
            configs.extend(built)

        configs.extend(config.polyfills.custom)
        span.set_attribute(ATTR_POLYFILL_COUNT, len(configs))

    return configs
