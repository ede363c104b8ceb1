"""OpenTelemetry tracing helpers.

``get_tracer()`` wraps the OpenTelemetry API so the engine can emit spans
whether or not an SDK is installed. Without a configured SDK every span is
a no-op.

Usage::

    from polyfills_loader.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("polyfills.resolve") as span:
        span.set_attribute(ATTR_POLYFILL_COUNT, 3)

``polyfills build --telemetry`` calls :func:`configure_telemetry` to print
spans to the console (requires ``pip install polyfills-loader[otel]``).
"""

from __future__ import annotations

from opentelemetry import trace

ATTR_POLYFILL_COUNT = "polyfills.count"
ATTR_POLYFILL_NAME = "polyfills.name"
ATTR_POLYFILL_MINIFY = "polyfills.minify"

_INSTRUMENTATION_NAME = "polyfills_loader"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, service_name: str = "polyfills-loader") -> None:
    """Export spans as JSON to stdout.

    Raises:
        ImportError: If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install polyfills-loader[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
