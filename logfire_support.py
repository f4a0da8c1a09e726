"""Helpers for configuring the optional Logfire integration."""

from __future__ import annotations

import importlib
import inspect
import logging
import os
from typing import Any, Dict, Optional

from flask import Flask
from sqlalchemy.engine import Engine


ObservabilityStatus = Dict[str, Any]


def _call_with_supported_kwargs(func: Any, candidate_kwargs: Dict[str, Any]) -> Any:
    """Invoke *func* with only keyword arguments it supports."""

    if not callable(func):
        raise TypeError("Expected a callable object")

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):  # pragma: no cover - extremely uncommon
        return func(**candidate_kwargs)

    supported = {
        name: value
        for name, value in candidate_kwargs.items()
        if value is not None and name in signature.parameters
    }
    return func(**supported)


def _initial_status() -> ObservabilityStatus:
    return {
        "logfire_available": False,
        "logfire_project_url": os.getenv("LOGFIRE_PROJECT_URL") or None,
        "logfire_reason": None,
    }


def initialize_observability(app: Flask, engine: Optional[Engine] = None) -> ObservabilityStatus:
    """Configure Logfire if an API key and the package are available.

    Parameters
    ----------
    app:
        The Flask application instance. Used for logging and instrumentation.
    engine:
        Optional SQLAlchemy engine to instrument alongside Flask.

    Returns
    -------
    ObservabilityStatus
        ``logfire_available``, ``logfire_project_url`` and ``logfire_reason``.
        Start-up never fails because of observability; problems are reported
        through ``logfire_reason`` instead.
    """

    logger = app.logger if app else logging.getLogger(__name__)
    status = _initial_status()

    api_key = os.getenv("LOGFIRE_API_KEY")
    if not api_key:
        status["logfire_reason"] = "LOGFIRE_API_KEY is not set"
        logger.info("Logfire support disabled: %s", status["logfire_reason"])
        return status

    try:
        logfire_module = importlib.import_module("logfire")
    except ImportError:  # pragma: no cover - depends on environment
        status["logfire_reason"] = "logfire package is not installed"
        logger.info("Logfire support disabled: %s", status["logfire_reason"])
        return status

    configure_fn = getattr(logfire_module, "configure", None)
    if not callable(configure_fn):
        status["logfire_reason"] = "Logfire configure() entrypoint not available"
        logger.info("Logfire support disabled: %s", status["logfire_reason"])
        return status

    configure_kwargs = {
        "token": api_key,
        "service_name": os.getenv("LOGFIRE_SERVICE_NAME", "perfpages"),
        "environment": os.getenv("LOGFIRE_ENVIRONMENT", "development"),
    }

    try:
        _call_with_supported_kwargs(configure_fn, configure_kwargs)
    except Exception as exc:  # pylint: disable=broad-exception-caught  # depends on logfire internals
        status["logfire_reason"] = f"Failed to configure Logfire: {exc}"
        logger.exception("Failed to configure Logfire")
        return status

    status["logfire_available"] = True
    logger.info("Logfire support enabled for service '%s'", configure_kwargs["service_name"])

    _instrument(logfire_module, "instrument_flask", {"app": app}, logger)
    if engine is None:
        logger.debug("SQLAlchemy engine not available for Logfire instrumentation")
    else:
        _instrument(logfire_module, "instrument_sqlalchemy", {"engine": engine}, logger)

    return status


def _instrument(logfire_module: Any, hook_name: str, kwargs: Dict[str, Any], logger: logging.Logger) -> None:
    """Call a Logfire ``instrument_*`` hook if this Logfire version has it."""

    hook = getattr(logfire_module, hook_name, None)
    if not callable(hook):
        logger.debug("Logfire hook %s not available", hook_name)
        return

    try:
        _call_with_supported_kwargs(hook, kwargs)
        logger.info("Logfire %s enabled", hook_name)
    except Exception:  # pylint: disable=broad-exception-caught  # depends on logfire internals
        logger.exception("Logfire %s failed", hook_name)


__all__ = ["initialize_observability", "ObservabilityStatus"]
