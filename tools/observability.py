"""Instrumentation for :class:`stylist_app.app.StylistApp` operations."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from stylist_app.logging_config import get_logger, log_event, request_scope

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _call_arguments(bound: inspect.BoundArguments) -> Dict[str, Any]:
    return {name: value for name, value in bound.arguments.items() if name != "self"}


def _validate_arguments(
    operation: str, input_model: type[BaseModel], bound: inspect.BoundArguments
) -> None:
    """Coerce the arguments ``input_model`` declares; others pass through untouched.

    ``None`` means "use the default" for app operations, so it is not validated.
    """

    declared = {
        name: value
        for name, value in bound.arguments.items()
        if name in input_model.model_fields and value is not None
    }
    try:
        validated = input_model.model_validate(declared)
    except ValidationError as exc:
        log_event(
            LOGGER,
            logging.WARNING,
            "operation_rejected",
            operation=operation,
            errors=[{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()],
        )
        raise
    for name in declared:
        bound.arguments[name] = getattr(validated, name)


def _outcome(result: object) -> Dict[str, Any]:
    if isinstance(result, list):
        return {"result_count": len(result)}
    item_id = getattr(result, "item_id", None)
    if item_id is not None:
        return {"item": item_id}
    return {}


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Run an app operation inside a request scope and log how it went.

    When ``input_model`` is given, the call's arguments that the model
    declares are validated and replaced by the model's coerced values before
    the wrapped function runs. A rejected call raises ``ValidationError``.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with request_scope():
                bound = signature.bind(*args, **kwargs)
                bound.apply_defaults()
                if input_model is not None:
                    _validate_arguments(operation, input_model, bound)

                log_event(LOGGER, logging.DEBUG, "operation_started", operation=operation, **_call_arguments(bound))
                start = time.perf_counter()
                try:
                    result = func(*bound.args, **bound.kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        operation=operation,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    operation=operation,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    **_outcome(result),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
