"""Ordered fallback over alternative strategies."""
from typing import Any, Callable, Sequence

import structlog
from pydantic import BaseModel

from study_processing_core.util.errors import AllStrategiesFailedError

logger = structlog.get_logger()


class StrategyResult(BaseModel):
    """Outcome of one strategy attempt."""

    ok: bool
    value: Any = None
    error: str | None = None
    strategy: str = ""

    @classmethod
    def success(cls, value: Any, strategy: str = "") -> "StrategyResult":
        return cls(ok=True, value=value, strategy=strategy)

    @classmethod
    def failure(cls, error: str, strategy: str = "") -> "StrategyResult":
        return cls(ok=False, error=error, strategy=strategy)


Strategy = Callable[..., StrategyResult]


def _strategy_name(strategy: Strategy, index: int) -> str:
    return getattr(strategy, "__name__", None) or f"strategy_{index}"


def run_strategies(strategies: Sequence[Strategy], *args: Any, **kwargs: Any) -> StrategyResult:
    """Try strategies in order and return the first successful result.

    A strategy fails by returning a failed StrategyResult or by raising.
    """
    errors: dict[str, str] = {}
    for i, strategy in enumerate(strategies):
        name = _strategy_name(strategy, i)
        if name in errors:
            name = f"{name}_{i}"
        try:
            result = strategy(*args, **kwargs)
        except Exception as e:
            errors[name] = str(e) or type(e).__name__
            logger.warning("strategy_failed", strategy=name, error=errors[name])
            continue

        if result.ok:
            logger.info("strategy_succeeded", strategy=name, attempts=i + 1)
            return result.model_copy(update={"strategy": result.strategy or name})

        errors[name] = result.error or "failed"
        logger.warning("strategy_failed", strategy=name, error=errors[name])

    if not errors:
        raise AllStrategiesFailedError("No strategies to try")
    summary = "; ".join(f"{k}: {v}" for k, v in errors.items())
    raise AllStrategiesFailedError(f"All strategies failed ({summary})", errors)
