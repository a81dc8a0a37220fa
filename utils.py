"""
Utility functions for running the consonant-counting scenarios.

Provides configuration loading from the environment, scenario execution with
timing, and a small in-process performance registry.
"""

import os
import time
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from models import DemoConfig, ScenarioResult, ScenarioReport
from scenarios import SCENARIOS

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ENV_NAMES = "CONSONANTS_NAMES"
ENV_LOG_LEVEL = "CONSONANTS_LOG_LEVEL"
ENV_SCENARIOS = "CONSONANTS_SCENARIOS"


class ScenarioNotFoundError(KeyError):
    """Raised when a scenario name is not registered."""
    pass


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "operation_count": 0,
    "error_count": 0
}


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def load_config(env: Optional[Mapping[str, str]] = None) -> DemoConfig:
    """Build a DemoConfig from environment variables (os.environ by default)"""
    env = os.environ if env is None else env
    values: Dict[str, Any] = {}

    if env.get(ENV_NAMES) is not None:
        values["names"] = _split_csv(env[ENV_NAMES])
    if env.get(ENV_LOG_LEVEL):
        values["log_level"] = env[ENV_LOG_LEVEL]
    if env.get(ENV_SCENARIOS):
        values["scenarios"] = _split_csv(env[ENV_SCENARIOS])

    config = DemoConfig(**values)
    if config.scenarios:
        for name in config.scenarios:
            if name not in SCENARIOS:
                raise ScenarioNotFoundError(name)
    return config


def configure_logging(level: str) -> None:
    """Apply the configured level to the root logger"""
    logging.getLogger().setLevel(level)


def _record(operation_name: str, execution_time_ms: float, success: bool, error: Optional[str] = None):
    _performance_metrics["operations"].append({
        "operation": operation_name,
        "execution_time_ms": execution_time_ms,
        "success": success,
        "error": error,
        "timestamp": time.time()
    })
    _performance_metrics["total_time_ms"] += execution_time_ms
    _performance_metrics["operation_count"] += 1
    if not success:
        _performance_metrics["error_count"] += 1


def run_scenario(name: str, names: Sequence[str]) -> ScenarioResult:
    """Run one scenario, timing it and capturing any failure in the result"""
    try:
        scenario = SCENARIOS[name]
    except KeyError:
        raise ScenarioNotFoundError(name) from None

    start_time = time.perf_counter()
    try:
        consonants = scenario(names)
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        error = f"{type(e).__name__}: {e}"
        _record(name, execution_time_ms, False, error)
        logger.error(f"Scenario {name} failed after {execution_time_ms:.3f}ms: {error}")
        return ScenarioResult(
            scenario=name,
            execution_time_ms=execution_time_ms,
            success=False,
            error=error
        )

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    _record(name, execution_time_ms, True)
    logger.info(f"Scenario {name} counted {consonants} consonants in {execution_time_ms:.3f}ms")
    return ScenarioResult(
        scenario=name,
        consonants=consonants,
        execution_time_ms=execution_time_ms
    )


def run_scenarios(names: Sequence[str], selected: Optional[Sequence[str]] = None) -> ScenarioReport:
    """Run the selected scenarios (all by default) in registration order"""
    to_run = list(selected) if selected else list(SCENARIOS)
    results = [run_scenario(name, names) for name in to_run]

    counts = {r.consonants for r in results if r.success}
    consistent = all(r.success for r in results) and len(counts) <= 1

    if not consistent:
        logger.warning(f"Scenarios disagree or failed: counts={sorted(counts)}")

    return ScenarioReport(
        results=results,
        total_scenarios=len(results),
        consistent=consistent
    )


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    if _performance_metrics["operation_count"] == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "avg_time_ms": 0.0,
            "error_count": 0
        }

    return {
        "total_operations": _performance_metrics["operation_count"],
        "total_time_ms": _performance_metrics["total_time_ms"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / _performance_metrics["operation_count"],
        "error_count": _performance_metrics["error_count"]
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "operation_count": 0,
        "error_count": 0
    }
