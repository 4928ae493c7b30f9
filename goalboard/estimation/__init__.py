# Estimation engine: deterministic cost / timeline / complexity derivation.

from goalboard.estimation.engine import EstimationEngine, describe_timeframe

__all__ = ["EstimationEngine", "describe_timeframe"]
