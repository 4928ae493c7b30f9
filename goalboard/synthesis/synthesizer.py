"""
DataSynthesizer: one synthetic record per active module, all derived from one
shared ProgressTimeline.

Usage:
    synth = DataSynthesizer(registry, rng=random.Random(7))
    result = synth.synthesize(context, 5000, target_date, module_ids, agents)
    result.dataset["financial_calculator"]["daysRemaining"]
"""
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from goalboard.capability_registry.defaults import assert_exhaustive
from goalboard.capability_registry.models import ModuleKind
from goalboard.capability_registry.registry import CapabilityRegistry
from goalboard.config_manager import SystemConfig, config as default_config
from goalboard.logger import get_logger
from goalboard.models import GoalContext
from goalboard.synthesis.generators import GENERATORS, GenerationContext, Generator
from goalboard.synthesis.timeline import ProgressTimeline, build_timeline
from goalboard.utils import unique_ordered

logger = get_logger("synthesizer")


def unavailable_record(reason: str) -> Dict[str, Any]:
    return {"status": "unavailable", "reason": reason}


@dataclass
class SynthesisResult:
    timeline: ProgressTimeline
    dataset: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    failed_modules: Dict[str, str] = field(default_factory=dict)

    def current_saved(self, estimated_cost: int) -> int:
        return int(round(estimated_cost * self.timeline.progress_fraction))


class DataSynthesizer:
    """
    Args:
        registry: capability registry; ids it does not know get no record
        rng: random source for the progress draw and per-field noise
        today: clock returning the current date
        generators: generator table, exhaustive over ModuleKind
    """

    def __init__(
        self,
        registry: CapabilityRegistry,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
        generators: Optional[Mapping[ModuleKind, Generator]] = None,
        config: Optional[SystemConfig] = None,
    ):
        self.registry = registry
        self.rng = rng or random.Random()
        self.today = today or date.today
        self.generators = dict(generators if generators is not None else GENERATORS)
        self.config = config or default_config
        assert_exhaustive(self.generators, "GENERATORS")

    def build_timeline(self, target_date: date, progress: Optional[float] = None) -> ProgressTimeline:
        return build_timeline(
            self.today(),
            target_date,
            self.rng,
            progress=progress,
            draw_max=self.config.PROGRESS_DRAW_MAX,
        )

    def synthesize(
        self,
        context: GoalContext,
        estimated_cost: int,
        target_date: date,
        module_ids: Iterable[str],
        agents: Iterable[str] = (),
        progress: Optional[float] = None,
    ) -> SynthesisResult:
        timeline = self.build_timeline(target_date, progress)
        gen_ctx = GenerationContext(
            goal=context,
            estimated_cost=estimated_cost,
            timeline=timeline,
            rng=self.rng,
            agents=tuple(agents),
        )
        result = SynthesisResult(timeline=timeline)

        for module_id in unique_ordered(module_ids):
            kind = ModuleKind.parse(module_id)
            if kind is None or module_id not in self.registry:
                logger.debug(f"No dataset for unregistered module {module_id}")
                continue
            try:
                result.dataset[module_id] = self.generators[kind](gen_ctx)
            except Exception as e:
                logger.error(f"Generator for {module_id} failed: {e}", exc_info=True)
                reason = f"{type(e).__name__}: {e}"
                result.dataset[module_id] = unavailable_record(reason)
                result.failed_modules[module_id] = reason

        logger.info(
            f"Synthesized {len(result.dataset)} module records for '{context.title}' "
            f"(progress={timeline.percent_complete}%, failed={len(result.failed_modules)})"
        )
        return result
