"""
GoalOrchestrator: sequences estimation, module resolution, synthesis and
feasibility, and persists one flattened snapshot per goal.

Every write path builds the complete snapshot first and stores it in a single
create/update call; a failing stage leaves the store untouched.
"""
import math
import random
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple

from goalboard.capability_registry import CapabilityRegistry, EligibilityContext, build_default_registry
from goalboard.category_policy import CategoryPolicyTable, get_default_policy_table
from goalboard.config_manager import SystemConfig, config as default_config
from goalboard.estimation import EstimationEngine, describe_timeframe
from goalboard.exceptions import InvalidProgressError
from goalboard.feasibility import feasibility_score
from goalboard.goal_store import GoalStore, JsonGoalStore
from goalboard.logger import get_logger
from goalboard.models import (
    CreateGoalRequest,
    Estimation,
    GoalContext,
    GoalSnapshot,
    GoalStatus,
    GoalWithDashboard,
    SmartNarrative,
)
from goalboard.snapshot import encode_field, encode_partition, load_field, load_partition
from goalboard.synthesis import DataSynthesizer
from goalboard.synthesis.timeline import clamp_progress
from goalboard.utils import unique_ordered

logger = get_logger("orchestrator")

Partition = Dict[str, List[str]]


class GoalOrchestrator:
    """Application service behind the HTTP and CLI surfaces."""

    def __init__(
        self,
        policies: CategoryPolicyTable,
        registry: CapabilityRegistry,
        store: GoalStore,
        estimator: Optional[EstimationEngine] = None,
        synthesizer: Optional[DataSynthesizer] = None,
        config: Optional[SystemConfig] = None,
        today: Optional[Callable[[], date]] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.policies = policies
        self.registry = registry
        self.store = store
        self.config = config or default_config
        self.today = today or date.today
        self.now = now or datetime.now
        self.estimator = estimator or EstimationEngine(policies, today=self.today)
        self.synthesizer = synthesizer or DataSynthesizer(registry, today=self.today, config=self.config)

    # ---------------------------------------------------------------------
    # Module resolution
    # ---------------------------------------------------------------------
    def resolve_active_modules(self, context: GoalContext, estimation: Estimation) -> Tuple[List[str], Partition]:
        """
        required + eligible(contextual + first N optional).
        Required modules are kept even when their own requirements fail.
        """
        required = list(estimation.required_modules)
        limit = self.config.OPTIONAL_MODULE_LIMIT
        optional_candidates = list(estimation.optional_modules)[:limit]

        eligibility = EligibilityContext(
            goal_category=context.category,
            present_agents=tuple(estimation.suggested_agents),
            estimated_cost=estimation.estimated_cost,
            has_deadline=True,
        )
        eligible = self.registry.filter_eligible(
            [m for m in list(estimation.contextual_modules) + optional_candidates if m not in required],
            eligibility,
        )

        partition = {
            "required": required,
            "contextual": [m for m in eligible if m in estimation.contextual_modules],
            "optional": [m for m in eligible if m in optional_candidates and m not in estimation.contextual_modules],
        }
        active = unique_ordered(required + eligible)
        return active, partition

    # ---------------------------------------------------------------------
    # Operations
    # ---------------------------------------------------------------------
    def create_goal(self, request: CreateGoalRequest) -> GoalWithDashboard:
        """
        Raises:
            UnknownCategoryError: before anything is persisted
        """
        context = request.to_context()
        estimation = self.estimator.estimate(context)
        active, partition = self.resolve_active_modules(context, estimation)

        synthesis = self.synthesizer.synthesize(
            context,
            estimation.estimated_cost,
            estimation.target_date,
            active,
            agents=estimation.suggested_agents,
        )
        score = self._score(context, estimation)

        timestamp = self.now().isoformat()
        snapshot = GoalSnapshot(
            id=self._new_id(),
            user_id=request.user_id or self.config.DEFAULT_USER_ID,
            title=context.title,
            description=context.description,
            category=context.category,
            priority=request.priority or self.config.DEFAULT_PRIORITY,
            status=self.config.DEFAULT_STATUS,
            estimated_cost=estimation.estimated_cost,
            current_saved=synthesis.current_saved(estimation.estimated_cost),
            target_date=estimation.target_date.isoformat(),
            feasibility_score=score,
            narrative=encode_field(estimation.narrative.to_dict()),
            assigned_agents=encode_field(estimation.suggested_agents),
            module_dataset=encode_field(synthesis.dataset),
            active_module_ids=encode_field(active),
            module_partition=encode_partition(**partition),
            user_location=context.user_location,
            user_budget=context.user_budget,
            user_timeframe=context.user_timeframe,
            user_experience=context.user_experience,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.store.create(snapshot)
        logger.info(
            f"Created goal {snapshot.id} '{snapshot.title}' ({snapshot.category}) "
            f"with {len(active)} modules, feasibility={score}"
        )
        return self._assemble(snapshot, active, synthesis.dataset, self._with_partition(estimation, partition))

    def get_goal_with_dashboard(self, goal_id: str) -> Optional[GoalWithDashboard]:
        snapshot = self.store.get(goal_id)
        if snapshot is None:
            logger.debug(f"Goal {goal_id} not found")
            return None
        active = [str(m) for m in load_field(snapshot, "active_module_ids")]
        dataset = load_field(snapshot, "module_dataset")
        return self._assemble(snapshot, active, dataset, self._reconstruct_estimation(snapshot, active))

    def update_goal_progress(self, goal_id: str, progress: float) -> Optional[GoalWithDashboard]:
        """
        Re-synthesize with an explicit progress fraction.

        Raises:
            InvalidProgressError: progress outside [0, 1]
        """
        progress = self._validate_progress(progress)
        snapshot = self.store.get(goal_id)
        if snapshot is None:
            return None

        context = snapshot.to_context()
        active = [str(m) for m in load_field(snapshot, "active_module_ids")]
        agents = [str(a) for a in load_field(snapshot, "assigned_agents")]
        synthesis = self.synthesizer.synthesize(
            context,
            snapshot.estimated_cost,
            self._target_date(snapshot),
            active,
            agents=agents,
            progress=progress,
        )

        updated = replace(
            snapshot,
            current_saved=int(round(snapshot.estimated_cost * progress)),
            status=self._status_for(snapshot.status, progress),
            module_dataset=encode_field(synthesis.dataset),
            updated_at=self.now().isoformat(),
        )
        self.store.update(updated)
        logger.info(f"Goal {goal_id} progress set to {progress:.2f} (saved={updated.current_saved})")
        return self._assemble(updated, active, synthesis.dataset, self._reconstruct_estimation(updated, active))

    def regenerate_goal_data(self, goal_id: str) -> Optional[GoalWithDashboard]:
        """
        Rerun estimation and synthesis from the stored context.
        current_saved is kept; the dataset is synthesized at the matching progress.

        Raises:
            UnknownCategoryError: stored category no longer in the policy table
        """
        snapshot = self.store.get(goal_id)
        if snapshot is None:
            return None

        context = snapshot.to_context()
        estimation = self.estimator.estimate(context)
        active, partition = self.resolve_active_modules(context, estimation)
        progress = clamp_progress(snapshot.current_saved / estimation.estimated_cost)

        synthesis = self.synthesizer.synthesize(
            context,
            estimation.estimated_cost,
            estimation.target_date,
            active,
            agents=estimation.suggested_agents,
            progress=progress,
        )

        updated = replace(
            snapshot,
            estimated_cost=estimation.estimated_cost,
            target_date=estimation.target_date.isoformat(),
            feasibility_score=self._score(context, estimation),
            narrative=encode_field(estimation.narrative.to_dict()),
            assigned_agents=encode_field(estimation.suggested_agents),
            module_dataset=encode_field(synthesis.dataset),
            active_module_ids=encode_field(active),
            module_partition=encode_partition(**partition),
            updated_at=self.now().isoformat(),
        )
        self.store.update(updated)
        logger.info(f"Regenerated goal {goal_id}: cost={updated.estimated_cost}, target={updated.target_date}")
        return self._assemble(updated, active, synthesis.dataset, self._with_partition(estimation, partition))

    def list_goals(self) -> List[GoalSnapshot]:
        snapshots = []
        for goal_id in self.store.list_ids():
            snapshot = self.store.get(goal_id)
            if snapshot is not None:
                snapshots.append(snapshot)
        return snapshots

    # ---------------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------------
    @staticmethod
    def _new_id() -> str:
        return f"goal_{uuid.uuid4().hex[:12]}"

    @staticmethod
    def _validate_progress(progress) -> float:
        if isinstance(progress, bool):
            raise InvalidProgressError(progress)
        try:
            value = float(progress)
        except (TypeError, ValueError):
            raise InvalidProgressError(progress)
        if math.isnan(value) or value < 0 or value > 1:
            raise InvalidProgressError(progress)
        return value

    @staticmethod
    def _status_for(current: str, progress: float) -> str:
        if progress >= 1:
            return GoalStatus.COMPLETED.value
        if progress > 0 and current == GoalStatus.PLANNING.value:
            return GoalStatus.IN_PROGRESS.value
        return current

    def _score(self, context: GoalContext, estimation: Estimation) -> int:
        return feasibility_score(
            duration_days=estimation.duration_days,
            estimated_cost=estimation.estimated_cost,
            complexity=estimation.complexity,
            category=context.category,
            user_budget=context.user_budget,
            base=self.config.FEASIBILITY_BASE_SCORE,
        )

    def _target_date(self, snapshot: GoalSnapshot) -> date:
        try:
            return date.fromisoformat(str(snapshot.target_date)[:10])
        except ValueError:
            logger.warning(f"Goal {snapshot.id}: malformed target_date {snapshot.target_date!r}; using today")
            return self.today()

    @staticmethod
    def _with_partition(estimation: Estimation, partition: Partition) -> Estimation:
        return replace(
            estimation,
            required_modules=list(partition["required"]),
            contextual_modules=list(partition["contextual"]),
            optional_modules=list(partition["optional"]),
        )

    def _positional_partition(self, active: List[str]) -> Partition:
        req_n = self.config.POSITIONAL_REQUIRED_COUNT
        ctx_n = self.config.POSITIONAL_CONTEXTUAL_COUNT
        return {
            "required": active[:req_n],
            "contextual": active[req_n:req_n + ctx_n],
            "optional": active[req_n + ctx_n:],
        }

    def _reconstruct_estimation(self, snapshot: GoalSnapshot, active: List[str]) -> Estimation:
        """Approximate Estimation from the flattened snapshot."""
        partition = load_partition(snapshot)
        if partition is None:
            partition = self._positional_partition(active)

        target = self._target_date(snapshot)
        days = (target - self.today()).days
        return Estimation(
            estimated_cost=snapshot.estimated_cost,
            target_date=target,
            duration_days=max(0, days),
            timeframe_label=describe_timeframe(days),
            complexity=self.estimator.assess_complexity(snapshot.to_context()),
            required_modules=partition["required"],
            contextual_modules=partition["contextual"],
            optional_modules=partition["optional"],
            suggested_agents=[str(a) for a in load_field(snapshot, "assigned_agents")],
            narrative=SmartNarrative.from_dict(load_field(snapshot, "narrative")),
        )

    def _assemble(
        self,
        snapshot: GoalSnapshot,
        active: List[str],
        dataset: dict,
        estimation: Estimation,
    ) -> GoalWithDashboard:
        return GoalWithDashboard(
            snapshot=snapshot,
            dashboard_components=list(active),
            module_dataset=dataset,
            estimation=estimation,
            panels=self.registry.compose_panels(active, estimation.required_modules),
        )


def build_default_orchestrator(
    store: Optional[GoalStore] = None,
    seed: Optional[int] = None,
    config: Optional[SystemConfig] = None,
) -> GoalOrchestrator:
    """Wire the bundled policy table, default registry and a JSON file store."""
    cfg = config or default_config
    policies = get_default_policy_table()
    registry = build_default_registry()
    synthesizer = DataSynthesizer(registry, rng=random.Random(seed), config=cfg)
    return GoalOrchestrator(
        policies=policies,
        registry=registry,
        store=store if store is not None else JsonGoalStore(),
        synthesizer=synthesizer,
        config=cfg,
    )
