"""
CLI: goalboard create | show | progress | regenerate | categories | list
"""
import json
import sys
from pathlib import Path
from typing import Optional

import click

# Add project root to sys.path so goalboard imports without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from goalboard.category_policy import get_default_policy_table  # noqa: E402
from goalboard.exceptions import GoalboardError  # noqa: E402
from goalboard.goal_orchestrator import GoalOrchestrator, build_default_orchestrator  # noqa: E402
from goalboard.goal_store import JsonGoalStore  # noqa: E402
from goalboard.models import CreateGoalRequest, GoalWithDashboard  # noqa: E402


def _orchestrator(ctx: click.Context) -> GoalOrchestrator:
    obj = ctx.ensure_object(dict)
    if "orchestrator" not in obj:
        store_path = obj.get("store_path")
        store = JsonGoalStore(Path(store_path)) if store_path else JsonGoalStore()
        obj["orchestrator"] = build_default_orchestrator(store=store, seed=obj.get("seed"))
    return obj["orchestrator"]


def _print_goal(goal: GoalWithDashboard, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(goal.to_dict(), ensure_ascii=False, indent=2))
        return

    s = goal.snapshot
    est = goal.estimation
    click.echo(f"{s.title}  [{s.id}]")
    click.echo(f"  category:     {s.category} ({s.status}, {s.priority} priority)")
    click.echo(f"  cost:         {s.estimated_cost}  saved: {s.current_saved}")
    click.echo(f"  target date:  {s.target_date} ({est.timeframe_label})")
    click.echo(f"  complexity:   {est.complexity.value}")
    click.echo(f"  feasibility:  {s.feasibility_score}/100")
    click.echo(f"  agents:       {', '.join(est.suggested_agents) or '-'}")
    click.echo("  modules:")
    for panel in goal.panels:
        marker = "*" if panel.required else " "
        state = "" if panel.available else "  (not available)"
        click.echo(f"   {marker} {panel.module_id:<24} {panel.title}{state}")


def _fail(e: GoalboardError) -> None:
    click.echo(f"Error: {e.get_user_message()}", err=True)
    sys.exit(1)


@click.group()
@click.option("--store", "store_path", type=click.Path(dir_okay=False), default=None,
              help="Goal store JSON file (default: data/goals.json)")
@click.option("--seed", type=int, default=None, help="Seed for synthetic data")
@click.pass_context
def goalboard(ctx: click.Context, store_path: Optional[str], seed: Optional[int]):
    """Goal dashboard composition engine."""
    ctx.ensure_object(dict)
    ctx.obj["store_path"] = store_path
    ctx.obj["seed"] = seed


@goalboard.command()
@click.argument("title")
@click.option("--category", "-c", required=True, help="Goal category id")
@click.option("--description", "-d", default="", help="Free-text description")
@click.option("--priority", default="medium", type=click.Choice(["low", "medium", "high"]))
@click.option("--location", default=None)
@click.option("--budget", type=float, default=None)
@click.option("--timeframe", default=None, help='e.g. "6 months"')
@click.option("--experience", default=None)
@click.option("--json", "as_json", is_flag=True, help="Print the full payload as JSON")
@click.pass_context
def create(ctx, title, category, description, priority, location, budget, timeframe, experience, as_json):
    """Create a goal and print its dashboard."""
    request = CreateGoalRequest(
        title=title,
        description=description,
        category=category,
        priority=priority,
        user_location=location,
        user_budget=budget,
        user_timeframe=timeframe,
        user_experience=experience,
    )
    try:
        goal = _orchestrator(ctx).create_goal(request)
    except GoalboardError as e:
        _fail(e)
        return
    _print_goal(goal, as_json)


@goalboard.command()
@click.argument("goal_id")
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
def show(ctx, goal_id, as_json):
    """Show a stored goal with its dashboard."""
    goal = _orchestrator(ctx).get_goal_with_dashboard(goal_id)
    if goal is None:
        click.echo(f"Goal not found: {goal_id}", err=True)
        sys.exit(1)
    _print_goal(goal, as_json)


@goalboard.command()
@click.argument("goal_id")
@click.argument("value", type=float)
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
def progress(ctx, goal_id, value, as_json):
    """Set progress (0..1) and re-synthesize the dashboard data."""
    try:
        goal = _orchestrator(ctx).update_goal_progress(goal_id, value)
    except GoalboardError as e:
        _fail(e)
        return
    if goal is None:
        click.echo(f"Goal not found: {goal_id}", err=True)
        sys.exit(1)
    _print_goal(goal, as_json)


@goalboard.command()
@click.argument("goal_id")
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
def regenerate(ctx, goal_id, as_json):
    """Recompute estimation and dashboard data from the stored context."""
    try:
        goal = _orchestrator(ctx).regenerate_goal_data(goal_id)
    except GoalboardError as e:
        _fail(e)
        return
    if goal is None:
        click.echo(f"Goal not found: {goal_id}", err=True)
        sys.exit(1)
    _print_goal(goal, as_json)


@goalboard.command(name="list")
@click.pass_context
def list_goals(ctx):
    """List stored goals."""
    snapshots = _orchestrator(ctx).list_goals()
    if not snapshots:
        click.echo("No goals yet.")
        return
    for s in snapshots:
        click.echo(f"{s.id}  {s.category:<18} {s.feasibility_score:>3}/100  {s.title}")


@goalboard.command()
def categories():
    """List goal categories and their required modules."""
    table = get_default_policy_table()
    for policy in table.policies():
        click.echo(f"{policy.id:<18} {policy.name}")
        click.echo(f"{'':<18} required: {', '.join(policy.required_module_ids)}")


def main():
    goalboard(obj={})


if __name__ == "__main__":
    main()
