import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path

from savr.api.deps import get_profile_repository, get_today
from savr.domain.Plan import Plan
from savr.infra.Profile_Repository import ProfileRepository
from savr.logic.codec.planned_meals import deserialize_planned_meals, serialize_planned_meals
from savr.logic.plan.week import get_current_week_days, get_month_name, roll_over_week, week_monday
from savr.utilities.validators import PlanDayInput

router = APIRouter(prefix="/api/users/{uid}/plan", tags=["plan"])
logger = logging.getLogger(__name__)


def _plan_response(plan: Plan, today: date):
    days, today_index = get_current_week_days(today)
    return {
        "week_key": plan.week_key,
        "month": get_month_name(week_monday(today)),
        "today_index": today_index,
        "days": [
            {"index": i, "day_name": chip.day_name, "day_num": chip.day_num,
             "recipe_ids": sorted(plan.recipes_for(i))}
            for i, chip in enumerate(days)
        ],
    }


@router.get("")
def read_plan(uid: str, repo: ProfileRepository = Depends(get_profile_repository),
              today: date = Depends(get_today)):
    """Current week's plan; meals stored under an older week key are cleared first."""
    profile = repo.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    if roll_over_week(profile, today):
        profile = repo.update_profile(uid, lambda p: roll_over_week(p, today))
    plan = Plan(profile.planned_meals_week_key, deserialize_planned_meals(profile.planned_meals))
    return _plan_response(plan, today)


@router.put("/{day_index}")
def set_plan_day(uid: str, body: PlanDayInput, day_index: int = Path(..., ge=0, le=6),
                 repo: ProfileRepository = Depends(get_profile_repository),
                 today: date = Depends(get_today)):
    """Replace the recipes planned for one day; an empty list clears the day."""
    result = {}

    def mutate(profile):
        roll_over_week(profile, today)
        plan = Plan(profile.planned_meals_week_key, deserialize_planned_meals(profile.planned_meals))
        plan.set_day(day_index, body.recipe_ids)
        profile.planned_meals = serialize_planned_meals(plan.meals)
        result["plan"] = plan

    repo.update_profile(uid, mutate)
    logger.info(f"Planned {len(body.recipe_ids)} recipes for day {day_index} ({uid})")
    return _plan_response(result["plan"], today)
