"""
app/validators/quest_sub_entities.py

Sanitizers for the nested structures of an imported quest: tasks, rewards,
giver data, date range and splash position.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any, Callable, Mapping

from app.domain.quest_import import DateRange, GiverData, RewardRecord, TaskRecord
from db.models.quest_record import SplashPosition

IdGenerator = Callable[[], str]

ALLOWED_SPLASH_POSITIONS = {
    SplashPosition.TOP,
    SplashPosition.CENTER,
    SplashPosition.BOTTOM,
}


def generate_uuid4() -> str:
    return str(uuid.uuid4())


def is_number(value: Any) -> bool:
    """
    Return True for JSON numbers; booleans are not numbers here.
    """

    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sanitize_splash_pos(splash_pos: Any) -> str:
    if isinstance(splash_pos, str) and splash_pos in ALLOWED_SPLASH_POSITIONS:
        return splash_pos
    return SplashPosition.CENTER


def sanitize_giver_data(giver_data: Any) -> GiverData | None:
    """
    Return giver data, or None when no identifying field is present.
    """

    if not isinstance(giver_data, Mapping):
        return None

    name = giver_data.get("name") if isinstance(giver_data.get("name"), str) else ""
    img = giver_data.get("img") if isinstance(giver_data.get("img"), str) else ""
    uuid_value = giver_data.get("uuid") if isinstance(giver_data.get("uuid"), str) else ""
    has_token_img = giver_data.get("hasTokenImg")

    if not uuid_value and not name and not img:
        return None

    return GiverData(
        uuid=uuid_value or None,
        name=name or None,
        img=img or None,
        has_token_img=has_token_img if isinstance(has_token_img, bool) else False,
    )


def sanitize_tasks(tasks: Any, *, id_generator: IdGenerator = generate_uuid4) -> tuple[TaskRecord, ...]:
    """
    Keep object entries only; every kept task gets a fresh identifier.
    """

    if not isinstance(tasks, list):
        return ()

    sanitized: list[TaskRecord] = []
    for task in tasks:
        if not isinstance(task, Mapping):
            continue
        name = task.get("name")
        sanitized.append(
            TaskRecord(
                name=name if isinstance(name, str) else "",
                completed=bool(task.get("completed")),
                failed=bool(task.get("failed")),
                hidden=bool(task.get("hidden")),
                id=id_generator(),
            )
        )
    return tuple(sanitized)


def _copy_reward_data(data: Any) -> dict[str, Any]:
    """
    Deep copy of a reward's data object; anything unusable becomes ``{}``.
    """

    if not isinstance(data, Mapping):
        return {}
    try:
        return copy.deepcopy(dict(data))
    except RecursionError:
        return {}


def sanitize_rewards(rewards: Any, *, id_generator: IdGenerator = generate_uuid4) -> tuple[RewardRecord, ...]:
    """
    Keep object entries only. Rewards are locked unless the input says otherwise.
    """

    if not isinstance(rewards, list):
        return ()

    sanitized: list[RewardRecord] = []
    for reward in rewards:
        if not isinstance(reward, Mapping):
            continue
        reward_type = reward.get("type")
        data = reward.get("data")
        hidden = reward.get("hidden")
        locked = reward.get("locked")
        sanitized.append(
            RewardRecord(
                type=reward_type if isinstance(reward_type, str) else None,
                data=_copy_reward_data(data),
                hidden=hidden if isinstance(hidden, bool) else False,
                locked=locked if isinstance(locked, bool) else True,
                id=id_generator(),
            )
        )
    return tuple(sanitized)


def sanitize_date(date: Any) -> DateRange | None:
    """
    Return the date range, or None when it carries no numeric value at all.
    """

    if not isinstance(date, Mapping):
        return None

    create = date.get("create") if is_number(date.get("create")) else None
    start = date.get("start") if is_number(date.get("start")) else None
    end = date.get("end") if is_number(date.get("end")) else None

    if create is None and start is None and end is None:
        return None

    return DateRange(create=create, start=start, end=end)
