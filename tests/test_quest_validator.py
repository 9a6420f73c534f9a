"""
tests/test_quest_validator.py

Pytest unit tests for QuestRecordSanitizer.

All tests are pure Python with a deterministic identifier generator.

Coverage
--------
- Rejection of non-object candidates
- Full-default record for an empty object
- Trimming and placeholder handling for string fields
- Enum fallbacks for status and splash position
- Integer-only priority
- Field independence
- Nested tasks, rewards, giver data, date
- Deep copies of retained nested data
- Coercion report
"""

from __future__ import annotations

import itertools

import pytest

from app.domain.quest_import import QuestImportRecord
from app.validators.quest_validator import QuestRecordSanitizer


def _sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture()
def sanitizer() -> QuestRecordSanitizer:
    return QuestRecordSanitizer(new_quest_label="New Quest", id_generator=_sequential_ids())


# ---------------------------------------------------------------------------
# Candidate shape
# ---------------------------------------------------------------------------


class TestCandidateShape:
    @pytest.mark.parametrize("candidate", [None, 42, "quest", [], [{"name": "Q"}], True])
    def test_non_objects_are_rejected(self, sanitizer: QuestRecordSanitizer, candidate: object) -> None:
        assert sanitizer.sanitize(candidate) is None
        assert sanitizer.sanitize_with_report(candidate) is None

    def test_empty_object_yields_full_default_record(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize({})

        assert record == QuestImportRecord(name="New Quest", status="inactive")
        assert record.giver is None
        assert record.giver_data is None
        assert record.description == ""
        assert record.gmnotes == ""
        assert record.playernotes == ""
        assert record.image == "actor"
        assert record.giver_name == "actor"
        assert record.splash == ""
        assert record.splash_pos == "center"
        assert record.splash_as_icon is False
        assert record.location is None
        assert record.priority == 0
        assert record.type is None
        assert record.parent is None
        assert record.subquests == ()
        assert record.tasks == ()
        assert record.rewards == ()
        assert record.date is None


# ---------------------------------------------------------------------------
# Scalar fields
# ---------------------------------------------------------------------------


class TestScalarFields:
    @pytest.mark.parametrize("name", ["  ", "", None, 12, ["Q"]])
    def test_blank_or_invalid_name_uses_placeholder(self, sanitizer: QuestRecordSanitizer, name: object) -> None:
        assert sanitizer.sanitize({"name": name}).name == "New Quest"

    def test_name_is_trimmed(self, sanitizer: QuestRecordSanitizer) -> None:
        assert sanitizer.sanitize({"name": "  The Lost Ring \n"}).name == "The Lost Ring"

    def test_placeholder_follows_locale(self) -> None:
        assert QuestRecordSanitizer(locale="de").sanitize({}).name == "Neue Quest"
        assert QuestRecordSanitizer(locale="xx").sanitize({}).name == "New Quest"

    @pytest.mark.parametrize("status", ["active", "available", "completed", "failed", "inactive"])
    def test_known_status_is_kept(self, sanitizer: QuestRecordSanitizer, status: str) -> None:
        assert sanitizer.sanitize({"status": status}).status == status

    @pytest.mark.parametrize("status", ["not-real", "ACTIVE", " active", 1, None])
    def test_unknown_status_falls_back_to_inactive(self, sanitizer: QuestRecordSanitizer, status: object) -> None:
        assert sanitizer.sanitize({"status": status}).status == "inactive"

    @pytest.mark.parametrize("splash_pos", ["top", "center", "bottom"])
    def test_known_splash_pos_is_kept(self, sanitizer: QuestRecordSanitizer, splash_pos: str) -> None:
        assert sanitizer.sanitize({"splashPos": splash_pos}).splash_pos == splash_pos

    @pytest.mark.parametrize("splash_pos", ["left", "", 0, None])
    def test_unknown_splash_pos_falls_back_to_center(self, sanitizer: QuestRecordSanitizer, splash_pos: object) -> None:
        assert sanitizer.sanitize({"splashPos": splash_pos}).splash_pos == "center"

    @pytest.mark.parametrize(
        ("priority", "expected"),
        [
            (3, 3),
            (-2, -2),
            (0, 0),
            (4.0, 4),
            (2.5, 0),
            ("3", 0),
            (True, 0),
            (None, 0),
            (float("inf"), 0),
            (2**31 - 1, 2**31 - 1),
            (-(2**31), -(2**31)),
            (2**31, 0),
            (10**12, 0),
            (1e300, 0),
        ],
    )
    def test_priority_requires_an_integer(
        self,
        sanitizer: QuestRecordSanitizer,
        priority: object,
        expected: int,
    ) -> None:
        result = sanitizer.sanitize({"priority": priority}).priority

        assert result == expected
        assert type(result) is int

    def test_long_type_is_kept_whole(self, sanitizer: QuestRecordSanitizer) -> None:
        quest_type = "side-" + "x" * 300

        assert sanitizer.sanitize({"type": quest_type}).type == quest_type

    def test_optional_strings_are_trimmed_or_absent(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize(
            {"giver": "  Mayor  ", "location": "   ", "type": 7, "giverName": "  "}
        )

        assert record.giver == "Mayor"
        assert record.location is None
        assert record.type is None
        assert record.giver_name == "actor"

    def test_image_is_not_trimmed(self, sanitizer: QuestRecordSanitizer) -> None:
        assert sanitizer.sanitize({"image": " icons/map.png "}).image == " icons/map.png "
        assert sanitizer.sanitize({"image": None}).image == "actor"

    def test_splash_as_icon_requires_boolean(self, sanitizer: QuestRecordSanitizer) -> None:
        assert sanitizer.sanitize({"splashAsIcon": True}).splash_as_icon is True
        assert sanitizer.sanitize({"splashAsIcon": "true"}).splash_as_icon is False

    def test_fields_are_sanitized_independently(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize(
            {
                "name": "Dragon Hunt",
                "status": "bogus",
                "description": "<p>Slay it</p>",
                "priority": "high",
                "location": "Mountains",
            }
        )

        assert record.name == "Dragon Hunt"
        assert record.status == "inactive"
        assert record.description == "<p>Slay it</p>"
        assert record.priority == 0
        assert record.location == "Mountains"

    def test_hierarchy_is_never_imported(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize({"parent": "abc", "subquests": ["x", "y"]})

        assert record.parent is None
        assert record.subquests == ()


# ---------------------------------------------------------------------------
# Nested structures
# ---------------------------------------------------------------------------


class TestNestedStructures:
    def test_invalid_tasks_are_dropped_and_ids_are_distinct(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize(
            {
                "tasks": [
                    {"name": "Find the map", "completed": 1, "id": "same"},
                    "not a task",
                    None,
                    {"name": 5, "hidden": "yes", "id": "same"},
                    [],
                ]
            }
        )

        assert len(record.tasks) == 2
        assert record.tasks[0].name == "Find the map"
        assert record.tasks[0].completed is True
        assert record.tasks[1].name == ""
        assert record.tasks[1].hidden is True
        ids = [task.id for task in record.tasks]
        assert len(set(ids)) == len(ids)
        assert "same" not in ids

    def test_reward_is_locked_by_default(self, sanitizer: QuestRecordSanitizer) -> None:
        reward = sanitizer.sanitize({"rewards": [{"type": "item"}]}).rewards[0]

        assert reward.locked is True
        assert reward.hidden is False
        assert reward.type == "item"
        assert reward.data == {}

    def test_missing_date_block_is_absent(self, sanitizer: QuestRecordSanitizer) -> None:
        assert sanitizer.sanitize({"date": {"create": None, "start": None, "end": None}}).date is None
        assert sanitizer.sanitize({"date": {"create": 1700000000000}}).date.create == 1700000000000

    def test_giver_data_is_sanitized(self, sanitizer: QuestRecordSanitizer) -> None:
        record = sanitizer.sanitize({"giverData": {"name": "Elder", "hasTokenImg": True}})

        assert record.giver_data is not None
        assert record.giver_data.name == "Elder"
        assert record.giver_data.has_token_img is True
        assert sanitizer.sanitize({"giverData": {"hasTokenImg": True}}).giver_data is None

    def test_output_does_not_alias_input(self, sanitizer: QuestRecordSanitizer) -> None:
        candidate = {"rewards": [{"type": "item", "data": {"name": "Sword", "tags": ["sharp"]}}]}

        record = sanitizer.sanitize(candidate)
        candidate["rewards"][0]["data"]["name"] = "Changed"
        candidate["rewards"][0]["data"]["tags"].append("dull")

        assert record.rewards[0].data == {"name": "Sword", "tags": ["sharp"]}

    def test_sanitize_does_not_mutate_input(self, sanitizer: QuestRecordSanitizer) -> None:
        candidate = {"name": "  Q  ", "tasks": [{"name": "t"}, 3]}

        sanitizer.sanitize(candidate)

        assert candidate == {"name": "  Q  ", "tasks": [{"name": "t"}, 3]}

    def test_deeply_nested_unknown_key_is_ignored(self, sanitizer: QuestRecordSanitizer) -> None:
        nested: list = []
        for _ in range(5000):
            nested = [nested]

        record = sanitizer.sanitize({"name": "Q", "extra": nested})

        assert record.name == "Q"


# ---------------------------------------------------------------------------
# Coercion report
# ---------------------------------------------------------------------------


class TestCoercionReport:
    def test_valid_candidate_reports_nothing(self, sanitizer: QuestRecordSanitizer) -> None:
        result = sanitizer.sanitize_with_report({"name": "Q", "status": "active", "priority": 1})

        assert result is not None
        assert result.coercions == ()

    def test_coerced_fields_are_reported(self, sanitizer: QuestRecordSanitizer) -> None:
        result = sanitizer.sanitize_with_report(
            {"status": "bogus", "priority": 2.5, "tasks": [{"name": "a"}, 1], "date": {}}
        )

        fields = {coercion.field for coercion in result.coercions}
        assert {"status", "priority", "tasks", "date"} <= fields
        assert result.record.status == "inactive"

    def test_out_of_range_priority_is_reported(self, sanitizer: QuestRecordSanitizer) -> None:
        result = sanitizer.sanitize_with_report({"priority": 10**12})

        assert result.record.priority == 0
        assert [(c.field, c.reason) for c in result.coercions] == [("priority", "out of range")]

    def test_unprintable_value_is_reported_by_type(self, sanitizer: QuestRecordSanitizer) -> None:
        nested: list = []
        for _ in range(200_000):
            nested = [nested]

        result = sanitizer.sanitize_with_report({"status": nested})

        assert result.record.status == "inactive"
        assert result.coercions[0].value == "<deeply nested list>"
