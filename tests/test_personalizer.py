import pytest

from backend.models import Exercise, UserProfile, Workout
from backend.personalizer import (
    Personalizer,
    create_personalized_workouts,
    mean_exercise_duration,
    scale_duration,
)


def make_workout(id="1", title="растяжка", duration=30, durations=(10,), names=None, calories=100):
    names = names or [f"упражнение {i}" for i in range(len(durations))]
    return Workout(
        id=id,
        title=title,
        duration=duration,
        calories=calories,
        exercises=[Exercise(name=n, duration=d) for n, d in zip(names, durations)],
    )


def make_profile(**overrides):
    base = {
        "workout_duration": "medium",
        "experience": "beginner",
        "flexibility": "average",
        "breathing": "middle",
        "goals": ["растяжка"],
        "body_parts": [],
        "limitations": [],
    }
    base.update(overrides)
    return UserProfile(**base)


def test_worked_example_contraindication_and_two_step_rounding():
    profile = make_profile(flexibility="poor", breathing="bad", limitations=["бурпи"])
    a = make_workout(id="A", title="растяжка спины", duration="30 мин", names=["бурпи"], durations=[10])
    b = make_workout(id="B", title="растяжка ног", duration="25 мин", names=["кошка"], durations=[10])

    result = create_personalized_workouts(profile, [a, b])

    assert [w.id for w in result] == ["B"]
    assert result[0].exercises[0].duration == 5


def test_duration_range_is_inclusive():
    profile = make_profile()
    workouts = [make_workout(id=str(d), duration=d) for d in (19, 20, 30, 40, 41, 50)]
    result = create_personalized_workouts(profile, workouts)
    assert [w.id for w in result] == ["20", "30", "40"]


@pytest.mark.parametrize("setting,kept", [("short", ["15"]), ("medium", ["30"]), ("long", ["50"])])
def test_duration_setting_selects_range(setting, kept):
    profile = make_profile(workout_duration=setting)
    workouts = [make_workout(id=str(d), duration=d) for d in (15, 30, 50)]
    assert [w.id for w in create_personalized_workouts(profile, workouts)] == kept


def test_contraindication_match_is_case_insensitive_substring():
    profile = make_profile(limitations=["ПРЫЖ"])
    risky = make_workout(id="risky", names=["Прыжки на месте", "кошка"], durations=[5, 5])
    safe = make_workout(id="safe", names=["кошка"], durations=[5])
    assert [w.id for w in create_personalized_workouts(profile, [risky, safe])] == ["safe"]


def test_title_must_match_goal_or_body_part():
    profile = make_profile(goals=["гибкость"], body_parts=["Спина"])
    by_goal = make_workout(id="goal", title="Гибкость для всех")
    by_part = make_workout(id="part", title="здоровая спина")
    neither = make_workout(id="none", title="силовая йога")
    result = create_personalized_workouts(profile, [by_goal, by_part, neither])
    assert [w.id for w in result] == ["goal", "part"]


def test_empty_goals_and_body_parts_drop_everything():
    profile = make_profile(goals=[], body_parts=[])
    assert create_personalized_workouts(profile, [make_workout()]) == []


def test_sorted_by_distance_to_experience_level():
    profile = make_profile(experience="beginner")
    far = make_workout(id="far", durations=[10, 10])
    near = make_workout(id="near", durations=[1, 3])
    mid = make_workout(id="mid", durations=[5])
    result = create_personalized_workouts(profile, [far, near, mid])
    assert [w.id for w in result] == ["near", "mid", "far"]


def test_ties_keep_input_order():
    profile = make_profile(experience="advanced")
    first = make_workout(id="first", durations=[4])
    second = make_workout(id="second", durations=[2])
    third = make_workout(id="third", durations=[1, 3])
    result = create_personalized_workouts(profile, [first, second, third])
    assert [w.id for w in result] == ["first", "second", "third"]


def test_sorting_twice_gives_same_order():
    personalizer = Personalizer()
    profile = make_profile(experience="intermediate")
    workouts = [make_workout(id=str(i), durations=[d]) for i, d in enumerate([7, 1, 3, 2, 3])]
    once = personalizer._sort_by_experience(profile, workouts)
    twice = personalizer._sort_by_experience(profile, once)
    assert [w.id for w in once] == [w.id for w in twice]


@pytest.mark.parametrize(
    "flexibility,breathing,before,after",
    [
        ("poor", "bad", 9, 4),  # floor(6.3)=6, floor(4.8)=4; a single 0.56 factor would give 5
        ("very_poor", "middle", 10, 7),
        ("excellent", "good", 7, 8),  # floor(8.4)=8, floor(8.8)=8; a single 1.32 factor would give 9
        ("excellent", "middle", 10, 12),
        ("average", "good", 10, 11),
        ("good", "bad", 10, 8),
        ("average", "middle", 13, 13),
    ],
)
def test_flexibility_then_breathing_adjustment(flexibility, breathing, before, after):
    profile = make_profile(flexibility=flexibility, breathing=breathing)
    result = create_personalized_workouts(profile, [make_workout(durations=[before])])
    assert result[0].exercises[0].duration == after


def test_inputs_are_not_mutated_and_workout_fields_pass_through():
    profile = make_profile(flexibility="excellent", breathing="good")
    original = make_workout(id="x", duration=35, calories=250, durations=[10, 20])
    result = create_personalized_workouts(profile, [original])

    assert [ex.duration for ex in original.exercises] == [10, 20]
    assert result[0] is not original
    assert result[0].duration == 35
    assert result[0].calories == 250
    assert result[0].title == original.title


def test_result_is_subset_of_filtered_input():
    profile = make_profile(goals=["йога"], limitations=["стойка"])
    workouts = [
        make_workout(id="1", title="йога утром", duration=25),
        make_workout(id="2", title="йога вечером", duration=55),
        make_workout(id="3", title="йога днём", names=["стойка на голове"]),
        make_workout(id="4", title="пилатес"),
    ]
    assert {w.id for w in create_personalized_workouts(profile, workouts)} == {"1"}


def test_helpers():
    assert mean_exercise_duration(make_workout(durations=[2, 4, 9])) == 5
    assert scale_duration(10, None) == 10
    assert scale_duration(10, 0.7) == 7
