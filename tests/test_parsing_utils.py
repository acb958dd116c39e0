from recipe_planner.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_instruction_text,
    normalize_fraction_display,
    parse_servings,
    parse_time,
)


def test_parse_time_iso_duration():
    assert parse_time("PT1H15M") == 75
    assert parse_time("PT30M") == 30
    assert parse_time("PT2H") == 120


def test_parse_time_phrases():
    assert parse_time("45 min") == 45
    assert parse_time("20 minutes") == 20
    assert parse_time("1 hour") == 60
    assert parse_time("2 HRS") == 120


def test_parse_time_unknown():
    assert parse_time("garbage") is None
    assert parse_time("") is None
    assert parse_time(None) is None


def test_parse_time_numeric_minutes():
    assert parse_time(25) == 25


def test_parse_servings():
    assert parse_servings("4") == 4
    assert parse_servings("Serves 6") == 6
    assert parse_servings(8) == 8
    assert parse_servings(["", "6 servings"]) == 6
    assert parse_servings(None) is None
    assert parse_servings("a few") is None
    assert parse_servings(0) is None


def test_extract_instruction_text_shapes():
    instructions = [
        "Preheat the oven.",
        {"@type": "HowToStep", "text": "Mix the  batter."},
        {"@type": "HowToStep", "name": "Bake"},
        {
            "@type": "HowToSection",
            "name": "Frosting",
            "itemListElement": [
                {"@type": "HowToStep", "text": "Whip the cream."},
                {"@type": "HowToStep", "text": "Spread it."},
            ],
        },
        {"@type": "HowToStep"},
    ]
    assert extract_instruction_text(instructions) == [
        "Preheat the oven.",
        "Mix the batter.",
        "Bake",
        "Whip the cream.",
        "Spread it.",
    ]


def test_extract_instruction_text_single_string():
    assert extract_instruction_text("Stir and serve.") == ["Stir and serve."]
    assert extract_instruction_text(None) == []


def test_normalize_fraction_display():
    assert normalize_fraction_display("1½ cups") == "1 1/2 cups"
    assert normalize_fraction_display("¼ tsp salt") == "1/4 tsp salt"
    assert normalize_fraction_display(None) == ""


def test_clean_text():
    assert clean_text("  a \n b  ") == "a b"
    assert clean_text(None) == ""


def test_non_finite_numbers_are_unknown():
    for value in (float("inf"), float("-inf"), float("nan")):
        assert parse_time(value) is None
        assert parse_servings(value) is None
    assert parse_servings([float("nan"), "4"]) == 4
