from loguru import logger

from tracker_config import DEFAULT_METRIC_COLORS, parse_color_overrides


def test_parse_color_overrides_merges_valid_entries() -> None:
    colors, ok = parse_color_overrides('{"Creativity": "#ABCDEF", "Unknown": "#000000", "Fun and Joy": "red"}')

    assert ok
    assert colors["Creativity"] == "#abcdef"
    assert colors["Fun and Joy"] == DEFAULT_METRIC_COLORS["Fun and Joy"]
    assert "Unknown" not in colors
    assert list(colors) == list(DEFAULT_METRIC_COLORS)


def test_parse_color_overrides_falls_back_on_bad_json() -> None:
    colors, ok = parse_color_overrides("{not json")

    assert not ok
    assert colors == DEFAULT_METRIC_COLORS


def test_parse_color_overrides_rejects_non_object() -> None:
    colors, ok = parse_color_overrides('["#000000"]')

    assert not ok
    assert colors == DEFAULT_METRIC_COLORS


def test_parse_color_overrides_does_not_mutate_defaults() -> None:
    parse_color_overrides('{"Money Moves": "#000000"}')

    assert DEFAULT_METRIC_COLORS["Money Moves"] == "#854d0e"


def test_malformed_json_warns_once_per_distinct_text() -> None:
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        parse_color_overrides("{still not json")
        parse_color_overrides("{still not json")
        parse_color_overrides("[1, 2]")
    finally:
        logger.remove(sink_id)

    assert len(messages) == 2
