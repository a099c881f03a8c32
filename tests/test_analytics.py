import json
import logging

from gridsnake.analytics import EventSink, best_effort, flatten_params


def test_events_are_appended_as_json_lines(tmp_path):
    path = tmp_path / "logs" / "events.jsonl"
    sink = EventSink(str(path), clock=lambda: 1700000000.5)

    sink.log_event("game_start", {"high_score": 40})
    sink.log_event("food_eaten", {"score": 10, "snake_length": 4})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line) for line in lines] == [
        {"event": "game_start", "params": {"high_score": 40}, "ts": 1700000000.5},
        {"event": "food_eaten", "params": {"score": 10, "snake_length": 4}, "ts": 1700000000.5},
    ]


def test_sink_without_path_logs_instead(caplog):
    with caplog.at_level(logging.INFO, logger="gridsnake.analytics"):
        EventSink().log_event("page_view", {"page_title": "Snake Game"})
    assert "page_view" in caplog.text


def test_unwritable_sink_falls_back_to_log(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    sink = EventSink(str(blocker / "events.jsonl"))
    with caplog.at_level(logging.INFO, logger="gridsnake.analytics"):
        sink.log_event("game_over", {"final_score": 20})
    assert "Analytics event failed: game_over" in caplog.text
    assert "fallback" in caplog.text


def test_params_are_flattened_to_primitives():
    assert flatten_params({"score": 10, "ok": True, "where": (1, 2), 3: None}) == {
        "score": 10, "ok": True, "where": "(1, 2)", "3": None,
    }
    assert flatten_params(None) == {}


def test_best_effort_returns_result():
    assert best_effort(max, 3, 9) == 9


def test_best_effort_swallows_and_logs(caplog):
    def explode():
        raise ValueError("boom")

    with caplog.at_level(logging.WARNING, logger="gridsnake.analytics"):
        assert best_effort(explode) is None
    assert "explode" in caplog.text
