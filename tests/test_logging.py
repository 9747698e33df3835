import json
import logging

from todo_api.logging_config import JSONFormatter, setup_logging

def test_setup_logging_installs_one_handler():
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    ours = [h for h in logging.getLogger().handlers if h.get_name() == "todo_api"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JSONFormatter)
    assert logging.getLogger().level == logging.WARNING

def test_json_formatter_includes_extras():
    record = logging.LogRecord("todo_api.test", logging.INFO, __file__, 1, "deleted todo %s", (3,), None)
    record.todo_id = 3
    line = json.loads(JSONFormatter().format(record))
    assert line["message"] == "deleted todo 3"
    assert line["level"] == "INFO"
    assert line["todo_id"] == 3

def test_create_app_leaves_root_logger_alone():
    from todo_api.main import create_app

    root = logging.getLogger()
    before = list(root.handlers), root.level
    create_app()
    assert (list(root.handlers), root.level) == before

def test_config_import_tolerates_non_numeric_port(monkeypatch):
    import importlib

    from todo_api import config

    monkeypatch.setenv("PORT", "not-a-port")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.PORT == "not-a-port"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
