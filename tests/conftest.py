"""
Pytest fixtures for the table editor tests
"""
import logging

import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Only show errors while tests run"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


@pytest.fixture
def people_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name,age\nAlice,30\nBob,\n", encoding="utf-8")
    return path


@pytest.fixture
def settings_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"a": 1, "b": "x"}', encoding="utf-8")
    return path


@pytest.fixture
def events_jsonl(tmp_path):
    path = tmp_path / "events.jsonl"
    path.write_text(
        '{"id": 1, "kind": "open"}\n'
        '\n'
        'not json at all\n'
        '[1, 2, 3]\n'
        '{"id": 2, "user": "bob"}\n',
        encoding="utf-8",
    )
    return path
