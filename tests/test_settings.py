import logging

from fastapi.testclient import TestClient

import settings_store
from db import SessionLocal
from main import app
from models import Setting
from practice.configuration import Configuration, Operator

client = TestClient(app)


def test_defaults_when_nothing_is_stored():
    r = client.get("/settings")
    assert r.status_code == 200
    assert r.json() == {
        "digits_operand1": 2,
        "digits_operand2": 2,
        "allow_negative_results": False,
        "enabled_operations": ["+", "-"],
    }


def test_update_and_read_back():
    r = client.put(
        "/settings",
        json={"digits_operand1": 3, "allow_negative_results": True, "enabled_operations": ["*", "/"]},
    )
    assert r.status_code == 200
    body = client.get("/settings").json()
    assert body["digits_operand1"] == 3
    assert body["digits_operand2"] == 2
    assert body["allow_negative_results"] is True
    assert body["enabled_operations"] == ["*", "/"]


def test_digit_text_that_is_not_a_number_keeps_last_value():
    client.put("/settings", json={"digits_operand1": "4"})
    r = client.put("/settings", json={"digits_operand1": "four", "digits_operand2": " 3 "})
    body = r.json()
    assert body["digits_operand1"] == 4
    assert body["digits_operand2"] == 3


def test_zero_digits_and_empty_operations_are_coerced():
    r = client.put("/settings", json={"digits_operand2": 0, "enabled_operations": []})
    body = r.json()
    assert body["digits_operand2"] == 1
    assert body["enabled_operations"] == ["+"]


def test_unknown_operation_is_rejected():
    r = client.put("/settings", json={"enabled_operations": ["%"]})
    assert r.status_code == 422


def test_malformed_rows_fall_back_to_defaults(caplog):
    with SessionLocal() as db:
        db.add(Setting(key="digits1", value="lots"))
        db.add(Setting(key="op_division", value="maybe"))
        db.add(Setting(key="op_multiplication", value="true"))
        db.commit()
    with caplog.at_level(logging.WARNING, logger="calcu-later.settings"):
        config = settings_store.load_configuration()
    assert config.digits_operand1 == 2
    assert "digits1='lots'" in caplog.text
    assert Operator.DIVISION not in config.enabled_operations
    assert Operator.MULTIPLICATION in config.enabled_operations


def test_subscribers_hear_about_saves():
    seen = []
    settings_store.subscribe(seen.append)
    try:
        settings_store.apply_update({"digits_operand1": 5})
        # unchanged settings are not saved again
        settings_store.apply_update({"digits_operand1": "5"})
    finally:
        settings_store.unsubscribe(seen.append)
    assert len(seen) == 1
    assert seen[0].digits_operand1 == 5


def test_save_round_trips_every_field():
    config = Configuration(
        digits_operand1=1,
        digits_operand2=3,
        allow_negative_results=True,
        enabled_operations=frozenset({Operator.SUBTRACTION, Operator.DIVISION}),
    )
    settings_store.save_configuration(config)
    assert settings_store.load_configuration() == config


def test_parse_digits():
    assert settings_store.parse_digits("7", 2) == 7
    assert settings_store.parse_digits("", 2) == 2
    assert settings_store.parse_digits(None, 3) == 3
    assert settings_store.parse_digits(True, 3) == 3


def test_digit_counts_above_the_limit_keep_last_value(caplog):
    client.put("/settings", json={"digits_operand1": 9, "digits_operand2": 4})
    with caplog.at_level(logging.WARNING, logger="calcu-later.settings"):
        r = client.put("/settings", json={"digits_operand1": 20, "digits_operand2": "12"})
    body = r.json()
    assert body["digits_operand1"] == 9
    assert body["digits_operand2"] == 4
    assert "digit limit" in caplog.text


def test_oversized_stored_digits_fall_back_to_defaults(caplog):
    with SessionLocal() as db:
        db.add(Setting(key="digits2", value="20"))
        db.commit()
    with caplog.at_level(logging.WARNING, logger="calcu-later.settings"):
        config = settings_store.load_configuration()
    assert config.digits_operand2 == 2
    assert "digits2" in caplog.text


def test_failing_listener_does_not_block_the_others(caplog):
    seen = []

    def broken(config):
        raise RuntimeError("listener blew up")

    settings_store.subscribe(broken)
    settings_store.subscribe(seen.append)
    try:
        with caplog.at_level(logging.ERROR, logger="calcu-later.settings"):
            r = client.put("/settings", json={"digits_operand1": 6})
    finally:
        settings_store.unsubscribe(broken)
        settings_store.unsubscribe(seen.append)
    assert r.status_code == 200
    assert r.json()["digits_operand1"] == 6
    assert [c.digits_operand1 for c in seen] == [6]
    assert "listener" in caplog.text
