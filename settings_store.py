# settings_store.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from db import SessionLocal
from models import Setting
from practice.configuration import DEFAULT_DIGITS, Configuration, Operator

logger = logging.getLogger("calcu-later.settings")

# Largest digit count the store accepts; keeps every operand, sum and dividend in
# the 64-bit problem columns.
MAX_DIGITS = 9

KEY_DIGITS_1 = "digits1"
KEY_DIGITS_2 = "digits2"
KEY_ALLOW_NEGATIVE_RESULTS = "allow_negative_results"
OPERATION_KEYS: Dict[Operator, str] = {
    Operator.ADDITION: "op_addition",
    Operator.SUBTRACTION: "op_subtraction",
    Operator.MULTIPLICATION: "op_multiplication",
    Operator.DIVISION: "op_division",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

Listener = Callable[[Configuration], None]
_listeners: List[Listener] = []


def parse_digits(raw: Any, last: Optional[int]) -> Optional[int]:
    """Digit count from a text field; anything that is not an integer keeps ``last``."""
    if isinstance(raw, bool):
        return last
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return last


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    logger.warning("ignoring malformed boolean setting %r", raw)
    return default


def _read(db: Session) -> Dict[str, str]:
    return {row.key: row.value for row in db.query(Setting).all()}


def _stored_digits(rows: Mapping[str, str], key: str) -> int:
    raw = rows.get(key)
    if raw is None:
        return DEFAULT_DIGITS
    value = parse_digits(raw, None)
    if value is None or value > MAX_DIGITS:
        logger.warning("ignoring malformed digit setting %s=%r", key, raw)
        return DEFAULT_DIGITS
    return value


def _to_configuration(rows: Mapping[str, str]) -> Configuration:
    defaults = Configuration()
    d1 = _stored_digits(rows, KEY_DIGITS_1)
    d2 = _stored_digits(rows, KEY_DIGITS_2)
    ops = frozenset(
        op
        for op, key in OPERATION_KEYS.items()
        if _parse_bool(rows.get(key), op in defaults.enabled_operations)
    )
    return Configuration(
        digits_operand1=d1,
        digits_operand2=d2,
        allow_negative_results=_parse_bool(
            rows.get(KEY_ALLOW_NEGATIVE_RESULTS), defaults.allow_negative_results
        ),
        enabled_operations=ops,
    )


def _to_rows(config: Configuration) -> Dict[str, str]:
    rows = {
        KEY_DIGITS_1: str(config.digits_operand1),
        KEY_DIGITS_2: str(config.digits_operand2),
        KEY_ALLOW_NEGATIVE_RESULTS: str(config.allow_negative_results).lower(),
    }
    for op, key in OPERATION_KEYS.items():
        rows[key] = str(op in config.enabled_operations).lower()
    return rows


# Public API
def load_configuration() -> Configuration:
    with SessionLocal() as db:
        return _to_configuration(_read(db))


def save_configuration(config: Configuration) -> Configuration:
    with SessionLocal() as db:
        for key, value in _to_rows(config).items():
            db.merge(Setting(key=key, value=value))
        db.commit()
    logger.info("settings saved: %s", config.model_dump(mode="json"))
    for listener in list(_listeners):
        try:
            listener(config)
        except Exception:
            logger.exception("settings listener %r failed", listener)
    return config


def apply_update(changes: Mapping[str, Any]) -> Configuration:
    """Merge a partial update into the stored settings and save the result.

    Keys follow the Configuration fields. Digit counts typed as text that does
    not parse, or that exceed ``MAX_DIGITS``, fall back to the current value.
    """
    current = load_configuration()
    merged: Dict[str, Any] = current.model_dump()
    for field in ("digits_operand1", "digits_operand2"):
        if field in changes:
            last = getattr(current, field)
            digits = parse_digits(changes[field], last)
            if digits > MAX_DIGITS:
                logger.warning(
                    "%s=%r is above the %d digit limit; keeping %d",
                    field, changes[field], MAX_DIGITS, last,
                )
                digits = last
            merged[field] = digits
    if changes.get("allow_negative_results") is not None:
        merged["allow_negative_results"] = changes["allow_negative_results"]
    if changes.get("enabled_operations") is not None:
        merged["enabled_operations"] = changes["enabled_operations"]
    try:
        updated = Configuration(**merged)
    except ValidationError:
        logger.warning("rejected settings update %r; keeping %r", dict(changes), current)
        raise
    if updated == current:
        return current
    return save_configuration(updated)


def subscribe(listener: Listener) -> None:
    _listeners.append(listener)


def unsubscribe(listener: Listener) -> None:
    if listener in _listeners:
        _listeners.remove(listener)
