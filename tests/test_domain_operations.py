"""
Tests for the operations domain rules.

Covers broker detection, model-reply parsing, draft normalization and
strategy reply cleaning. Pure unit tests, no IO.
"""

from datetime import date, time
from decimal import Decimal

import pytest

from app.domain.operations.brokerage import (
    DEFAULT_TIME,
    detect_broker,
    draft_from_raw,
    extract_json_array,
    extraction_prompt,
    risk_level,
)
from app.domain.operations.entities import RiskLevel, Side
from app.domain.operations.errors import UnparseableNoteError
from app.domain.operations.strategy import clean_strategy, operation_prompt

TODAY = date(2025, 7, 1)


class TestDetectBroker:
    @pytest.mark.parametrize(
        "content, broker",
        [
            ("NOTA DE CORRETAGEM - CLEAR CORRETORA", "clear"),
            ("XP Investimentos CCTVM S/A", "xp"),
            ("BTG Pactual", "btg"),
            ("Banco Inter DTVM", "inter"),
            ("Genial Investimentos", "genial"),
            ("Corretora desconhecida", "generic"),
        ],
    )
    def test_detects_known_brokers(self, content: str, broker: str) -> None:
        assert detect_broker(content) == broker

    def test_prompt_mentions_broker(self) -> None:
        assert "Detected broker format: XP" in extraction_prompt("xp")


class TestExtractJsonArray:
    def test_array_wrapped_in_markdown(self) -> None:
        reply = 'Aqui estão:\n```json\n[{"ticker": "WINQ25"}]\n```'
        assert extract_json_array(reply) == [{"ticker": "WINQ25"}]

    def test_empty_array(self) -> None:
        assert extract_json_array("[]") == []

    def test_non_object_items_dropped(self) -> None:
        assert extract_json_array('[1, {"ticker": "X"}, "y"]') == [{"ticker": "X"}]

    @pytest.mark.parametrize("reply", ["no operations found", "[not json]", "", '{"a": 1}'])
    def test_unparseable_reply_raises(self, reply: str) -> None:
        with pytest.raises(UnparseableNoteError):
            extract_json_array(reply)


class TestDraftFromRaw:
    def test_full_object(self) -> None:
        draft = draft_from_raw(
            {
                "ticker": "WDOQ25",
                "type": "V",
                "qty": 2,
                "price": 5432.5,
                "result": -350.0,
                "date": "2025-06-30",
                "time": "10:15:00",
                "costs": 4.2,
            },
            broker="clear",
            today=TODAY,
        )
        assert draft.ticker == "WDOQ25"
        assert draft.type is Side.SELL
        assert draft.qty == 2
        assert draft.price == Decimal("5432.5")
        assert draft.result == Decimal("-350.0")
        assert draft.date == date(2025, 6, 30)
        assert draft.time == time(10, 15)
        assert draft.broker == "clear"
        assert draft.costs == Decimal("4.2")
        assert draft.risk_level is RiskLevel.HIGH
        assert draft.notes.startswith("Importado via clear.")

    def test_defaults_for_missing_fields(self) -> None:
        draft = draft_from_raw({}, broker="generic", today=TODAY)
        assert draft.ticker == "UNKNOWN"
        assert draft.type is Side.BUY
        assert draft.qty == 1
        assert draft.price == Decimal("0")
        assert draft.result == Decimal("0")
        assert draft.date == TODAY
        assert draft.time == DEFAULT_TIME
        assert draft.costs == Decimal("0")
        assert draft.risk_level is RiskLevel.MEDIUM

    def test_non_numeric_values_fall_back(self) -> None:
        draft = draft_from_raw(
            {"qty": "dois", "price": "1.234,56", "date": "30/06/2025", "time": "manhã"},
            broker="xp",
            today=TODAY,
        )
        assert draft.qty == 1
        assert draft.price == Decimal("0")
        assert draft.date == TODAY
        assert draft.time == DEFAULT_TIME

    def test_numeric_ticker_and_negative_qty_are_normalized(self) -> None:
        draft = draft_from_raw(
            {"ticker": 123, "qty": -3, "broker": 42}, broker="generic", today=TODAY
        )
        assert draft.ticker == "123"
        assert draft.qty == 1
        assert draft.broker == "42"

    @pytest.mark.parametrize(
        "result, level",
        [
            (Decimal("300"), RiskLevel.MEDIUM),
            (Decimal("300.01"), RiskLevel.HIGH),
            (Decimal("-500"), RiskLevel.HIGH),
            (None, RiskLevel.MEDIUM),
        ],
    )
    def test_risk_level_threshold(self, result, level) -> None:
        assert risk_level(result) is level


class TestCleanStrategy:
    def test_plain_name(self) -> None:
        assert clean_strategy("  Scalping \n") == "Scalping"

    @pytest.mark.parametrize(
        "reply",
        [
            None,
            "",
            "   ",
            "x" * 51,
            "Não é possível determinar a estratégia",
            "As informações fornecidas não são suficientes",
        ],
    )
    def test_unusable_replies(self, reply) -> None:
        assert clean_strategy(reply) is None

    def test_fifty_chars_accepted(self) -> None:
        assert clean_strategy("y" * 50) == "y" * 50

    def test_prompt_defaults_notes(self) -> None:
        prompt = operation_prompt("WINQ25", Decimal("120"), 3, Decimal("1.5"), None)
        assert "Ativo: WINQ25" in prompt
        assert "Notas: Sem notas" in prompt
