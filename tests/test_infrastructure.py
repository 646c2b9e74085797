"""
Tests for the infrastructure adapters.

SQL adapters run against a MagicMock engine; the tests check the
statements issued and how rows are mapped back to entities.
HTTP adapters run against httpx.MockTransport, no network involved.
"""

import json
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from app.domain.errors import ExternalServiceError
from app.domain.finances.entities import (
    Frequency,
    GeneratedTransaction,
    TransactionType,
)
from app.domain.market.entities import Indicator
from app.domain.operations.errors import (
    AICreditsExhaustedError,
    AIGatewayError,
    AIRateLimitedError,
)
from app.infrastructure.finances.ledger_repository import LedgerRepositoryAdapter
from app.infrastructure.finances.recurring_transaction_repository import (
    RecurringTransactionRepositoryAdapter,
)
from app.infrastructure.market.bcb_indicator_adapter import BcbIndicatorAdapter
from app.infrastructure.market.quote_adapter import QuoteAdapter, first_number
from app.infrastructure.operations.chat_completion_adapter import (
    ChatCompletionAdapter,
)
from app.infrastructure.operations.operation_repository import (
    OperationRepositoryAdapter,
)


def _engine() -> tuple[MagicMock, MagicMock]:
    """Return an engine mock and the connection both connect() and begin() yield."""
    engine = MagicMock()
    conn = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    engine.begin.return_value.__enter__.return_value = conn
    return engine, conn


# ══════════════════════════════════════════════════════════════════════
# SQL adapters
# ══════════════════════════════════════════════════════════════════════


class TestRecurringTransactionRepositoryAdapter:
    def test_get_due_maps_rows(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.mappings.return_value.all.return_value = [
            {
                "id": "rt-1",
                "user_id": "u-1",
                "title": "Salário",
                "amount": 5000,
                "type": "income",
                "category": "Trabalho",
                "account_id": None,
                "description": None,
                "tags": ["fixo"],
                "frequency": "monthly",
                "day_of_month": 5,
                "next_execution_date": date(2025, 3, 5),
                "end_date": None,
                "is_active": True,
            }
        ]

        templates = RecurringTransactionRepositoryAdapter(engine).get_due(date(2025, 3, 5))

        assert len(templates) == 1
        template = templates[0]
        assert template.type is TransactionType.INCOME
        assert template.frequency is Frequency.MONTHLY
        assert template.amount == Decimal("5000")
        assert template.tags == ["fixo"]
        sql, params = conn.execute.call_args.args
        assert "next_execution_date <= :today" in str(sql)
        assert params == {"today": date(2025, 3, 5)}

    @pytest.mark.parametrize("rowcount, moved", [(1, True), (0, False)])
    def test_advance_is_compare_and_set(self, rowcount: int, moved: bool) -> None:
        engine, conn = _engine()
        conn.execute.return_value.rowcount = rowcount

        result = RecurringTransactionRepositoryAdapter(engine).advance(
            "rt-1", expected=date(2025, 3, 5), next_date=date(2025, 4, 5)
        )

        assert result is moved
        sql, params = conn.execute.call_args.args
        assert "next_execution_date = :expected" in str(sql)
        assert params == {
            "id": "rt-1",
            "expected": date(2025, 3, 5),
            "next_date": date(2025, 4, 5),
        }


class TestLedgerRepositoryAdapter:
    def _tx(self) -> GeneratedTransaction:
        return GeneratedTransaction(
            recurring_id="rt-1",
            user_id="u-1",
            title="Aluguel",
            amount=Decimal("1500"),
            type=TransactionType.EXPENSE,
            category="Moradia",
            transaction_date=date(2025, 3, 31),
        )

    def test_insert_ignores_existing_occurrence(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.rowcount = 0

        assert LedgerRepositoryAdapter(engine).add_generated(self._tx()) is False
        sql, params = conn.execute.call_args.args
        assert "ON CONFLICT (recurring_id, transaction_date) DO NOTHING" in str(sql)
        assert params["type"] == "expense"
        assert params["recurring_id"] == "rt-1"

    def test_insert_reports_new_row(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.rowcount = 1
        assert LedgerRepositoryAdapter(engine).add_generated(self._tx()) is True


class TestOperationRepositoryAdapter:
    def test_delete_by_ids_returns_rowcount(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.rowcount = 2

        assert OperationRepositoryAdapter(engine).delete_by_ids(["a", "b"]) == 2
        assert conn.execute.call_args.args[1] == {"ids": ["a", "b"]}

    def test_delete_by_ids_empty_skips_database(self) -> None:
        engine, _ = _engine()
        assert OperationRepositoryAdapter(engine).delete_by_ids([]) == 0
        engine.begin.assert_not_called()

    def test_delete_dependents_touches_both_tables(self) -> None:
        engine, conn = _engine()
        OperationRepositoryAdapter(engine).delete_dependents(["a"])
        statements = [str(c.args[0]) for c in conn.execute.call_args_list]
        assert any("notifications" in s for s in statements)
        assert any("ai_classification_logs" in s for s in statements)

    def test_failed_notifications_delete_still_clears_logs(self) -> None:
        engine, conn = _engine()
        conn.execute.side_effect = [
            OperationalError("DELETE FROM notifications", {}, Exception("no column")),
            MagicMock(),
        ]

        OperationRepositoryAdapter(engine).delete_dependents(["op1"])

        statements = [str(c.args[0]) for c in conn.execute.call_args_list]
        assert len(statements) == 2
        assert "ai_classification_logs" in statements[1]
        assert engine.begin.call_count == 2

    def test_find_ids_by_strategy_is_case_insensitive(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.all.return_value = [("id-1",), ("id-2",)]

        ids = OperationRepositoryAdapter(engine).find_ids_by_strategy("scalping", limit=100)

        assert ids == ["id-1", "id-2"]
        assert "lower(strategy) = lower(:strategy)" in str(conn.execute.call_args.args[0])

    def test_get_by_id_missing(self) -> None:
        engine, conn = _engine()
        conn.execute.return_value.mappings.return_value.first.return_value = None
        assert OperationRepositoryAdapter(engine).get_by_id("nope") is None


# ══════════════════════════════════════════════════════════════════════
# HTTP adapters
# ══════════════════════════════════════════════════════════════════════


def _chat(handler, api_key: str | None = "secret") -> ChatCompletionAdapter:
    return ChatCompletionAdapter(
        url="https://ai.test/v1/chat/completions",
        api_key=api_key,
        model="test-model",
        transport=httpx.MockTransport(handler),
    )


class TestChatCompletionAdapter:
    def test_sends_prompt_and_returns_content(self) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"choices": [{"message": {"content": "  Scalping\n"}}]}
            )

        reply = _chat(handler).complete("sys", "user", temperature=0.3, max_tokens=50)

        assert reply == "Scalping"
        assert seen["auth"] == "Bearer secret"
        assert seen["body"]["model"] == "test-model"
        assert seen["body"]["max_tokens"] == 50
        assert [m["role"] for m in seen["body"]["messages"]] == ["system", "user"]

    def test_max_tokens_omitted_by_default(self) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"choices": [{"message": {"content": "[]"}}]})

        _chat(handler).complete("sys", "user")
        assert "max_tokens" not in seen["body"]

    @pytest.mark.parametrize(
        "status, error",
        [(429, AIRateLimitedError), (402, AICreditsExhaustedError), (500, AIGatewayError)],
    )
    def test_error_statuses(self, status: int, error: type) -> None:
        adapter = _chat(lambda request: httpx.Response(status, json={}))
        with pytest.raises(error):
            adapter.complete("sys", "user")

    def test_missing_api_key(self) -> None:
        handler = MagicMock()
        with pytest.raises(AIGatewayError):
            _chat(handler, api_key=None).complete("sys", "user")
        handler.assert_not_called()

    def test_unexpected_shape(self) -> None:
        adapter = _chat(lambda request: httpx.Response(200, json={"choices": []}))
        with pytest.raises(AIGatewayError):
            adapter.complete("sys", "user")


class TestBcbIndicatorAdapter:
    def test_reads_last_point(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/dados/serie/bcdata.sgs.432/dados/ultimos/1"
            assert request.url.params["formato"] == "json"
            return httpx.Response(200, json=[{"data": "10/12/2025", "valor": "15.00"}])

        adapter = BcbIndicatorAdapter(
            "https://api.bcb.test/dados/serie", transport=httpx.MockTransport(handler)
        )
        reading = adapter.latest(Indicator.SELIC)

        assert reading.value == 15.0
        assert reading.date == "10/12/2025"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(503, json=[]),
            httpx.Response(200, text="<html>maintenance</html>"),
            httpx.Response(200, json=[]),
        ],
    )
    def test_unusable_responses_raise(self, response: httpx.Response) -> None:
        adapter = BcbIndicatorAdapter(
            "https://api.bcb.test/dados/serie",
            transport=httpx.MockTransport(lambda request: response),
        )
        with pytest.raises(ExternalServiceError):
            adapter.latest(Indicator.IPCA)


class TestQuoteAdapter:
    def _adapter(self, handler) -> QuoteAdapter:
        return QuoteAdapter(
            "https://brapi.test/api",
            "https://awesome.test/json",
            transport=httpx.MockTransport(handler),
        )

    def test_stock_quote_from_results(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/quote/BOVA11"
            return httpx.Response(
                200,
                json={"results": [{"regularMarketPrice": 128.4, "regularMarketChangePercent": -0.8}]},
            )

        quote = self._adapter(handler).stock_quote("BOVA11")
        assert (quote.value, quote.change) == (128.4, -0.8)

    def test_currency_quote_uses_pair_key(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/json/last/USD-BRL"
            return httpx.Response(200, json={"USDBRL": {"bid": "5.4321", "pctChange": "0.25"}})

        quote = self._adapter(handler).currency_quote("USD-BRL")
        assert (quote.value, quote.change) == (5.4321, 0.25)

    def test_missing_results_read_as_zero(self) -> None:
        quote = self._adapter(lambda request: httpx.Response(200, json={"results": []})).stock_quote("X")
        assert (quote.value, quote.change) == (0.0, 0.0)

    def test_http_error_raises(self) -> None:
        adapter = self._adapter(lambda request: httpx.Response(500))
        with pytest.raises(ExternalServiceError):
            adapter.stock_quote("BOVA11")

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"price": "10.5"}, 10.5),
            ({"regularMarketPrice": None, "bid": 3}, 3.0),
            ({"price": "abc"}, 0.0),
            ({"price": "nan"}, 0.0),
            ({}, 0.0),
        ],
    )
    def test_first_number(self, data: dict, expected: float) -> None:
        assert first_number(data, ("regularMarketPrice", "price", "bid")) == expected
