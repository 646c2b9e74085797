"""
Tests for the HTTP API.

Routes run through the real application with use cases replaced via
dependency_overrides. Validates request validation, response schemas,
error mapping, CORS and security headers.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.application.accounts.dtos import BlockedUser, ExpireTrialsResult
from app.application.community.dtos import (
    PodiumEntry,
    ResetWeeklyRankingResult,
    TopicScoreResult,
    TrendingTopicsResult,
)
from app.application.finances.dtos import ProcessRecurringCommand, ProcessRecurringResult
from app.application.market.dtos import (
    EconomicIndicatorsResult,
    IndicatorResult,
    MarketOverviewResult,
    QuoteResult,
)
from app.application.operations.dtos import (
    ClassifyStrategyResult,
    DeleteOperationsResult,
)
from app.domain.errors import ExternalServiceError
from app.domain.operations.errors import (
    AICreditsExhaustedError,
    AIRateLimitedError,
    EmptyImportError,
    OperationNotFoundError,
)
from app.interfaces.accounts.dependencies import get_expire_trials_use_case
from app.interfaces.community.dependencies import (
    get_reset_weekly_ranking_use_case,
    get_trending_topics_use_case,
)
from app.interfaces.finances.dependencies import get_process_recurring_use_case
from app.interfaces.market.dependencies import (
    get_economic_indicators_use_case,
    get_market_overview_use_case,
)
from app.interfaces.operations.dependencies import (
    get_classify_strategy_use_case,
    get_confirm_import_use_case,
    get_delete_by_dates_use_case,
)
from app.main import app
from app.shared.security.rate_limiting import limiter

client = TestClient(app)


@pytest.fixture(autouse=True)
def _clean_app():
    limiter.reset()
    yield
    app.dependency_overrides.clear()


def _override(dependency, result=None, side_effect=None) -> MagicMock:
    use_case = MagicMock()
    use_case.execute.return_value = result
    use_case.execute.side_effect = side_effect
    app.dependency_overrides[dependency] = lambda: use_case
    return use_case


class TestHealthAndMiddleware:
    def test_health(self) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_security_headers_present(self) -> None:
        response = client.get("/api/v1/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_cors_preflight(self) -> None:
        response = client.options(
            "/api/v1/finances/recurring/process",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, apikey, content-type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        allowed = response.headers["access-control-allow-headers"].lower()
        assert "apikey" in allowed
        assert "x-client-info" in allowed


class TestFinancesEndpoints:
    def test_process_without_body(self) -> None:
        use_case = _override(
            get_process_recurring_use_case, ProcessRecurringResult(processed=2, skipped=1)
        )

        response = client.post("/api/v1/finances/recurring/process")

        assert response.status_code == 200
        assert response.json() == {"success": True, "processed": 2, "skipped": 1, "errors": None}
        assert use_case.execute.call_args.args[0] == ProcessRecurringCommand(today=None)

    def test_process_with_date_and_errors(self) -> None:
        use_case = _override(
            get_process_recurring_use_case,
            ProcessRecurringResult(processed=1, errors=["Failed to process recurring transaction x: boom"]),
        )

        response = client.post("/api/v1/finances/recurring/process", json={"today": "2025-03-31"})

        body = response.json()
        assert body["processed"] == 1
        assert body["errors"] == ["Failed to process recurring transaction x: boom"]
        assert use_case.execute.call_args.args[0].today == date(2025, 3, 31)

    def test_invalid_date_rejected(self) -> None:
        _override(get_process_recurring_use_case, ProcessRecurringResult(processed=0))
        response = client.post("/api/v1/finances/recurring/process", json={"today": "31/03/2025"})
        assert response.status_code == 422
        assert response.json()["success"] is False


class TestCommunityEndpoints:
    def test_trending(self) -> None:
        _override(
            get_trending_topics_use_case,
            TrendingTopicsResult(
                categories=[TopicScoreResult("Options", 14)],
                hashtags=[TopicScoreResult("#win", 5)],
            ),
        )

        response = client.get("/api/v1/community/trending")

        assert response.json() == {
            "success": True,
            "categories": [{"name": "Options", "score": 14}],
            "hashtags": [{"name": "#win", "score": 5}],
        }

    def test_weekly_reset(self) -> None:
        _override(
            get_reset_weekly_ranking_use_case,
            ResetWeeklyRankingResult(top3=[PodiumEntry(1, "Ana", 990)], badges_awarded=1),
        )

        body = client.post("/api/v1/community/weekly-ranking/reset").json()

        assert body["top3"] == [{"position": 1, "name": "Ana", "points": 990}]
        assert body["badges_awarded"] == 1


class TestAccountsEndpoints:
    def test_expire_trials(self) -> None:
        _override(
            get_expire_trials_use_case,
            ExpireTrialsResult(blocked=1, users=[BlockedUser("u1", "Ana", "ana@example.com")]),
        )

        body = client.post("/api/v1/accounts/trials/expire").json()

        assert body["blocked"] == 1
        assert body["users"] == [{"id": "u1", "name": "Ana", "email": "ana@example.com"}]


class TestOperationsEndpoints:
    def test_camel_case_body_accepted(self) -> None:
        use_case = _override(get_delete_by_dates_use_case, DeleteOperationsResult(deleted=4))

        response = client.post(
            "/api/v1/operations/delete-by-dates",
            json={"userId": "u1", "dates": ["2025-07-01", "2025-07-02"]},
        )

        assert response.json() == {"success": True, "deleted": 4}
        command = use_case.execute.call_args.args[0]
        assert command.user_id == "u1"
        assert command.dates == [date(2025, 7, 1), date(2025, 7, 2)]

    def test_empty_dates_rejected(self) -> None:
        _override(get_delete_by_dates_use_case, DeleteOperationsResult(deleted=0))
        response = client.post(
            "/api/v1/operations/delete-by-dates", json={"userId": "u1", "dates": []}
        )
        assert response.status_code == 422

    def test_empty_import_is_400(self) -> None:
        _override(get_confirm_import_use_case, side_effect=EmptyImportError())

        response = client.post(
            "/api/v1/operations/import/confirm", json={"userId": "u1", "operations": []}
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Invalid request",
            "detail": "At least one operation is required",
        }

    def test_classify_success(self) -> None:
        _override(
            get_classify_strategy_use_case,
            ClassifyStrategyResult(success=True, strategy="Breakout", confidence=Decimal("0.85")),
        )

        response = client.post(
            "/api/v1/operations/classify",
            json={"operationId": "op-1", "asset": "WINQ25", "result": 150},
        )

        body = response.json()
        assert body["success"] is True
        assert body["strategy"] == "Breakout"
        assert Decimal(str(body["confidence"])) == Decimal("0.85")

    @pytest.mark.parametrize(
        "error, status",
        [
            (OperationNotFoundError("op-9"), 404),
            (AIRateLimitedError(), 429),
            (AICreditsExhaustedError(), 402),
        ],
    )
    def test_classify_error_mapping(self, error: Exception, status: int) -> None:
        _override(get_classify_strategy_use_case, side_effect=error)

        response = client.post(
            "/api/v1/operations/classify",
            json={"operationId": "op-9", "asset": "WINQ25", "result": 150},
        )

        assert response.status_code == status
        assert response.json()["success"] is False


class TestMarketEndpoints:
    def test_indicators(self) -> None:
        reading = IndicatorResult(value=15.0, date="10/12/2025", formatted="15.00%")
        _override(get_economic_indicators_use_case, EconomicIndicatorsResult(reading, reading, reading))

        body = client.get("/api/v1/market/indicators").json()

        assert body["selic"] == {
            "value": 15.0,
            "date": "10/12/2025",
            "formatted": "15.00%",
            "fallback": False,
        }

    def test_overview(self) -> None:
        quote = QuoteResult(value=128.4, change=-0.8, formatted="▼ 0.80%", is_positive=False)
        _override(
            get_market_overview_use_case,
            MarketOverviewResult(
                ibovespa=quote,
                dolar=quote,
                sp500=quote,
                last_update=datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc),
            ),
        )

        body = client.get("/api/v1/market/overview").json()

        assert body["ibovespa"]["is_positive"] is False
        assert body["last_update"].startswith("2025-07-01T12:00:00")


class TestErrorMapping:
    def test_external_service_is_502(self) -> None:
        _override(
            get_delete_by_dates_use_case,
            side_effect=ExternalServiceError("database", "unreachable"),
        )
        response = client.post(
            "/api/v1/operations/delete-by-dates", json={"userId": "u1", "dates": ["2025-07-01"]}
        )
        assert response.status_code == 502
        assert response.json()["success"] is False

    def test_unexpected_error_hides_internals(self) -> None:
        _override(get_trending_topics_use_case, side_effect=RuntimeError("password=hunter2"))
        safe_client = TestClient(app, raise_server_exceptions=False)

        response = safe_client.get("/api/v1/community/trending")

        assert response.status_code == 500
        assert "hunter2" not in response.text
