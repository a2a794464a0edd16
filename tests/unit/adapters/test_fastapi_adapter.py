"""Unit tests – FastAPI adapter (exception mapper, health router, flag deps)."""
from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from ras_party.adapters.fastapi import (
    FastAPIExceptionMapper,
    FastAPIHealthRouter,
    get_feature_flags,
    require_feature,
)
from ras_party.feature_flags import InMemoryFeatureFlagProvider
from ras_party.kernel.errors import (
    DomainError,
    ExternalServiceError,
    FeatureDisabledError,
    NotImplementedYetError,
    TimeoutError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# FastAPIExceptionMapper
# ---------------------------------------------------------------------------


class TestFastAPIExceptionMapper:
    def _client(self, exc: Exception) -> TestClient:
        app = FastAPI()
        FastAPIExceptionMapper().register(app)

        @app.get("/raise")
        def raise_it() -> None:
            raise exc

        return TestClient(app, raise_server_exceptions=False)

    def test_validation_error_is_400_with_body(self) -> None:
        resp = self._client(ValidationError("Invalid JSON")).get("/raise")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid JSON", "code": "validation_error"}

    def test_validation_field_errors_are_included(self) -> None:
        exc = ValidationError(
            "Missing required fields: telephone",
            errors=[{"field": "telephone", "message": "required"}],
        )
        resp = self._client(exc).get("/raise")
        assert resp.status_code == 400
        assert resp.json() == {
            "error": "Missing required fields: telephone",
            "code": "validation_error",
            "errors": [{"field": "telephone", "message": "required"}],
        }

    def test_feature_disabled_is_405_without_body(self) -> None:
        resp = self._client(FeatureDisabledError("x")).get("/raise")
        assert resp.status_code == 405
        assert resp.content == b""

    def test_not_implemented_is_501(self) -> None:
        resp = self._client(NotImplementedYetError()).get("/raise")
        assert resp.status_code == 501
        assert resp.json()["code"] == "not_implemented"

    def test_timeout_is_504(self) -> None:
        assert self._client(TimeoutError("slow")).get("/raise").status_code == 504

    def test_infrastructure_error_is_503(self) -> None:
        assert self._client(ExternalServiceError("svc")).get("/raise").status_code == 503

    def test_domain_error_is_422(self) -> None:
        assert self._client(DomainError("rule")).get("/raise").status_code == 422

    def test_unmapped_error_is_500(self) -> None:
        assert self._client(RuntimeError("boom")).get("/raise").status_code == 500


# ---------------------------------------------------------------------------
# FastAPIHealthRouter
# ---------------------------------------------------------------------------


class TestFastAPIHealthRouter:
    def test_liveness(self) -> None:
        app = FastAPI()
        app.include_router(FastAPIHealthRouter())
        resp = TestClient(app).get("/health/live")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_readiness_all_ok(self) -> None:
        async def flags_ready() -> bool:
            return True

        app = FastAPI()
        app.include_router(FastAPIHealthRouter(readiness_checks=[flags_ready]))
        resp = TestClient(app).get("/health/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "checks": {"flags_ready": True}}

    def test_readiness_failing_check(self) -> None:
        async def flags_ready() -> bool:
            return False

        app = FastAPI()
        app.include_router(FastAPIHealthRouter(readiness_checks=[flags_ready]))
        resp = TestClient(app).get("/health/ready")
        assert resp.status_code == 503
        assert resp.json()["status"] == "degraded"

    def test_readiness_raising_check_counts_as_failure(self) -> None:
        async def broken() -> bool:
            raise RuntimeError("down")

        app = FastAPI()
        app.include_router(FastAPIHealthRouter(readiness_checks=[broken]))
        resp = TestClient(app).get("/health/ready")
        assert resp.status_code == 503
        assert resp.json()["checks"] == {"broken": False}


# ---------------------------------------------------------------------------
# require_feature / get_feature_flags
# ---------------------------------------------------------------------------


class TestRequireFeature:
    def _app(self, flags: InMemoryFeatureFlagProvider, fallback: bool = False) -> FastAPI:
        app = FastAPI()
        app.state.feature_flags = flags
        FastAPIExceptionMapper().register(app)

        @app.get("/gated", dependencies=[require_feature("api.gated", fallback)])
        def gated() -> dict[str, str]:
            return {"ok": "yes"}

        return app

    def test_flag_on_passes(self) -> None:
        flags = InMemoryFeatureFlagProvider({"api.gated": True})
        resp = TestClient(self._app(flags)).get("/gated")
        assert resp.status_code == 200
        assert resp.json() == {"ok": "yes"}

    def test_flag_off_is_405(self) -> None:
        flags = InMemoryFeatureFlagProvider({"api.gated": False})
        assert TestClient(self._app(flags)).get("/gated").status_code == 405

    def test_unknown_flag_uses_fallback(self) -> None:
        flags = InMemoryFeatureFlagProvider()
        assert TestClient(self._app(flags)).get("/gated").status_code == 405
        assert TestClient(self._app(flags, fallback=True)).get("/gated").status_code == 200

    def test_flag_change_applies_to_next_request(self) -> None:
        flags = InMemoryFeatureFlagProvider()
        client = TestClient(self._app(flags))
        assert client.get("/gated").status_code == 405
        flags.set("api.gated", True)
        assert client.get("/gated").status_code == 200

    def test_get_feature_flags_reads_app_state(self) -> None:
        flags = InMemoryFeatureFlagProvider()
        app = FastAPI()
        app.state.feature_flags = flags
        seen: list[object] = []

        @app.get("/who")
        def who(provider: InMemoryFeatureFlagProvider = Depends(get_feature_flags)) -> dict[str, str]:
            seen.append(provider)
            return {}

        TestClient(app).get("/who")
        assert seen == [flags]
