# riskview/api_client.py
from __future__ import annotations

from typing import Dict, List, Optional

import requests

from riskview.config import API_BASE_URL, API_TIMEOUT
from riskview.logging_setup import get_logger
from riskview.models import (
    Dataset,
    HealthCheck,
    HistoryResponse,
    LiquidityOutput,
    MacroOutput,
    MarketData,
    ModelOutput,
)

logger = get_logger(__name__)


class ApiError(RuntimeError):
    pass


class ApiClient:
    """
    Client for the model backend. Every endpoint answers with an envelope
    {"success": bool, "data": ..., "error": str | None}; `data` is returned.
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = API_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _request(self, method: str, endpoint: str, params: Optional[dict] = None):
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(method, url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"Request to {endpoint} failed: {e}") from e

        if not response.ok:
            raise ApiError(f"API Error: {response.status_code} {response.reason}")

        try:
            result = response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {endpoint}") from e

        if not result.get("success"):
            raise ApiError(result.get("error") or "Unknown error")
        return result.get("data")

    # ── Endpoints ─────────────────────────────────────────────────────────────

    def health_check(self) -> HealthCheck:
        return HealthCheck.from_dict(self._request("GET", "/api/health"))

    def run_model(self, data_date: Optional[str] = None) -> ModelOutput:
        params = {"data_date": data_date} if data_date else None
        logger.info(f"Running model (data_date={data_date or 'latest'})")
        return ModelOutput.from_dict(self._request("POST", "/api/model/run", params=params))

    def get_latest_output(self) -> ModelOutput:
        return ModelOutput.from_dict(self._request("GET", "/api/model/latest"))

    def get_liquidity_output(self) -> LiquidityOutput:
        return LiquidityOutput.from_dict(self._request("GET", "/api/liquidity"))

    def get_macro_output(self) -> MacroOutput:
        return MacroOutput.from_dict(self._request("GET", "/api/macro"))

    def get_market_data(self, symbol: str) -> MarketData:
        return MarketData.from_dict(self._request("GET", f"/api/market-data/{symbol}"))

    def list_symbols(self) -> List[str]:
        data = self._request("GET", "/api/market-data") or {}
        return list(data.get("symbols") or [])

    def get_history(self, days: int = 30, model_type: Optional[str] = None) -> HistoryResponse:
        params = {"days": str(days)}
        if model_type:
            params["model_type"] = model_type
        return HistoryResponse.from_dict(self._request("GET", "/api/model/history", params=params))

    def get_output_by_id(self, run_id: str) -> ModelOutput:
        return ModelOutput.from_dict(self._request("GET", f"/api/model/output/{run_id}"))

    def fetch_series(self, symbols: List[str]) -> Dict[str, Dataset]:
        """Market data for several symbols. A symbol that fails comes back empty."""
        out: Dict[str, Dataset] = {}
        for s in dict.fromkeys(symbols):
            try:
                out[s] = self.get_market_data(s).data
            except ApiError as e:
                logger.warning(f"Market data for {s} unavailable: {e}")
                out[s] = []
        return out
