# riskview/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ── Series ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DataPoint:
    ts: str
    value: float

    @classmethod
    def from_dict(cls, d: dict) -> "DataPoint":
        return cls(ts=str(d["ts"]), value=float(d["value"]))


Dataset = List[DataPoint]


def dataset_from_records(records) -> Dataset:
    return [DataPoint.from_dict(r) for r in (records or [])]


@dataclass(frozen=True)
class ChartPoint:
    """One visible point handed to the plotting surface."""
    display_label: str
    raw_value: float
    raw_timestamp: str


@dataclass(frozen=True)
class MarketData:
    symbol: str
    data: Dataset
    latest: Optional[DataPoint]

    @classmethod
    def from_dict(cls, d: dict) -> "MarketData":
        latest = d.get("latest")
        return cls(
            symbol=d.get("symbol", ""),
            data=dataset_from_records(d.get("data")),
            latest=DataPoint.from_dict(latest) if latest else None,
        )


# ── Model output ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Alert:
    level: str
    type: str
    message: str

    @classmethod
    def from_dict(cls, d: dict) -> "Alert":
        return cls(level=d.get("level", "INFO"), type=d.get("type", ""), message=d.get("message", ""))


@dataclass(frozen=True)
class GateStatus:
    name: str
    status: str
    value: Any = None
    threshold: Any = None
    message: Optional[str] = None
    priority: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict) -> "GateStatus":
        return cls(
            name=d.get("name", ""),
            status=d.get("status", "unknown"),
            value=d.get("value"),
            threshold=d.get("threshold"),
            message=d.get("message"),
            priority=d.get("priority"),
        )


@dataclass(frozen=True)
class LiquidityComponentScore:
    name: str
    weight: float
    score: float
    label: str
    value: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "LiquidityComponentScore":
        return cls(
            name=d.get("name", ""),
            weight=float(d.get("weight", 0.0)),
            score=float(d.get("score", 0.0)),
            label=d.get("label", ""),
            value=d.get("value"),
        )


@dataclass(frozen=True)
class LiquidityOutput:
    liquidity_score: float
    risk_light: str
    leverage_coef: float
    forbidden_strategies: List[str] = field(default_factory=list)
    component_scores: List[LiquidityComponentScore] = field(default_factory=list)
    hard_stop_triggered: bool = False
    hard_stop_reason: Optional[str] = None
    supply_texture_adjustment: float = 0.0
    rrp_buffer_amplified: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> "LiquidityOutput":
        return cls(
            liquidity_score=float(d.get("liquidity_score", 0.0)),
            risk_light=d.get("risk_light", "unknown"),
            leverage_coef=float(d.get("leverage_coef", 0.0)),
            forbidden_strategies=list(d.get("forbidden_strategies") or []),
            component_scores=[LiquidityComponentScore.from_dict(c) for c in d.get("component_scores") or []],
            hard_stop_triggered=bool(d.get("hard_stop_triggered", False)),
            hard_stop_reason=d.get("hard_stop_reason"),
            supply_texture_adjustment=float(d.get("supply_texture_adjustment", 0.0)),
            rrp_buffer_amplified=bool(d.get("rrp_buffer_amplified", False)),
        )


@dataclass(frozen=True)
class MacroOutput:
    """Macro model v4 output. Layers stay as plain dicts; pages read them by key."""
    macro_state: Dict[str, Any]
    layer1: Dict[str, Any]
    layer2: Dict[str, Any]
    layer3: Dict[str, Any]
    execution_matrix: Dict[str, Any]
    correction: Dict[str, Any]

    @classmethod
    def from_dict(cls, d: dict) -> "MacroOutput":
        return cls(
            macro_state=d.get("macro_state") or {},
            layer1=d.get("layer1") or {},
            layer2=d.get("layer2") or {},
            layer3=d.get("layer3") or {},
            execution_matrix=d.get("execution_matrix") or {},
            correction=d.get("correction") or {},
        )

    @property
    def gates(self) -> List[GateStatus]:
        return [GateStatus.from_dict(g) for g in self.layer3.get("gates") or []]


@dataclass(frozen=True)
class ModelOutput:
    run_id: str
    run_ts: str
    data_ts: str
    model_version: str
    liquidity: Optional[LiquidityOutput]
    macro: Optional[MacroOutput]
    report_summary: str = ""
    alerts: List[Alert] = field(default_factory=list)
    execution_time_ms: float = 0.0
    status: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> "ModelOutput":
        liq = d.get("liquidity")
        mac = d.get("macro")
        return cls(
            run_id=d.get("run_id", ""),
            run_ts=d.get("run_ts", ""),
            data_ts=d.get("data_ts", ""),
            model_version=d.get("model_version", ""),
            liquidity=LiquidityOutput.from_dict(liq) if liq else None,
            macro=MacroOutput.from_dict(mac) if mac else None,
            report_summary=d.get("report_summary", "") or "",
            alerts=[Alert.from_dict(a) for a in d.get("alerts") or []],
            execution_time_ms=float(d.get("execution_time_ms", 0.0)),
            status=d.get("status", ""),
        )

    @property
    def risk_light(self) -> str:
        return self.liquidity.risk_light if self.liquidity else "unknown"


# ── Health / history ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HealthCheck:
    status: str
    version: str
    timestamp: str
    models: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> "HealthCheck":
        return cls(
            status=d.get("status", ""),
            version=d.get("version", ""),
            timestamp=d.get("timestamp", ""),
            models=d.get("models") or {},
        )


@dataclass(frozen=True)
class HistoryRecord:
    run_id: str
    run_ts: str
    data_ts: str
    model_type: str
    model_version: str
    status: str
    execution_time_ms: float
    risk_light: Optional[str] = None
    liquidity_score: Optional[float] = None
    leverage_coef: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "HistoryRecord":
        return cls(
            run_id=d.get("run_id", ""),
            run_ts=d.get("run_ts", ""),
            data_ts=d.get("data_ts", ""),
            model_type=d.get("model_type", ""),
            model_version=d.get("model_version", ""),
            status=d.get("status", ""),
            execution_time_ms=float(d.get("execution_time_ms", 0.0)),
            risk_light=d.get("risk_light"),
            liquidity_score=d.get("liquidity_score"),
            leverage_coef=d.get("leverage_coef"),
        )


@dataclass(frozen=True)
class HistoryResponse:
    total: int
    days: int
    records: List[HistoryRecord]

    @classmethod
    def from_dict(cls, d: dict) -> "HistoryResponse":
        return cls(
            total=int(d.get("total", 0)),
            days=int(d.get("days", 0)),
            records=[HistoryRecord.from_dict(r) for r in d.get("records") or []],
        )
