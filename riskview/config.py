import os

API_BASE_URL         = os.getenv("RISKVIEW_API_URL", "http://localhost:8000").rstrip("/")
API_TIMEOUT          = float(os.getenv("RISKVIEW_API_TIMEOUT", "30"))
LOG_LEVEL            = os.getenv("RISKVIEW_LOG_LEVEL", "INFO")
HISTORY_DAYS         = 30
CACHE_TTL_SECONDS    = 5 * 60

# Market data symbols served by the model backend, per page
OVERVIEW_SYMBOLS  = ["SPX", "MOVE", "DXY", "HY_OAS"]
LIQUIDITY_SYMBOLS = ["WALCL", "SOFR", "IORB", "WRESBAL"]
MACRO_SYMBOLS     = ["DXY", "HY_OAS", "IG_OAS", "VIX"]

# Unit scaling applied before charting (millions -> trillions)
SERIES_SCALE = {
    "WALCL":   1e-6,
    "WRESBAL": 1e-6,
}

# Chart cards: title, colour, area fill, horizontal reference lines (y, colour, label)
CHARTS = {
    "SPX":     dict(title="S&P 500",                   color="#06b6d4", area=True,  refs=[]),
    "MOVE":    dict(title="MOVE Index",                color="#f59e0b", area=False,
                    refs=[(100, "#f59e0b", "Watch"), (120, "#ef4444", "Gate closed")]),
    "DXY":     dict(title="Dollar index (DXY)",        color="#10b981", area=True,  refs=[]),
    "HY_OAS":  dict(title="High yield OAS (bp)",       color="#a855f7", area=False,
                    refs=[(400, "#f59e0b", "Watch"), (500, "#ef4444", "Warning")]),
    "IG_OAS":  dict(title="Investment grade OAS (bp)", color="#06b6d4", area=False, refs=[]),
    "VIX":     dict(title="VIX",                       color="#ec4899", area=False,
                    refs=[(20, "#f59e0b", "Watch"), (30, "#ef4444", "Panic")]),
    "WALCL":   dict(title="Fed balance sheet ($tn)",   color="#a855f7", area=True,  refs=[]),
    "WRESBAL": dict(title="Bank reserves ($tn)",       color="#06b6d4", area=True,  refs=[]),
    "SOFR_IORB": dict(title="SOFR - IORB spread (bp)", color="#10b981", area=False,
                      refs=[(5, "#ef4444", "Red light")]),
}
