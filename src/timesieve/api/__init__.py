"""HTTP interface for TimeSieve (FastAPI)."""
