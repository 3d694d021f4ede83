"""Persisted data models for histsweep."""

from histsweep.models.history import SweepRecord, create_sweep_record

__all__ = ["SweepRecord", "create_sweep_record"]
