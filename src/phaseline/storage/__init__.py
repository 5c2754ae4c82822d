"""Snapshot readers for phaseline."""

from phaseline.storage.json_source import Dataset, load_dataset, parse_dataset

__all__ = ["Dataset", "load_dataset", "parse_dataset"]
