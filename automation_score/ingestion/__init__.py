"""
Snapshot ingestion: aggregates tool, SOP and category records from the
external data layer into the ``RawMetrics`` the scoring core consumes.
"""
