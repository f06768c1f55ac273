"""
Progress Tracker - Learning Program Completion Dashboard.

Loads a static dataset of program participants once and derives the
displayed view (search, status filter, sort) plus whole-dataset summary
counts on every control change.

Architecture:
    - Ports & Adapters for the record source (file, HTTP, in-memory)
    - Pure view pipeline: (dataset, controls) -> ordered records
    - Pure aggregate computation: dataset -> summary counts
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Record, enums and value objects
    - adapters: Record sources
    - loading: One-shot dataset loader with empty-on-error fallback
    - filters / sorting: Stages of the view pipeline
    - pipeline: derive_view and compute_stats
    - presentation: Dashboard session and text renderer
    - config: Configuration models and loaders

Example:
    >>> from progress_tracker.adapters import JsonFileRecordSource
    >>> from progress_tracker.presentation import DashboardSession
    >>> session = DashboardSession.from_source(JsonFileRecordSource("data.json"))
    >>> session.set_search_text("ana")
    >>> print(session.snapshot().stats)

"""

import logging

__version__ = "0.1.0"

# Connection chatter from requests' transport, shown only when debugging.
HTTP_TRANSPORT_LOGGER = "urllib3"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, log_format: str = LOG_FORMAT) -> None:
    """
    Send tracker diagnostics to stderr.

    A failed load of the record collection is only ever reported here:
    the dashboard itself just shows an empty table. At INFO the loader's
    fetch and record count are visible; at DEBUG every view recomputation
    and the HTTP transport are logged too.

    Args:
        level: Level for the progress_tracker loggers
        log_format: logging format string
    """
    logging.basicConfig(level=level, format=log_format, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("progress_tracker").setLevel(level)
    logging.getLogger(HTTP_TRANSPORT_LOGGER).setLevel(
        logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    )
