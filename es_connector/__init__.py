"""Elasticsearch connector - connection settings and retry policy."""

from es_connector.shared.project import get_project

__version__ = get_project().version

# No package-level imports - use absolute imports instead
