"""Read views of Simplifier login method records.

The remote store reports source and target as numeric ids whose meaning is
defined per login method type by the record's own ``loginMethodType``
tables; this module resolves them to names for display.

Usage:
    details = LoginMethodTransformer.describe(raw_record)
    details["source"]       # {"id": 1, "name": "PROVIDED"}

    listing = LoginMethodTransformer.summarize(raw_records)
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

UNKNOWN = "UNKNOWN"

# Configuration keys never echoed back in read views
SENSITIVE_FIELDS = ("password", "token", "ticket")


class LoginMethodTransformer:
    """Transformer from raw login method records to read views."""

    @staticmethod
    def describe(raw: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a raw login method record to its detail view.

        Args:
            raw: Record as returned by the login method details endpoint

        Returns:
            Detail view with source/target ids resolved to names

        Example:
            >>> raw = {
            ...     "name": "BasicAdmin",
            ...     "description": "",
            ...     "loginMethodType": {
            ...         "technicalName": "UserCredentials",
            ...         "sources": [{"id": 1, "name": "PROVIDED"}],
            ...         "targets": [{"id": 0, "name": "DEFAULT"}],
            ...         "supportedConnectors": ["REST"],
            ...     },
            ...     "source": 1,
            ...     "target": 0,
            ...     "sourceConfiguration": {"username": "admin"},
            ... }
            >>> LoginMethodTransformer.describe(raw)["source"]
            {'id': 1, 'name': 'PROVIDED'}
        """
        method_type = raw.get("loginMethodType") or {}
        source_id = raw.get("source")
        target_id = raw.get("target")

        return {
            "name": raw.get("name"),
            "description": raw.get("description"),
            "type": method_type.get("technicalName"),
            "source": {
                "id": source_id,
                "name": _resolve_name(method_type.get("sources"), source_id),
            },
            "target": {
                "id": target_id,
                "name": _resolve_name(method_type.get("targets"), target_id),
            },
            "sourceConfiguration": _redact(raw.get("sourceConfiguration")),
            "targetConfiguration": raw.get("targetConfiguration"),
            "configuration": raw.get("configuration"),
            "supportedConnectors": method_type.get("supportedConnectors", []),
        }

    @staticmethod
    def summarize(raw_methods: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Convert a list of raw login method records to the list view."""
        entries = []
        for method in raw_methods:
            method_type = method.get("loginMethodType") or {}
            entries.append({
                "name": method.get("name"),
                "description": method.get("description"),
                "type": method_type.get("technicalName"),
                "supportedConnectors": method_type.get("supportedConnectors", []),
                "updateInfo": method.get("updateInfo"),
            })
        return {"loginMethods": entries, "totalCount": len(entries)}


def _resolve_name(entries: Optional[List[Dict[str, Any]]], entry_id: Any) -> str:
    for entry in entries or []:
        if entry.get("id") == entry_id:
            return entry.get("name", UNKNOWN)
    return UNKNOWN


def _redact(config: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not isinstance(config, dict):
        return config
    return {key: ("***" if key in SENSITIVE_FIELDS else value) for key, value in config.items()}
