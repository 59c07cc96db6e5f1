# json_api.py - line-delimited JSON front end for the DictionaryService
"""
One JSON request per input line, one compact JSON response per output line.

Request:
    {"command": "check" | "add" | "list", "word": "...", "method": "bst" | "hashmap"}
Response:
    the service result (see core.protocols) or {"error": "..."}

Usage:
    echo '{"command":"check","word":"helo"}' | spell-dictionary serve
"""

import json
from typing import Any, Dict, TextIO

from .core.dictionary_service import DictionaryService
from .utils.logger_utils import Log

COMMANDS = ("check", "add", "list")


def handle_request(service: DictionaryService, raw: str) -> Dict[str, Any]:
    """Decode one request line and run it. Never raises for bad input."""
    try:
        payload = json.loads(raw)
    except ValueError as e:
        return {"error": f"Invalid JSON: {e}"}
    if not isinstance(payload, dict):
        return {"error": "Request must be a JSON object"}

    command = payload.get("command")
    if command not in COMMANDS:
        return {"error": f"Unknown command: {command}" if command else "Command is required"}

    method = payload.get("method") or None
    if method is not None and not isinstance(method, str):
        return {"error": f"Unknown method: {method}"}
    try:
        if command == "check":
            return dict(service.check(payload.get("word"), method))
        if command == "add":
            return dict(service.add(payload.get("word"), method))
        return dict(service.list_words(method))
    except ValueError as e:
        return {"error": str(e)}


def serve(service: DictionaryService, stdin: TextIO, stdout: TextIO) -> int:
    """Answer requests until EOF. Returns the number of requests handled."""
    handled = 0
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        response = handle_request(service, line)
        if "error" in response:
            Log.warning(f"[json_api] {response['error']}")
        stdout.write(json.dumps(response, ensure_ascii=False, separators=(",", ":")) + "\n")
        stdout.flush()
        handled += 1
    Log.info(f"[json_api] served {handled} requests")
    return handled
