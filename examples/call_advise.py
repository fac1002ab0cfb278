"""
Example Python client for the Loco Advisor API.

Sends a question together with a saved getDashBoardData payload and prints
the recommended calls or the follow-up question.

Usage:
    python examples/call_advise.py dashboard.json "When is loco 4430 due next?"
"""
import json
import os
import sys
import uuid
from typing import Any, Dict

import requests

# Configuration
API_URL = os.environ.get("API_URL", "http://localhost:8000")


class AdvisorError(Exception):
    """Raised when the advisor API returns an error."""


def _post(path: str, body: Dict[str, Any]) -> Dict[str, Any]:
    try:
        response = requests.post(f"{API_URL}{path}", json=body, timeout=30)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        raise AdvisorError(f"HTTP error calling {path}: {http_err}. Response: {detail}") from http_err
    except requests.exceptions.RequestException as req_err:
        raise AdvisorError(f"Request error calling {path}: {req_err}") from req_err


def call_advise(message: str, dashboard: Dict[str, Any], fresh: bool = True) -> Dict[str, Any]:
    """
    Call the /advise endpoint.

    Args:
        message: Natural language question
        dashboard: getDashBoardData payload
        fresh: Whether the dashboard payload was just fetched

    Returns:
        Advice as a dict
    """
    return _post("/advise", {"message": message, "dashboard": dashboard, "dashboardDataFresh": fresh})


def call_mcp(message: str, dashboard: Dict[str, Any]) -> Dict[str, Any]:
    """Call the /mcp endpoint with a single recommend step."""
    envelope = {
        "trace_id": str(uuid.uuid4()),
        "context": {"message": message, "dashboard": dashboard, "dashboardDataFresh": True},
        "steps": [{"tool": "recommend"}],
    }
    return _post("/mcp", envelope)


def print_advice(advice: Dict[str, Any]) -> None:
    print(f"Intent: {advice.get('intent') or '-'}")
    if advice.get("blocked"):
        print("Blocked: this request has side effects.")
    for call in advice.get("recommended_calls", []):
        print(f"Call: {call['function']}({json.dumps(call.get('args', {}))})")
    for field in advice.get("read_these_fields", []):
        print(f"  read {field}")
    if advice.get("follow_up"):
        print()
        print(advice["follow_up"])


def main():
    """Main function."""
    if len(sys.argv) < 2:
        print("Usage: call_advise.py DASHBOARD_JSON [QUESTION]")
        sys.exit(1)

    with open(sys.argv[1], "r", encoding="utf-8") as f:
        dashboard = json.load(f)

    if len(sys.argv) > 2:
        message = " ".join(sys.argv[2:])
    else:
        message = input("Enter your question: ")

    try:
        if os.environ.get("USE_MCP"):
            envelope = call_mcp(message, dashboard)
            print_advice(envelope["steps"][-1]["output"])
        else:
            print_advice(call_advise(message, dashboard))
    except AdvisorError as e:
        print(f"Advisor Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
