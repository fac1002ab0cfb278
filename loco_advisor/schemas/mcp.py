"""
Schemas for the MCP (Model Context Protocol) step envelope.

The envelope context carries the user message ('message' or 'query'),
the getDashBoardData payload ('dashboard') and the optional freshness
fields. Steps run in order: extract, resolve, recommend.
"""
from typing import Any, Dict, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel

StepTool = Literal["extract", "resolve", "recommend"]


class Step(BaseModel):
    """One tool invocation; output is None until the step has run."""
    tool: StepTool
    input: Optional[Union[Dict[str, Any], str]] = None
    output: Optional[Union[Dict[str, Any], str]] = None


class MCPEnvelope(BaseModel):
    trace_id: UUID
    context: Optional[Dict[str, Any]] = None
    steps: List[Step]

    def find_step(self, tool: StepTool) -> Optional[Step]:
        """Return the first step for tool, if any."""
        return next((s for s in self.steps if s.tool == tool), None)
