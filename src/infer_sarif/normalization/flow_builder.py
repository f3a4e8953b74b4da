"""Translate an Infer bug trace into an annotated SARIF code flow."""

from __future__ import annotations

from typing import Sequence

from ..adapters import LocationResolver
from ..models import (
    AnnotatedCodeLocation,
    CodeFlow,
    LocationKind,
    NodeKind,
    PhysicalLocation,
    Region,
    TraceStep,
)


class CodeFlowBuilder:
    """Build :class:`CodeFlow` objects, classifying steps from their node tags.

    A ``procedure_end`` step is a function exit and turns the following step
    into a call return, whatever tags that step carries. A ``procedure_start``
    step is a function entry and turns the step before it into the call site.
    When several recognised tags sit on one step, the last one decides.
    """

    def __init__(self, resolver: LocationResolver) -> None:
        self._resolver = resolver

    def build(self, trace: Sequence[TraceStep]) -> CodeFlow:
        locations: list[AnnotatedCodeLocation] = []
        previous: AnnotatedCodeLocation | None = None
        next_is_call_return = False

        for step, item in enumerate(trace, start=1):
            location = AnnotatedCodeLocation(
                step=step,
                message=item.description,
                physical_location=PhysicalLocation(
                    uri=self._resolver.resolve(item.filename),
                    region=Region(start_line=item.line_number, start_column=item.column_number),
                ),
            )
            if next_is_call_return:
                location.kind = LocationKind.CALL_RETURN
            next_is_call_return = False

            for tag in item.node_tags:
                node_kind = tag.node_kind
                if node_kind is NodeKind.PROCEDURE_END:
                    location.kind = LocationKind.FUNCTION_EXIT
                    next_is_call_return = True
                elif node_kind is NodeKind.PROCEDURE_START:
                    location.kind = LocationKind.FUNCTION_ENTER
                    if previous is not None:
                        previous.kind = LocationKind.CALL
                elif node_kind is NodeKind.BRANCH:
                    location.kind = LocationKind.BRANCH

            locations.append(location)
            previous = location

        return CodeFlow(locations=locations)


__all__ = ["CodeFlowBuilder"]
