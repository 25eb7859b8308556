# entity_route_context/contracts/routing.py
"""
Route match contract: the route that handled the current request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RouteMatch:
    """Matched route with its resolved parameters.

    Attributes:
        route_name: Name of the matched route (``None`` if unnamed).
        route_path: Path pattern of the route, e.g. ``/node/{node}/edit``.
        parameters: Parameter name to value, in route order. Entity
            parameters are already upcast to entity objects by the host.
    """

    route_name: str | None = None
    route_path: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)
