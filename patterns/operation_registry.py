"""
Operation Registry — explicit name -> handler table

Request routing looks operations up by name instead of relying on
framework reflection:
- Register/deregister handlers at startup
- List registered operations (e.g. for the service index)
- Invoke by name against a per-request target
"""
from pydantic import BaseModel, Field
from typing import Any, Callable, Optional
from datetime import datetime, timezone
import inspect


class OperationDefinition(BaseModel):
    """Registered operation metadata."""
    name: str
    description: str
    parameters: list[str] = Field(default_factory=list)
    registered_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class OperationRegistry:
    """Table of named operations.

    Handlers take the per-request target (e.g. a catalog) as their first
    argument, so the table itself stays stateless across requests.
    """

    def __init__(self):
        self._operations: dict[str, OperationDefinition] = {}
        self._handlers: dict[str, Callable] = {}

    def register(
        self,
        name: str,
        description: str,
        handler: Callable,
        parameters: Optional[list[str]] = None,
    ):
        """Register an operation."""
        self._operations[name] = OperationDefinition(
            name=name,
            description=description,
            parameters=parameters or [],
        )
        self._handlers[name] = handler

    def deregister(self, name: str):
        """Remove an operation."""
        self._operations.pop(name, None)
        self._handlers.pop(name, None)

    def list_operations(self) -> list[OperationDefinition]:
        return list(self._operations.values())

    def get_operation(self, name: str) -> Optional[OperationDefinition]:
        return self._operations.get(name)

    async def invoke(self, name: str, target: Any, **kwargs) -> Any:
        """Invoke a registered operation against ``target``."""
        handler = self._handlers.get(name)
        if not handler:
            raise ValueError(f"Operation not found: {name}")

        if inspect.iscoroutinefunction(handler):
            return await handler(target, **kwargs)
        return handler(target, **kwargs)

    @property
    def operation_count(self) -> int:
        return len(self._operations)
