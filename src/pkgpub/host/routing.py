"""Minimal router handed to package route files as the `router` global."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class Route:
    path: str
    handler: Callable[..., Any]
    methods: tuple[str, ...] = ("GET",)
    name: str | None = None


@dataclass
class Router:
    routes: list[Route] = field(default_factory=list)

    def add(
        self,
        path: str,
        handler: Callable[..., Any],
        methods: tuple[str, ...] | list[str] = ("GET",),
        *,
        name: str | None = None,
    ) -> Route:
        if not isinstance(path, str) or not path.startswith("/"):
            raise ValueError(f"route path must start with '/': {path!r}")
        route = Route(path=path, handler=handler, methods=tuple(m.upper() for m in methods), name=name)
        self.routes.append(route)
        return route

    def get(self, path: str, handler: Callable[..., Any], *, name: str | None = None) -> Route:
        return self.add(path, handler, ("GET",), name=name)

    def post(self, path: str, handler: Callable[..., Any], *, name: str | None = None) -> Route:
        return self.add(path, handler, ("POST",), name=name)

    def match(self, method: str, path: str) -> Route | None:
        method = method.upper()
        for route in self.routes:
            if route.path == path and method in route.methods:
                return route
        return None
