"""
Template registry.

Templates are previously resolved bodies, usually the stock system converted in
an earlier pass. A body config names its template and every field it omits is
read from the template.

The registry is a read only lookup from the converter's point of view. We never
copy fields into the template or mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from solar_config.core.types import OrbitingBody, ResolvedSystem, TemplateBody


@dataclass
class TemplateRegistry:
    """
    Template registry keyed by body name.

    This is enough for:
    sun template lookup
    orbiting body template lookup
    registering a resolved system for a later pass
    """

    _bodies: Dict[str, TemplateBody] = None  # type: ignore

    def __post_init__(self) -> None:
        if self._bodies is None:
            self._bodies = {}

    @classmethod
    def from_bodies(cls, bodies: Iterable[TemplateBody]) -> "TemplateRegistry":
        registry = cls()
        for body in bodies:
            registry.add(body)
        return registry

    @classmethod
    def from_mapping(cls, templates: Mapping[str, TemplateBody]) -> "TemplateRegistry":
        """Register every template under its mapping key, not its body name."""
        registry = cls()
        for name, body in templates.items():
            registry.add(body, name=name)
        return registry

    @classmethod
    def from_system(cls, system: ResolvedSystem) -> "TemplateRegistry":
        """
        Register every body of a resolved system.

        Orbiting bodies are stored without their ids. Ids belong to the system
        they were resolved in and mean nothing to the next one.
        """
        from solar_config.deduction.fields import complete_body_to_unordered

        registry = cls()
        registry.add(system.sun)
        for body in system.bodies:
            registry.add(complete_body_to_unordered(body))
        return registry

    def add(self, body: TemplateBody, name: Optional[str] = None) -> None:
        """
        Add or replace a template.

        name defaults to the body name. A different name registers the body
        under that key, which is what configs then refer to.
        """
        if isinstance(body, OrbitingBody):
            from solar_config.deduction.fields import complete_body_to_unordered

            body = complete_body_to_unordered(body)
        self._bodies[body.name if name is None else name] = body

    def get(self, name: Optional[str]) -> Optional[TemplateBody]:
        """Return the template if present. A None name means no template."""
        if name is None:
            return None
        return self._bodies.get(name)

    def all(self) -> List[TemplateBody]:
        """Return all templates as a list."""
        return list(self._bodies.values())

    def names(self) -> List[str]:
        """Return sorted template names. Useful for deterministic outputs."""
        return sorted(self._bodies.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._bodies

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[TemplateBody]:
        return iter(self._bodies.values())


TemplateLookup = Mapping[str, TemplateBody]


def as_registry(templates: "TemplateRegistry | TemplateLookup | None") -> TemplateRegistry:
    """Accept a registry, a plain name to body mapping, or nothing."""
    if isinstance(templates, TemplateRegistry):
        return templates
    if templates is None:
        return TemplateRegistry()
    return TemplateRegistry.from_mapping(templates)
