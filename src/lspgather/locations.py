# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution of ``Location``/``LocationLink`` results for navigation methods."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import StrEnum
from typing import Final

from pydantic import ValidationError

from .core.models import JsonValue, Location, LocationLink
from .errors import InvalidLocationError, UnsupportedMethodError
from .interfaces import ClientResponse


class SupportedMethod(StrEnum):
    """Navigation requests whose results are locations."""

    DECLARATION = "textDocument/declaration"
    DEFINITION = "textDocument/definition"
    TYPE_DEFINITION = "textDocument/typeDefinition"
    IMPLEMENTATION = "textDocument/implementation"
    REFERENCES = "textDocument/references"

    @classmethod
    def is_supported(cls, method: str) -> bool:
        """Return ``True`` when ``method`` is one of the handled requests."""

        return any(method == member.value for member in cls)

    @classmethod
    def parse(cls, method: str) -> SupportedMethod:
        """Return the member named by ``method``.

        Raises:
            UnsupportedMethodError: If ``method`` is not handled.
        """

        if not cls.is_supported(method):
            raise UnsupportedMethodError(f"Unsupported method: {method}")
        return cls(method)

    @property
    def single_target(self) -> bool:
        """Return ``True`` for methods answering ``Location | Location[] | LocationLink[]``."""

        return self is not SupportedMethod.REFERENCES


# Deno serves remote modules as virtual buffers whose URIs carry an encoded
# ``#`` followed by one of ``^ ~ < =``; those buffers cannot be opened.
# https://github.com/denoland/deno/issues/19304
_DENO_FRAGMENT_URI: Final[re.Pattern[str]] = re.compile(r"^deno:.*%23(%5E|%7E|%3C|%3D)")


def is_deno_uri_with_fragment(location: Location) -> bool:
    """Return ``True`` when ``location`` points into an unopenable deno virtual buffer."""

    return _DENO_FRAGMENT_URI.search(location.uri) is not None


def resolve_location(entry: JsonValue | Location | LocationLink) -> Location:
    """Return ``entry`` as a :class:`Location`.

    Raw mappings holding ``uri`` and ``range`` are point locations; those holding
    ``targetUri`` and ``targetSelectionRange`` are links.

    Raises:
        InvalidLocationError: If ``entry`` has neither shape.
    """

    try:
        match entry:
            case Location():
                return entry
            case LocationLink(target_uri=uri, target_selection_range=selection):
                return Location(uri=uri, range=selection)
            case {"uri": _, "range": _}:
                return Location.model_validate(entry)
            case {"targetUri": _, "targetSelectionRange": _}:
                return resolve_location(LocationLink.model_validate(entry))
    except ValidationError as exc:
        raise InvalidLocationError(f"Invalid location entry: {exc}") from exc
    raise InvalidLocationError(f"Entry is neither a Location nor a LocationLink: {entry!r}")


def _iter_entries(result: JsonValue) -> Iterator[JsonValue]:
    if result is None:
        return
    if isinstance(result, Mapping):
        yield result
    elif isinstance(result, Sequence) and not isinstance(result, (str, bytes, bytearray)):
        yield from result
    else:
        raise InvalidLocationError(f"Unexpected location result: {result!r}")


def _flatten(responses: Iterable[ClientResponse]) -> list[Location]:
    return [resolve_location(entry) for response in responses for entry in _iter_entries(response.result)]


def definition_locations(responses: Iterable[ClientResponse]) -> list[Location]:
    """Flatten ``Location | Location[] | LocationLink[] | null`` results of every client."""

    return _flatten(responses)


def reference_locations(responses: Iterable[ClientResponse]) -> list[Location]:
    """Flatten ``Location[] | null`` results of every client.

    A lone ``Location`` answered by a client counts as a single entry.
    """

    return _flatten(responses)


def filter_openable(locations: Iterable[Location]) -> list[Location]:
    """Drop locations that cannot be opened by the editor."""

    return [location for location in locations if not is_deno_uri_with_fragment(location)]


def collect_locations(method: SupportedMethod, responses: Iterable[ClientResponse]) -> list[Location]:
    """Return the openable locations answered for ``method``."""

    if method.single_target:
        locations = definition_locations(responses)
    else:
        locations = reference_locations(responses)
    return filter_openable(locations)


__all__ = [
    "SupportedMethod",
    "collect_locations",
    "definition_locations",
    "filter_openable",
    "is_deno_uri_with_fragment",
    "reference_locations",
    "resolve_location",
]
