"""
Resolve style and color kinds to SGR parameters.

A resolution is the pair of parameter tuples that open and close a styled
span. Neither tuple is wrapped in escape syntax yet; see
sgrfmt.output.sequences for that.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from sgrfmt.codes import registry
from sgrfmt.codes.colors import BasicColor, IndexedColor, RgbColor
from sgrfmt.codes.registry import RevertGroup, StyleKind
from sgrfmt.modes import RevertMode


@dataclass(frozen=True)
class Resolution:
    """SGR parameters that set and reset a style."""

    set_params: Tuple[int, ...]
    reset_params: Tuple[int, ...]
    groups: Tuple[RevertGroup, ...] = ()

    @property
    def reverts(self) -> bool:
        """False when nothing follows the content."""
        return bool(self.reset_params)


def set_params(kind) -> Tuple[int, ...]:
    """Return the parameters that turn ``kind`` on.

    Args:
        kind: A StyleKind or color descriptor

    Returns:
        One code for styles and basic colors, selector + mode + values for
        indexed and RGB colors
    """
    if isinstance(kind, StyleKind):
        return (registry.style_code(kind),)
    if isinstance(kind, BasicColor):
        return (registry.basic_offset(kind.plane, kind.bright) + kind.base,)
    if isinstance(kind, IndexedColor):
        return (registry.plane_selector(kind.plane), registry.INDEXED_MODE, kind.index)
    if isinstance(kind, RgbColor):
        return (registry.plane_selector(kind.plane), registry.RGB_MODE, kind.r, kind.g, kind.b)
    raise TypeError(f"Not a style or color kind: {kind!r}")


def _reset_params(groups: Tuple[RevertGroup, ...], revert: RevertMode) -> Tuple[int, ...]:
    if revert is RevertMode.NONE:
        return ()
    if revert is RevertMode.TOTAL:
        return (registry.RESET_ALL,)
    return tuple(registry.reset_code(group) for group in groups)


def resolve(kind, revert: RevertMode = RevertMode.SINGLE) -> Resolution:
    """Resolve one kind under a revert mode."""
    group = registry.revert_group(kind)
    return Resolution(set_params(kind), _reset_params((group,), revert), (group,))


def resolve_all(kinds: Iterable, revert: RevertMode = RevertMode.SINGLE) -> Resolution:
    """Resolve several kinds that are applied together.

    Set parameters are concatenated in order. With RevertMode.SINGLE each
    distinct revert group contributes its code once, in order of first
    appearance.
    """
    params = []
    groups = []
    for kind in kinds:
        params.extend(set_params(kind))
        group = registry.revert_group(kind)
        if group not in groups:
            groups.append(group)
    if not params:
        raise ValueError("At least one style or color kind is required")
    groups = tuple(groups)
    return Resolution(tuple(params), _reset_params(groups, revert), groups)
