"""
Named coil profiles and the parameter resolver.

A calculation is configured with ``CoilOptions``: either a profile name, or an
explicit geometry with named optional fields. ``CoilOptions.from_args`` keeps
the positional calling convention, dispatched on argument count:

    ()                          -> "wire" profile
    (name,)                     -> named profile
    (rc, N, r)                  -> pitch = 2.025·rc
    (rc, N, r, pitch)           -> explicit pitch
    (rc, N, r, pitch, excap)    -> explicit external capacitance
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Callable, Optional

from loguru import logger

from .base import CoilGeometry
from ..errors import InvalidArgument
from ..utils.units import awg_to_radius, inches_to_meters

DEFAULT_PROFILE = "wire"

# Pitch of the "wire" profile relative to the cross-section radius
DEFAULT_PITCH_RATIO = 2.025


def default_pitch(cross_section_radius: float) -> float:
    """Pitch used when none is given: 2.025·rc, tight winding just above touching."""
    return DEFAULT_PITCH_RATIO * cross_section_radius


# ═══════════════════════════════════════════════════════════════════════════════
# Profiles
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CoilProfile:
    """A fixed, named coil build."""
    name: str
    description: str
    build: Callable[[], CoilGeometry]

    def geometry(self, external_capacitance: float = 0.0) -> CoilGeometry:
        geom = self.build()
        if external_capacitance:
            return CoilGeometry(
                cross_section_radius=geom.cross_section_radius,
                loop_radius=geom.loop_radius,
                turn_count=geom.turn_count,
                pitch=geom.pitch,
                external_capacitance=external_capacitance,
                profile=geom.profile,
                nominal_awg=geom.nominal_awg,
            )
        return geom


def _wire() -> CoilGeometry:
    rc = awg_to_radius(22)
    return CoilGeometry(
        cross_section_radius=rc,
        loop_radius=10e-2,
        turn_count=10,
        pitch=default_pitch(rc),
        profile="wire",
        nominal_awg=22,
    )


def _bigwire() -> CoilGeometry:
    rc = inches_to_meters(0.25 / 2)          # 1/4" copper tube
    return CoilGeometry(
        cross_section_radius=rc,
        loop_radius=rc * math.exp(13.0 / 3.0) / 8.0,   # radius maximizing Q
        turn_count=5.25,
        pitch=0.8e-2,
        profile="bigwire",
    )


PROFILE_REGISTRY: dict[str, CoilProfile] = {
    "wire": CoilProfile(
        "wire", "22 AWG wire, 10 cm loop radius, 10 turns, pitch 2.025·rc", _wire),
    "bigwire": CoilProfile(
        "bigwire", "1/4 in copper tube, Q-optimal radius, 5.25 turns, 8 mm pitch", _bigwire),
}


def get_profile(name: str) -> CoilProfile:
    """Look up a profile by name (case-insensitive)."""
    if not isinstance(name, str):
        raise InvalidArgument(f"Profile name must be a string, got {name!r}")
    key = name.lower().strip()
    if key not in PROFILE_REGISTRY:
        raise InvalidArgument(
            f"Unknown profile '{name}': must choose a recognized default profile "
            f"({', '.join(PROFILE_REGISTRY)})"
        )
    return PROFILE_REGISTRY[key]


def list_profiles() -> list[dict[str, Any]]:
    """List all profiles with their resolved geometry."""
    result = []
    for key, profile in PROFILE_REGISTRY.items():
        geom = profile.geometry()
        result.append({
            "key": key,
            "description": profile.description,
            "cross_section_radius_m": geom.cross_section_radius,
            "loop_radius_m": geom.loop_radius,
            "pitch_m": geom.pitch,
            "turn_count": geom.turn_count,
        })
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Options
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CoilOptions:
    """Named-field request for a coil geometry. Unset fields are None."""
    profile: Optional[str] = None
    cross_section_radius: Optional[float] = None
    turn_count: Optional[float] = None
    loop_radius: Optional[float] = None
    pitch: Optional[float] = None
    external_capacitance: Optional[float] = None

    _POSITIONAL = ("cross_section_radius", "turn_count", "loop_radius",
                   "pitch", "external_capacitance")

    @classmethod
    def from_args(cls, *args) -> CoilOptions:
        """Build options from the positional convention (see module docstring)."""
        n = len(args)
        if n == 0:
            return cls(profile=DEFAULT_PROFILE)
        if n == 1:
            if not isinstance(args[0], str):
                raise InvalidArgument(
                    "Only 1 argument provided, must choose a recognized default profile"
                )
            get_profile(args[0])
            return cls(profile=args[0])
        if n > len(cls._POSITIONAL):
            raise InvalidArgument(
                f"Expected at most {len(cls._POSITIONAL)} arguments, got {n}"
            )
        for a in args:
            if isinstance(a, str):
                raise InvalidArgument(
                    f"Profile name '{a}' can only be given on its own"
                )
        return cls(**dict(zip(cls._POSITIONAL, args)))

    @property
    def explicit_fields(self) -> dict[str, float]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("profile", "external_capacitance")
            and getattr(self, f.name) is not None
        }


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    return float(value)


def resolve_geometry(options: Optional[CoilOptions] = None) -> CoilGeometry:
    """
    Resolve options into a complete CoilGeometry.

    Rules:
      - nothing set → "wire" profile
      - profile set → profile table; only external_capacitance may be added
      - explicit → rc, N and r required; pitch defaults to 2.025·rc;
        external capacitance defaults to 0
    """
    options = options or CoilOptions()
    excap = options.external_capacitance
    excap = 0.0 if excap is None else _number("external_capacitance", excap)
    explicit = options.explicit_fields

    if options.profile is not None or not explicit:
        if explicit:
            raise InvalidArgument(
                f"Choose either a profile or an explicit geometry, not both "
                f"(got profile={options.profile!r} and {sorted(explicit)})"
            )
        name = DEFAULT_PROFILE if options.profile is None else options.profile
        profile = get_profile(name)
        logger.debug(f"Using profile '{profile.name}'")
        return profile.geometry(excap)

    missing = [k for k in ("cross_section_radius", "turn_count", "loop_radius")
               if k not in explicit]
    if missing:
        raise InvalidArgument(
            f"Geometry under-specified: missing {', '.join(missing)}"
        )

    rc = _number("cross_section_radius", explicit["cross_section_radius"])
    pitch = explicit.get("pitch")
    if pitch is None:
        pitch = default_pitch(rc)
        logger.debug(f"No pitch given, using {DEFAULT_PITCH_RATIO}·rc = {pitch:.4e} m")

    return CoilGeometry(
        cross_section_radius=rc,
        loop_radius=_number("loop_radius", explicit["loop_radius"]),
        turn_count=_number("turn_count", explicit["turn_count"]),
        pitch=_number("pitch", pitch),
        external_capacitance=excap,
    )
