"""Coil geometry, named profiles and the parameter resolver."""

from .base import CoilGeometry
from .profiles import (
    CoilOptions, CoilProfile, PROFILE_REGISTRY,
    get_profile, list_profiles, resolve_geometry,
)
