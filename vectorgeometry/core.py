"""
Kernel-wide settings and logging setup for vectorgeometry
"""

import logging

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    # Matrix3x3.inverse() refuses matrices with |det| below this
    "determinant_epsilon": 1e-6,
    # Segment pairs whose cross denominator is below this are treated as parallel
    "parallel_epsilon": 1e-10,
    # Distance under which a point lies on a boundary / two points coincide
    "boundary_epsilon": 1e-9,
    # Column magnitudes within this of 1 mean "no scale"
    "scale_epsilon": 1e-9,
    # Stroke hit distance for lines and paths, in local units
    "hit_tolerance": 1.0,
    # Flattening resolution
    "circle_segments": 32,
    "curve_segments": 16,
    # Approximate glyph advance as a fraction of the font size
    "text_width_factor": 0.6,
}


class VectorGeometryCore:
    """Holder for the tunable constants used across the kernel"""

    _initialized = False
    _settings = dict(DEFAULT_CONFIG)

    @classmethod
    def initialize(cls, **overrides):
        """Load the default settings, then apply explicit overrides"""
        if cls._initialized and not overrides:
            return

        cls._settings = dict(DEFAULT_CONFIG)
        cls._initialized = True
        if overrides:
            cls.configure(**overrides)

    @classmethod
    def ensure_initialized(cls):
        """Ensure settings have been loaded"""
        if not cls._initialized:
            cls.initialize()

    @classmethod
    def configure(cls, **overrides):
        """Override individual settings"""
        cls.ensure_initialized()
        unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")
        cls._settings.update(overrides)
        logger.debug("Settings updated: %s", overrides)

    @classmethod
    def get(cls, name):
        """Get a single setting value"""
        cls.ensure_initialized()
        try:
            return cls._settings[name]
        except KeyError:
            raise ConfigurationError(f"Unknown setting: {name}")

    @classmethod
    def settings(cls):
        """Get a copy of all current settings"""
        cls.ensure_initialized()
        return dict(cls._settings)

    @classmethod
    def reset(cls):
        """Drop overrides and reload on next use"""
        cls._settings = dict(DEFAULT_CONFIG)
        cls._initialized = False


def resolve(name, value=None):
    """Return ``value`` unless it is None, otherwise the configured setting"""
    if value is not None:
        return value
    return VectorGeometryCore.get(name)


_LOGGING_CONFIGURED = False


def setup_logging(level=logging.INFO):
    """Attach a console handler to the package logger (idempotent)"""
    global _LOGGING_CONFIGURED
    package_logger = logging.getLogger("vectorgeometry")
    package_logger.setLevel(level)
    if _LOGGING_CONFIGURED:
        return package_logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
    return package_logger
