"""
solar_config

This package resolves hierarchical celestial body configs into an ordered,
internally consistent solar system description.

We keep modules small and well separated:
core contains shared data structures, constants and errors
config contains the raw config accessor and the color parser
templates contains the template registry
deduction contains per body field deduction
hierarchy contains the attractor tree and linearization
derived contains quantities computed after ids are known
sources and writer handle files on either side of the converter
"""

from solar_config.converter import ConverterConfig, SystemConverter, convert_system

__all__ = ["ConverterConfig", "SystemConverter", "convert_system"]
