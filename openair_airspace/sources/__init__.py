"""Sources for OpenAir documents."""

from .openair_source import OpenAirSource, load_file

__all__ = ['OpenAirSource', 'load_file']
