"""Paris-region trip planning over the Navitia journey-planning API."""

__version__ = "0.1.0"
