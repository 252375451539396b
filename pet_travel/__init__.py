"""Pet travel planner: regulatory deadline checklist for international pet travel."""

__version__ = "2.0.0"
