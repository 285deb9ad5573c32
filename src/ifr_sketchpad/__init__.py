"""IFR Procedure Sketchpad — SID/STAR chart trainer backend."""

__version__ = "0.1.0"
