"""Cards of a real-time card battle arena game and the scene-based pygame engine they run on."""

__version__ = "0.1.0"