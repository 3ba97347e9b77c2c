"""Find the aircraft nearest to a coordinate using OpenSky state vectors."""

__version__ = "0.1.0"
