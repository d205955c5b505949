"""
altisum - altitude gain and loss from barometric pressure.

Usage:
    from altisum.features.barometer import AltitudeSumManager
"""

__version__ = "0.1.0"
