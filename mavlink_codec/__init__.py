"""
Typed binary codec for the MAVLink 1.0 message set.

Covers the ``common`` and ``ardupilotmega`` dialects: typed message records,
an id-keyed registry for transports, and a metadata catalog for tooling.
"""

__version__ = "0.1.0"
