"""Long Haul simulation package.

Public API:
    from haul import Simulation, FrameInput, Vehicle, Obstacle, ServiceStop
"""
from haul.entities import DeliveryContract, FrameInput, Obstacle, RoadMarker, ServiceStop, SpawnCadence, Vehicle
from haul.simulation import Simulation

__all__ = [
    "DeliveryContract",
    "FrameInput",
    "Obstacle",
    "RoadMarker",
    "ServiceStop",
    "Simulation",
    "SpawnCadence",
    "Vehicle",
]
