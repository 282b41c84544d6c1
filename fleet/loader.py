"""YAML loading utilities for fleet roster files."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .fleet_config import FleetConfig, GarageSpec, TripRequest, VehicleSpec
from .session import DispatchSession


def _parse_fleet(data: Optional[Dict[str, Any]]) -> FleetConfig:
    """Parse raw fleet file data (camelCase keys) into a FleetConfig."""
    data = data or {}
    settings = data.get("settings") or {}
    garages = [GarageSpec(g["name"]) for g in data.get("garages") or []]
    vehicles = [
        VehicleSpec(v.get("capacity"), v.get("plate"))
        for v in (data.get("vehicles") or [])
    ]
    trips = [
        TripRequest(t["origin"], t["destination"], t["passengers"])
        for t in (data.get("trips") or [])
    ]
    return FleetConfig(
        garages,
        vehicles,
        trips,
        settings.get("defaultCapacity"),
    )


def load_fleet(filename: Union[str, Path]) -> FleetConfig:
    """Load a fleet roster from a YAML file."""
    with open(filename, "rb") as fp:
        return _parse_fleet(yaml.load(fp, Loader=yaml.SafeLoader))


def build_session(config: FleetConfig, **kwargs) -> DispatchSession:
    """
    Create a DispatchSession seeded with the fleet's garages and vehicles.

    Garages are registered first, then vehicles, each in file order, so
    ids follow the order of entries in the file.
    """
    session = DispatchSession(default_capacity=config.default_capacity, **kwargs)
    for garage in config.garages:
        session.add_garage(garage.name)
    for vehicle in config.vehicles:
        session.add_vehicle(vehicle.capacity, vehicle.plate or "")
    return session
