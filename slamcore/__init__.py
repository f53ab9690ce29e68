"""Engine building blocks: events, resources, key codes and an entity-component scene."""

__version__ = "0.1.0"