from .metadata import MapMetadata
