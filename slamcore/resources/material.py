"""PBR material resource and its property groups."""

from __future__ import annotations

from dataclasses import dataclass, field

from slamcore import shared
from slamcore.resources.resource import Resource, ResourceState

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass
class _TexturedProperty:
    texture: str = ""
    use_texture: bool = False
    offset: Vec2 = (0.0, 0.0)
    scale: Vec2 = (1.0, 1.0)
    rotation: float = 0.0


@dataclass
class AlbedoPropertyGroup(_TexturedProperty):
    """Base colour."""

    factor: Vec3 = (1.0, 1.0, 1.0)
    texture_slot: int = shared.SLOT_ALBEDO
    use_texture_location: int = shared.LOCATION_USE_ALBEDO_TEXTURE
    factor_location: int = shared.LOCATION_ALBEDO_FACTOR
    tilling_location: int = shared.LOCATION_ALBEDO_TILLING


@dataclass
class NormalPropertyGroup(_TexturedProperty):
    """Normal map."""

    factor: Vec3 = (1.0, 1.0, 1.0)
    texture_slot: int = shared.SLOT_NORMAL
    use_texture_location: int = shared.LOCATION_USE_NORMAL_TEXTURE
    factor_location: int = shared.LOCATION_NORMAL_FACTOR
    tilling_location: int = shared.LOCATION_NORMAL_TILLING


@dataclass
class EmissivePropertyGroup(_TexturedProperty):
    """Emitted light."""

    factor: Vec3 = (0.0, 0.0, 0.0)
    texture_slot: int = shared.SLOT_EMISSIVE
    use_texture_location: int = shared.LOCATION_USE_EMISSIVE_TEXTURE
    factor_location: int = shared.LOCATION_EMISSIVE_FACTOR
    tilling_location: int = shared.LOCATION_EMISSIVE_TILLING


@dataclass
class OcclusionPropertyGroup(_TexturedProperty):
    """Ambient occlusion."""

    factor: float = 1.0
    texture_slot: int = shared.SLOT_ORM
    use_texture_location: int = shared.LOCATION_USE_OCCLUSION_TEXTURE
    factor_location: int = shared.LOCATION_OCCLUSION_FACTOR
    tilling_location: int = shared.LOCATION_OCCLUSION_TILLING


@dataclass
class RoughnessPropertyGroup(_TexturedProperty):
    """Surface roughness."""

    factor: float = 1.0
    texture_slot: int = shared.SLOT_ORM
    use_texture_location: int = shared.LOCATION_USE_ROUGHNESS_TEXTURE
    factor_location: int = shared.LOCATION_ROUGHNESS_FACTOR
    tilling_location: int = shared.LOCATION_ROUGHNESS_TILLING


@dataclass
class MetallicPropertyGroup(_TexturedProperty):
    """Metalness."""

    factor: float = 1.0
    texture_slot: int = shared.SLOT_ORM
    use_texture_location: int = shared.LOCATION_USE_METALLIC_TEXTURE
    factor_location: int = shared.LOCATION_METALLIC_FACTOR
    tilling_location: int = shared.LOCATION_METALLIC_TILLING


@dataclass
class _MaterialProperties:
    albedo: AlbedoPropertyGroup = field(default_factory=AlbedoPropertyGroup)
    normal: NormalPropertyGroup = field(default_factory=NormalPropertyGroup)
    emissive: EmissivePropertyGroup = field(default_factory=EmissivePropertyGroup)
    occlusion: OcclusionPropertyGroup = field(default_factory=OcclusionPropertyGroup)
    roughness: RoughnessPropertyGroup = field(default_factory=RoughnessPropertyGroup)
    metallic: MetallicPropertyGroup = field(default_factory=MetallicPropertyGroup)


class MaterialResource(Resource):
    """A PBR material: texture names, factors and shader locations."""

    def __init__(self) -> None:
        super().__init__()
        groups = _MaterialProperties()
        self.albedo = groups.albedo
        self.normal = groups.normal
        self.emissive = groups.emissive
        self.occlusion = groups.occlusion
        self.roughness = groups.roughness
        self.metallic = groups.metallic
        self.reflectance = 0.5
        self.two_side = False
        self.reflectance_location = shared.LOCATION_REFLECTANCE
        self.two_side_location = shared.LOCATION_TWO_SIDE

    def on_import(self) -> None:
        self.state = ResourceState.BUILDING

    def on_build(self) -> None:
        self.state = ResourceState.UPLOADING

    def on_load(self) -> None:
        self.state = ResourceState.UPLOADING

    def on_upload(self) -> None:
        self.state = ResourceState.READY

    def on_ready(self) -> None:
        self._count_down_cpu_data()

    def on_destroy(self) -> None:
        self.destroy_cpu_data()
        self.state = ResourceState.DESTROYED

    def destroy_cpu_data(self) -> None:
        """A material keeps no CPU-side buffers, so there is nothing to free."""