from slamcore import shared
from slamcore.resources.material import (
    AlbedoPropertyGroup,
    EmissivePropertyGroup,
    MaterialResource,
    MetallicPropertyGroup,
    NormalPropertyGroup,
    OcclusionPropertyGroup,
    RoughnessPropertyGroup,
)
from slamcore.resources.resource import ResourceState


def test_group_slots_and_locations():
    assert AlbedoPropertyGroup().texture_slot == shared.SLOT_ALBEDO
    assert NormalPropertyGroup().factor_location == shared.LOCATION_NORMAL_FACTOR
    assert EmissivePropertyGroup().tilling_location == shared.LOCATION_EMISSIVE_TILLING
    assert OcclusionPropertyGroup().texture_slot == shared.SLOT_ORM
    assert RoughnessPropertyGroup().use_texture_location == shared.LOCATION_USE_ROUGHNESS_TEXTURE
    assert MetallicPropertyGroup().factor_location == shared.LOCATION_METALLIC_FACTOR


def test_group_defaults():
    albedo = AlbedoPropertyGroup()
    assert albedo.factor == (1.0, 1.0, 1.0)
    assert albedo.use_texture is False
    assert albedo.texture == ""
    assert albedo.offset == (0.0, 0.0)
    assert albedo.scale == (1.0, 1.0)
    assert EmissivePropertyGroup().factor == (0.0, 0.0, 0.0)
    assert MetallicPropertyGroup().factor == 1.0


def test_material_defaults():
    m = MaterialResource()
    assert m.reflectance == 0.5
    assert m.two_side is False
    assert m.reflectance_location == shared.LOCATION_REFLECTANCE
    assert m.two_side_location == shared.LOCATION_TWO_SIDE
    assert m.state == ResourceState.IMPORTING


def test_materials_do_not_share_groups():
    a = MaterialResource()
    b = MaterialResource()
    a.albedo.texture = "wood.png"
    a.albedo.use_texture = True
    assert b.albedo.texture == ""
    assert b.albedo.use_texture is False


def test_life_cycle_through_update():
    m = MaterialResource()
    seen = []
    for _ in range(3):
        m.update()
        seen.append(m.state)
    assert seen == [ResourceState.BUILDING, ResourceState.UPLOADING, ResourceState.READY]
    assert m.is_ready()


def test_load_goes_to_upload():
    m = MaterialResource()
    m.state = ResourceState.LOADING
    m.update()
    assert m.state == ResourceState.UPLOADING


def test_destroy():
    m = MaterialResource()
    m.state = ResourceState.DESTROYING
    m.update()
    assert m.state == ResourceState.DESTROYED
    m.update()
    assert m.state == ResourceState.DESTROYED


def test_ready_counts_delay_and_stays_ready():
    m = MaterialResource()
    m.state = ResourceState.READY
    for _ in range(100):
        m.update()
    assert m.state == ResourceState.READY
    assert m.destroy_delay == 61