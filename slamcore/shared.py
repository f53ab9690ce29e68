"""Constants shared between the engine and its shader programs."""

LIGHT_MAX_COUNT = 128

LIGHT_TYPE_DIRECTIONAL = 0
LIGHT_TYPE_POINT = 1
LIGHT_TYPE_SPOT = 2

SLOT_ALBEDO = 0
SLOT_NORMAL = 1
SLOT_EMISSIVE = 2
SLOT_ORM = 3

LOCATION_USE_ALBEDO_TEXTURE = 2
LOCATION_USE_NORMAL_TEXTURE = 3
LOCATION_USE_EMISSIVE_TEXTURE = 4
LOCATION_USE_OCCLUSION_TEXTURE = 5
LOCATION_USE_ROUGHNESS_TEXTURE = 6
LOCATION_USE_METALLIC_TEXTURE = 7

LOCATION_ALBEDO_FACTOR = 8
LOCATION_NORMAL_FACTOR = 9
LOCATION_EMISSIVE_FACTOR = 10
LOCATION_OCCLUSION_FACTOR = 11
LOCATION_ROUGHNESS_FACTOR = 12
LOCATION_METALLIC_FACTOR = 13

LOCATION_ALBEDO_TILLING = 14
LOCATION_NORMAL_TILLING = 15
LOCATION_EMISSIVE_TILLING = 16
LOCATION_OCCLUSION_TILLING = 17
LOCATION_ROUGHNESS_TILLING = 18
LOCATION_METALLIC_TILLING = 19

LOCATION_REFLECTANCE = 20
LOCATION_TWO_SIDE = 21

UBO_BINDING_POINT_CAMERA = 0
UBO_BINDING_POINT_LIGHT = 1