import pytest

from slamcore.scene.camera import CameraComponent
from slamcore.scene.components import CornerstoneComponent, RenderingComponent, TagComponent
from slamcore.scene.transform import TransformComponent
from slamcore.scene.world import ECSWorld, Entity


@pytest.fixture
def world():
    return ECSWorld()


def test_new_entity_has_tag_and_transform(world):
    entity = world.create_entity("Cube")
    assert entity.is_valid()
    assert entity.get_components(TagComponent).name == "Cube"
    assert entity.get_components(TransformComponent) == TransformComponent()


def test_default_name(world):
    assert world.create_entity().get_components(TagComponent).name == "Empty Entity"


def test_names_are_made_unique(world):
    names = [world.create_entity("Cube").get_components(TagComponent).name for _ in range(3)]
    assert names == ["Cube", "Cube (1)", "Cube (2)"]


def test_add_twice_raises(world):
    entity = world.create_entity("A")
    with pytest.raises(ValueError):
        entity.add_component(TagComponent("again"))


def test_replace_requires_component(world):
    entity = world.create_entity("A")
    with pytest.raises(KeyError):
        entity.replace_component(CornerstoneComponent("x"))
    new_tag = entity.replace_component(TagComponent("B"))
    assert entity.get_components(TagComponent) is new_tag


def test_add_or_replace(world):
    entity = world.create_entity("A")
    entity.add_or_replace_component(CornerstoneComponent("one"))
    entity.add_or_replace_component(CornerstoneComponent("two"))
    assert entity.get_components(CornerstoneComponent).info == "two"


def test_get_several_and_missing(world):
    entity = world.create_entity("A")
    tag, transform = entity.get_components(TagComponent, TransformComponent)
    assert tag.name == "A"
    assert transform.scale == TransformComponent().scale
    with pytest.raises(KeyError):
        entity.get_components(RenderingComponent)


def test_try_get(world):
    entity = world.create_entity("A")
    assert entity.try_get_components(RenderingComponent) is None
    tag, rendering = entity.try_get_components(TagComponent, RenderingComponent)
    assert tag.name == "A" and rendering is None


def test_has_queries(world):
    entity = world.create_entity("A")
    assert entity.has_all_components_of(TagComponent, TransformComponent)
    assert not entity.has_all_components_of(TagComponent, CameraComponent)
    assert entity.has_any_components_of(CameraComponent, TagComponent)
    assert not entity.has_any_components_of(CameraComponent)
    assert entity.has_any_component()


def test_remove_and_erase(world):
    entity = world.create_entity("A")
    assert entity.remove_component(TagComponent) == 1
    assert entity.remove_component(TagComponent) == 0
    entity.erase_component(TransformComponent)
    assert not entity.has_any_component()
    with pytest.raises(KeyError):
        entity.erase_component(TransformComponent)


def test_destroy_invalidates(world):
    entity = world.create_entity("A")
    other = Entity(world, entity.handle)
    entity.destroy()
    assert not entity.is_valid()
    assert not other.is_valid()
    with pytest.raises(ValueError):
        other.get_components(TagComponent)


def test_reset_makes_null(world):
    entity = world.create_entity("A")
    handle = entity.handle
    entity.reset()
    assert not entity.is_valid()
    assert Entity(world, handle).is_valid()


def test_view_filters(world):
    plain = world.create_entity("plain")
    drawn = world.create_entity("drawn")
    drawn.add_component(RenderingComponent())
    assert list(world.view(RenderingComponent)) == [drawn]
    assert set(world.view(TagComponent)) == {plain, drawn}


def test_main_camera(world):
    world.create_entity("other").add_component(CameraComponent())
    camera_entity = world.create_entity("camera")
    camera = camera_entity.add_component(CameraComponent(is_main_camera=True))
    assert world.main_camera_entity() == camera_entity
    assert world.main_camera_component() is camera
    assert world.main_camera_transform() is camera_entity.get_components(TransformComponent)


def test_no_main_camera(world):
    world.create_entity("other").add_component(CameraComponent())
    assert not world.main_camera_entity().is_valid()
    with pytest.raises(LookupError):
        world.main_camera_component()


def test_equality_with_handle(world):
    entity = world.create_entity("A")
    assert entity == entity.handle
    assert entity == Entity(world, entity.handle)
    assert entity != Entity(ECSWorld(), entity.handle)