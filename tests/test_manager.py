import pytest

from slamcore.resources.manager import ResourceManager
from slamcore.resources.material import MaterialResource
from slamcore.resources.resource import Resource, ResourcesType, ResourceState


class Logged(Resource):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def on_import(self):
        self.log.append(self.name)

    def on_build(self):
        pass

    def on_load(self):
        pass

    def on_upload(self):
        pass

    def on_ready(self):
        pass

    def on_destroy(self):
        pass

    def destroy_cpu_data(self):
        pass


def test_add_and_get_material():
    manager = ResourceManager()
    material = MaterialResource()
    assert manager.add_material_resource("model/mat", material) is True
    assert manager.get_material_resource("model/mat") is material
    assert manager.get_resource(ResourcesType.MATERIAL, "model/mat") is material


def test_missing_returns_none():
    manager = ResourceManager()
    assert manager.get_material_resource("nothing") is None
    assert manager.get_resource(ResourcesType.TEXTURE, "nothing") is None


def test_duplicate_keeps_first():
    manager = ResourceManager()
    first = MaterialResource()
    second = MaterialResource()
    manager.add_material_resource("m", first)
    assert manager.add_material_resource("m", second) is False
    assert manager.get_material_resource("m") is first


def test_kinds_are_separate():
    manager = ResourceManager()
    log = []
    mesh = Logged("mesh", log)
    manager.add_resource(ResourcesType.MESH, "same", mesh)
    assert manager.get_resource(ResourcesType.MESH, "same") is mesh
    assert manager.get_resource(ResourcesType.SHADER, "same") is None
    assert manager.get_material_resource("same") is None


def test_unsupported_kind():
    manager = ResourceManager()
    with pytest.raises(ValueError):
        manager.add_resource(ResourcesType.BONE, "b", Logged("b", []))
    with pytest.raises(ValueError):
        manager.get_resource(ResourcesType.ANIMATION, "a")


def test_type_checks():
    manager = ResourceManager()
    with pytest.raises(TypeError):
        manager.add_material_resource("m", Logged("m", []))
    with pytest.raises(TypeError):
        manager.add_resource(ResourcesType.MESH, "m", object())


def test_update_advances_all():
    manager = ResourceManager()
    material = MaterialResource()
    manager.add_material_resource("m", material)
    manager.update()
    assert material.state == ResourceState.BUILDING
    manager.update()
    manager.update()
    assert material.is_ready()


def test_update_order_by_kind_then_name():
    manager = ResourceManager()
    log = []
    manager.add_resource(ResourcesType.TEXTURE, "tex", Logged("tex", log))
    manager.add_resource(ResourcesType.MESH, "mesh", Logged("mesh", log))
    manager.add_resource(ResourcesType.MATERIAL, "b", Logged("mat-b", log))
    manager.add_resource(ResourcesType.MATERIAL, "a", Logged("mat-a", log))
    manager.add_resource(ResourcesType.SHADER, "shader", Logged("shader", log))
    manager.update()
    assert log == ["mat-a", "mat-b", "mesh", "shader", "tex"]