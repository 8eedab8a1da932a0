import pytest

from patiengine.matrix import make_identity
from patiengine.model import (
    DirectionalLight,
    Material,
    MaterialData,
    ModelData,
    ObjFormatError,
    VertexData,
    load_material_template_file,
    load_obj_file,
)
from patiengine.vector import Vector2, Vector3, Vector4

OBJ = """\
# a single triangle
mtllib tri.mtl
v 1.0 2.0 3.0
v 4.0 5.0 6.0
v 7.0 8.0 9.0
vt 0.25 0.75
vt 0.5 0.5
vt 1.0 0.0
vn 1.0 0.0 0.0
vn 0.0 1.0 0.0
f 1/1/1 2/2/2 3/3/1
"""

MTL = """\
newmtl material
Kd 1.0 1.0 1.0
map_Kd first.png
map_Kd uvChecker.png
"""


@pytest.fixture
def model_dir(tmp_path):
    (tmp_path / "tri.obj").write_text(OBJ)
    (tmp_path / "tri.mtl").write_text(MTL)
    return str(tmp_path)


def test_material_uses_last_map_kd(model_dir):
    material = load_material_template_file(model_dir, "tri.mtl")
    assert material.texture_file_path == f"{model_dir}/uvChecker.png"


def test_material_without_texture_is_empty(tmp_path):
    (tmp_path / "plain.mtl").write_text("newmtl x\nKd 1 1 1\n")
    assert load_material_template_file(str(tmp_path), "plain.mtl") == MaterialData()


def test_missing_files_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj_file(str(tmp_path), "nothing.obj")
    with pytest.raises(FileNotFoundError):
        load_material_template_file(str(tmp_path), "nothing.mtl")


def test_obj_vertices_are_mirrored_and_reversed(model_dir):
    model = load_obj_file(model_dir, "tri.obj")
    assert len(model.vertices) == 3
    assert [v.position for v in model.vertices] == [
        Vector4(-7.0, 8.0, 9.0, 1.0),
        Vector4(-4.0, 5.0, 6.0, 1.0),
        Vector4(-1.0, 2.0, 3.0, 1.0),
    ]


def test_obj_texcoords_flipped(model_dir):
    model = load_obj_file(model_dir, "tri.obj")
    assert [v.tex_coord for v in model.vertices] == [
        Vector2(1.0, 1.0 - 0.0),
        Vector2(0.5, 1.0 - 0.5),
        Vector2(0.25, 1.0 - 0.75),
    ]


def test_obj_normals_mirrored(model_dir):
    model = load_obj_file(model_dir, "tri.obj")
    assert [v.normal for v in model.vertices] == [
        Vector3(-1.0, 0.0, 0.0),
        Vector3(-0.0, 1.0, 0.0),
        Vector3(-1.0, 0.0, 0.0),
    ]


def test_obj_loads_material(model_dir):
    model = load_obj_file(model_dir, "tri.obj")
    assert model.material.texture_file_path == f"{model_dir}/uvChecker.png"


def test_obj_without_mtllib_has_empty_material(tmp_path):
    (tmp_path / "a.obj").write_text("v 0 0 0\nvt 0 0\nvn 0 0 1\nf 1/1/1 1/1/1 1/1/1\n")
    model = load_obj_file(str(tmp_path), "a.obj")
    assert model.material.texture_file_path == ""
    assert len(model.vertices) == 3


def test_only_first_three_face_vertices_used(tmp_path):
    (tmp_path / "q.obj").write_text(
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nvt 0 0\nvn 0 0 1\n"
        "f 1/1/1 2/1/1 3/1/1 4/1/1\n"
    )
    model = load_obj_file(str(tmp_path), "q.obj")
    assert len(model.vertices) == 3
    assert Vector4(-0.0, 1.0, 0.0, 1.0) not in [v.position for v in model.vertices]


@pytest.mark.parametrize(
    "face",
    ["f 0/1/1 1/1/1 1/1/1", "f 2/1/1 1/1/1 1/1/1", "f 1//1 1/1/1 1/1/1", "f 1/1 1/1/1 1/1/1", "f 1/1/1"],
)
def test_bad_faces_raise(tmp_path, face):
    (tmp_path / "bad.obj").write_text(f"v 0 0 0\nvt 0 0\nvn 0 0 1\n{face}\n")
    with pytest.raises(ObjFormatError):
        load_obj_file(str(tmp_path), "bad.obj")


def test_bad_number_raises(tmp_path):
    (tmp_path / "bad.obj").write_text("v 1 two 3\n")
    with pytest.raises(ObjFormatError):
        load_obj_file(str(tmp_path), "bad.obj")


def test_defaults():
    material = Material()
    assert material.uv_transform == make_identity()
    assert material.color == Vector4(1.0, 1.0, 1.0, 1.0)
    assert DirectionalLight().intensity == 1.0
    assert ModelData().vertices == []
    assert VertexData().normal == Vector3()
    assert ModelData().vertices is not ModelData().vertices