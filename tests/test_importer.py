import math

import pytest

from meshstage.importer import Importer, MeshImportError, parse_obj

QUAD = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""

TWO_OBJECTS = """\
o first
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
o second
v 0 0 1
v 1 0 1
v 0 1 1
v 1 1 1
f 4 5 6
f 5 7 6
"""


def check_invariants(data):
    assert len(data.normals) == len(data.positions)
    assert len(data.indices) % 3 == 0
    assert sum(mesh.num_indices for mesh in data.meshes) == len(data.indices)
    for mesh in data.meshes:
        local = data.indices[mesh.base_index : mesh.base_index + mesh.num_indices]
        assert all(0 <= index for index in local)
        assert all(mesh.base_vertex + index < len(data.positions) for index in local)


def test_quad_is_triangulated_and_joined():
    data = parse_obj(QUAD)
    check_invariants(data)
    assert len(data.meshes) == 1
    assert len(data.positions) == 4
    assert data.meshes[0].num_indices == 2 * 3


def test_generated_normals_are_unit_length():
    data = parse_obj(QUAD)
    for normal in data.normals:
        assert math.isclose(math.hypot(*normal), 1.0, rel_tol=1e-9)


def test_flat_ccw_face_normal_points_up_z():
    data = parse_obj(QUAD)
    for normal in data.normals:
        assert normal == pytest.approx((0.0, 0.0, 1.0))


def test_explicit_normals_are_kept():
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 1 0\nf 1//1 2//1 3//1\n"
    data = parse_obj(text)
    check_invariants(data)
    assert set(data.normals) == {(0.0, 1.0, 0.0)}


def test_texture_coordinates_are_ignored():
    with_uv = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvt 1 0\nvt 0 1\nf 1/1 2/2 3/3\n"
    without_uv = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    assert parse_obj(with_uv) == parse_obj(without_uv)


def test_negative_indices_match_positive():
    negative = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n"
    positive = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    assert parse_obj(negative) == parse_obj(positive)


def test_comments_and_blank_lines_are_skipped():
    commented = "# model\n\n" + QUAD.replace("f 1 2 3 4", "f 1 2 3 4 # face")
    assert parse_obj(commented) == parse_obj(QUAD)


def test_objects_become_separate_meshes():
    data = parse_obj(TWO_OBJECTS)
    check_invariants(data)
    assert len(data.meshes) == 2
    first, second = data.meshes
    assert second.base_index == first.num_indices
    assert second.base_vertex == first.base_vertex + 3


def test_points_and_lines_are_ignored():
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nl 1 2\np 1\nf 1 2 3\n"
    data = parse_obj(text)
    assert data == parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")


def test_no_faces_is_an_error():
    with pytest.raises(MeshImportError):
        parse_obj("v 0 0 0\nv 1 0 0\n")


def test_out_of_range_index_is_an_error():
    with pytest.raises(MeshImportError):
        parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 9\n")


def test_zero_index_is_an_error():
    with pytest.raises(MeshImportError):
        parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n")


def test_bad_coordinate_is_an_error():
    with pytest.raises(MeshImportError):
        parse_obj("v 0 zero 0\n")


def test_load_from_file_matches_parse(tmp_path):
    model = tmp_path / "quad.obj"
    model.write_text(QUAD)
    assert Importer().load_mesh_from_file(str(model)) == parse_obj(QUAD)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MeshImportError):
        Importer().load_mesh_from_file(str(tmp_path / "absent.obj"))