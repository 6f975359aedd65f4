import time
from unittest import mock
from uuid import RFC_4122, UUID

from mzd2.paths import seltrix_resource_path, tex_resource_path
from mzd2.uuids import generate_res_uuid, generate_uuid, uuid7

FIXED_NS = 1_700_000_000_000_000_000
A = b"\x00" * 10
B = b"\xff" * 10


def test_uuid7_layout_all_zero():
    with mock.patch("time.time_ns", return_value=0), mock.patch("os.urandom", return_value=A):
        value = uuid7()
    assert value == UUID("00000000-0000-7000-8000-000000000000")


def test_uuid7_version_and_variant():
    value = uuid7()
    assert value.version == 7
    assert value.variant == RFC_4122


def test_uuid7_timestamp_is_now():
    before = time.time_ns() // 1_000_000
    value = uuid7()
    after = time.time_ns() // 1_000_000
    assert before <= value.int >> 80 <= after


def test_uuid7_is_time_ordered():
    with mock.patch("os.urandom", return_value=B):
        with mock.patch("time.time_ns", return_value=FIXED_NS):
            early = uuid7()
        with mock.patch("time.time_ns", return_value=FIXED_NS + 5_000_000):
            late = uuid7()
    assert early < late


def test_generate_uuid_skips_known():
    with mock.patch("time.time_ns", return_value=FIXED_NS), mock.patch(
        "os.urandom", side_effect=[A, A, B]
    ):
        first = uuid7()
        result = generate_uuid({first})
    assert result != first
    assert result.int >> 80 == first.int >> 80
    assert result.version == 7


def test_generate_uuid_fresh_not_in_check():
    known = {uuid7() for _ in range(5)}
    result = generate_uuid(known)
    assert result not in known


def test_generate_res_uuid_skips_existing_texture(tmp_path):
    map_path = tmp_path / "world.json"
    with mock.patch("time.time_ns", return_value=FIXED_NS), mock.patch(
        "os.urandom", side_effect=[A, A, B]
    ):
        taken = uuid7()
        tex = tex_resource_path(map_path, taken)
        tex.parent.mkdir(parents=True)
        tex.write_bytes(b"")
        result = generate_res_uuid(set(), map_path)
    assert result != taken
    assert not tex_resource_path(map_path, result).exists()
    assert result.version == 7


def test_generate_res_uuid_skips_dangling_selection_link(tmp_path):
    map_path = tmp_path / "world.json"
    with mock.patch("time.time_ns", return_value=FIXED_NS), mock.patch(
        "os.urandom", side_effect=[A, A, B]
    ):
        taken = uuid7()
        sel = seltrix_resource_path(map_path, taken)
        sel.parent.mkdir(parents=True)
        sel.symlink_to(tmp_path / "missing-target")
        result = generate_res_uuid(set(), map_path)
    assert result != taken
    assert result.int >> 80 == taken.int >> 80


def test_generate_res_uuid_without_files(tmp_path):
    known = {uuid7()}
    result = generate_res_uuid(known, tmp_path / "m.json")
    assert result not in known
    assert result.version == 7