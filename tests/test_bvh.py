import math

import pytest

from virtualrig.bvh import Bvh, BvhError, ChannelType, motion_name_from_path

SAMPLE = """HIERARCHY
ROOT Hips
{
\tOFFSET 0.00 0.00 0.00
\tCHANNELS 6 Xposition Yposition Zposition Zrotation Xrotation Yrotation
\tJOINT Chest
\t{
\t\tOFFSET 0.00 5.00 0.00
\t\tCHANNELS 3 Zrotation Xrotation Yrotation
\t\tEnd Site
\t\t{
\t\t\tOFFSET 0.00 3.00 0.00
\t\t}
\t}
\tJOINT Leg
\t{
\t\tOFFSET 2.00 -1.00 0.00
\t\tCHANNELS 3 Zrotation Xrotation Yrotation
\t\tEnd Site
\t\t{
\t\t\tOFFSET 0.00 -4.00 0.00
\t\t}
\t}
}
MOTION
Frames: 2
Frame Time: 0.033333
0 0 0 0 0 0 0 0 0 0 0 0
1 2 3 0 0 0 90 0 0 0 0 0
"""


@pytest.fixture
def bvh():
    return Bvh.parse(SAMPLE, "data/walk.bvh")


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _columns(frame):
    return [tuple(frame[r][c] for r in range(3)) for c in range(3)]


def test_hierarchy(bvh):
    assert [j.name for j in bvh.joints] == ["Hips", "Chest", "Leg"]
    hips, chest, leg = bvh.joints
    assert hips.parent is None
    assert chest.parent is hips and leg.parent is hips
    assert hips.children == [chest, leg]
    assert chest.offset == (0.0, 5.0, 0.0)
    assert leg.offset == (2.0, -1.0, 0.0)
    assert chest.has_site and chest.site == (0.0, 3.0, 0.0)
    assert not hips.has_site
    assert [j.index for j in bvh.joints] == [0, 1, 2]


def test_channels(bvh):
    assert bvh.num_channels == 12
    assert [c.index for c in bvh.channels] == list(range(12))
    assert bvh.channels[0].type is ChannelType.X_POSITION
    assert bvh.channels[3].type is ChannelType.Z_ROTATION
    assert bvh.channels[6].joint is bvh.joints[1]
    assert len(bvh.joints[0].channels) == 6
    assert ChannelType("Yrotation") is ChannelType.Y_ROTATION
    assert ChannelType.Y_ROTATION.is_rotation
    assert not ChannelType.Y_POSITION.is_rotation


def test_motion_values(bvh):
    assert bvh.num_frames == 2
    assert bvh.interval == pytest.approx(0.033333)
    assert bvh.motion(1, 0) == 1.0
    assert bvh.motion(1, 2) == 3.0
    assert bvh.motion(1, 6) == 90.0
    assert bvh.motion(0, 11) == 0.0


def test_set_motion_round_trip(bvh):
    bvh.set_motion(0, 4, 12.5)
    assert bvh.motion(0, 4) == 12.5


def test_motion_out_of_range(bvh):
    with pytest.raises(IndexError):
        bvh.motion(2, 0)
    with pytest.raises(IndexError):
        bvh.set_motion(0, 12, 1.0)


def test_joint_lookup(bvh):
    assert bvh.joint(0).name == "Hips"
    assert bvh.joint("Leg") is bvh.joints[2]
    assert bvh.joint("Missing") is None
    with pytest.raises(IndexError):
        bvh.joint(5)


def test_names_from_path(bvh):
    assert bvh.file_name == "data/walk.bvh"
    assert bvh.motion_name == "walk"
    assert motion_name_from_path("C:\\data\\run.bvh") == "run"
    assert motion_name_from_path("a.b/walk") == "walk"
    assert motion_name_from_path("noext") == "noext"


def test_load_file(tmp_path):
    path = tmp_path / "jump.bvh"
    path.write_text(SAMPLE)
    loaded = Bvh.load(path)
    assert loaded.motion_name == "jump"
    assert loaded.num_frames == 2
    assert [j.name for j in loaded.joints] == ["Hips", "Chest", "Leg"]


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Bvh.load(tmp_path / "absent.bvh")


@pytest.mark.parametrize(
    "text",
    [
        SAMPLE.replace("Frames: 2", "Framez: 2"),
        SAMPLE.replace("Frame Time: 0.033333", "Time: 0.033333"),
        SAMPLE.replace("1 2 3 0 0 0 90 0 0 0 0 0", "1 2 3"),
        SAMPLE.replace("Xrotation Yrotation\n\tJOINT", "Xrotation Wrotation\n\tJOINT"),
        SAMPLE.split("MOTION")[0],
        "ROOT\n{\n}\nMOTION\nFrames: 0\nFrame Time: 1\n",
        "OFFSET 1 2 3\nMOTION\nFrames: 0\nFrame Time: 1\n",
    ],
)
def test_malformed_input(text):
    with pytest.raises(BvhError):
        Bvh.parse(text)


def test_pose_rest_positions(bvh):
    positions = bvh.pose(0)
    assert positions[1] == pytest.approx(bvh.joints[1].offset)
    assert positions[2] == pytest.approx(bvh.joints[2].offset)
    assert bvh.joints[1].world_position == positions[1]


def test_pose_root_translation(bvh):
    positions = bvh.pose(1)
    root_move = [bvh.motion(1, c) for c in range(3)]
    for joint in bvh.joints[1:]:
        expected = tuple(o + t for o, t in zip(joint.offset, root_move))
        assert positions[joint.index] == pytest.approx(expected)


def test_pose_root_rotation(bvh):
    bvh.set_motion(0, 3, 90.0)
    chest = bvh.pose(0)[1]
    assert math.dist(chest, (0.0, 0.0, 0.0)) == pytest.approx(5.0)
    assert chest == pytest.approx((-5.0, 0.0, 0.0), abs=1e-9)


def test_pose_scale_and_translation(bvh):
    plain = bvh.pose(0)
    bvh.scale = (2.0, 2.0, 2.0)
    scaled = bvh.pose(0)
    for a, b in zip(plain[1:], scaled[1:]):
        assert b == pytest.approx(tuple(2 * v for v in a))
    bvh.scale = (1.0, 1.0, 1.0)
    bvh.translation = (1.0, 2.0, 3.0)
    shifted = bvh.pose(0)
    for a, b in zip(plain, shifted):
        assert b == pytest.approx(tuple(v + t for v, t in zip(a, bvh.translation)))


def test_local_frame_is_orthonormal(bvh):
    bvh.set_motion(1, 4, 30.0)
    bvh.pose(1)
    for joint in bvh.joints:
        cols = _columns(joint.local_frame)
        for i in range(3):
            for j in range(3):
                assert _dot(cols[i], cols[j]) == pytest.approx(
                    1.0 if i == j else 0.0, abs=1e-9
                )


def test_leaf_bone_points_at_site(bvh):
    bvh.pose(0)
    z_axis = _columns(bvh.joints[1].local_frame)[2]
    assert z_axis == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_pose_errors(bvh):
    with pytest.raises(IndexError):
        bvh.pose(2)
    with pytest.raises(BvhError):
        Bvh().pose(0)


def test_empty_bvh():
    empty = Bvh()
    assert empty.num_frames == 0
    assert empty.num_channels == 0
    assert empty.joint("Hips") is None